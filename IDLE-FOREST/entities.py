"""
entities.py - Player: position, survival stats, wood and upgrades
"""
from config import GRID_W, GRID_H, HUNGER_DECAY, HEALTH_DECAY, BASE_WOOD_RATE, UPGRADES


def upgrade(uid):
    for u in UPGRADES:
        if u["id"] == uid: return u
    raise KeyError(uid)


class Player:
    def __init__(self, x=None, y=None):
        self.x = GRID_W // 2 if x is None else int(x)
        self.y = GRID_H // 2 if y is None else int(y)

        self.wood   = 0.0
        self.hunger = 100.0
        self.health = 100.0
        self.has_campfire = False
        self.has_hut      = False

        self.day   = 1
        self.ticks = 0      # world ticks since start, not saved
        self.dead  = False

    # ── Rates ──
    def hunger_drop(self):
        return HUNGER_DECAY * 0.7 if self.has_hut else HUNGER_DECAY

    def wood_rate(self):
        return BASE_WOOD_RATE + (0.5 if self.has_campfire else 0) + (0.25 if self.has_hut else 0)

    # ── Survival ──
    def starve_step(self):
        drop = self.hunger_drop()
        starving = self.hunger - drop <= 0
        self.hunger = max(0, self.hunger - drop)
        if starving:
            self.health = max(0, self.health - HEALTH_DECAY)
        else:
            self.health = min(100, self.health + (1 if self.has_campfire else 0))
        if self.health <= 0: self.dead = True
        return self.dead

    # ── Movement ──
    def step_towards(self, tx, ty):
        """One tile along the longer axis; y on a tie."""
        dx, dy = tx - self.x, ty - self.y
        if abs(dx) > abs(dy): self.x += (dx > 0) - (dx < 0)
        else:                 self.y += (dy > 0) - (dy < 0)

    # ── Upgrades ──
    def owns(self, uid):
        return getattr(self, upgrade(uid)["flag"])

    def can_buy(self, uid):
        u = upgrade(uid)
        return not getattr(self, u["flag"]) and self.wood >= u["cost"]

    def buy(self, uid):
        if not self.can_buy(uid): return False
        u = upgrade(uid)
        self.wood -= u["cost"]
        setattr(self, u["flag"], True)
        return True

    # ── Save ──
    def save(self):
        return {
            "wood":self.wood, "hunger":self.hunger, "health":self.health,
            "hasCampfire":self.has_campfire, "hasHut":self.has_hut,
            "day":self.day,
            "player":{"x":self.x, "y":self.y},
        }

    @classmethod
    def load(cls, data):
        pos = data.get("player") or {}
        p = cls(pos.get("x"), pos.get("y"))
        p.wood   = _num(data.get("wood"), 0)
        p.hunger = _num(data.get("hunger"), 100)
        p.health = _num(data.get("health"), 100)
        p.has_campfire = bool(data.get("hasCampfire"))
        p.has_hut      = bool(data.get("hasHut"))
        p.day    = int(_num(data.get("day"), 1))
        p.dead   = p.health <= 0
        return p


def _num(v, default):
    return default if v is None else v
