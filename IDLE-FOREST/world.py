"""
world.py - tree field state and grass tile cache
"""
import random
import pygame
from config import PAL, TILE, GRID_W, GRID_H, TREE_COUNT


def dist(ax, ay, bx, by):
    """Manhattan distance in tiles"""
    return abs(ax - bx) + abs(ay - by)


# ─────────────────────────────────────────────────────
#  TILE CACHE
# ─────────────────────────────────────────────────────
_tile_cache = {}

def _make_tile(shade):
    surf = pygame.Surface((TILE, TILE))
    surf.fill(PAL["grass1"] if shade == 0 else PAL["grass2"])
    return surf

def get_tile_surf(tx, ty):
    key = (tx + ty) % 2
    if key not in _tile_cache:
        _tile_cache[key] = _make_tile(key)
    return _tile_cache[key]


# ─────────────────────────────────────────────────────
#  TREES
# ─────────────────────────────────────────────────────
def _place(tree, rng):
    tree["x"] = rng.randint(1, GRID_W - 2)
    tree["y"] = rng.randint(2, GRID_H - 2)

def make_trees(count=TREE_COUNT, rng=None):
    rng = rng or random
    trees = []
    for i in range(count):
        t = {"id":i, "x":0, "y":0, "hp":rng.randint(2, 5), "alive":True, "respawn":0}
        _place(t, rng)
        trees.append(t)
    return trees


# ─────────────────────────────────────────────────────
#  WORLD CLASS
# ─────────────────────────────────────────────────────
class World:
    def __init__(self, trees=None, rng=None):
        self.rng   = rng or random.Random()
        self.trees = trees if trees is not None else make_trees(rng=self.rng)

    def reset(self):
        self.trees = make_trees(rng=self.rng)

    def nearest(self, x, y):
        """Closest alive tree and its distance; first one wins a tie."""
        target = None; best = 999
        for t in self.trees:
            if not t["alive"]: continue
            d = dist(x, y, t["x"], t["y"])
            if d < best:
                best = d; target = t
        return target, best

    def chop(self, tree):
        tree["hp"] -= 1
        if tree["hp"] <= 0:
            tree["alive"]   = False
            tree["respawn"] = self.rng.randint(6, 16)
            return True
        return False

    def regrow(self):
        back = []
        for t in self.trees:
            if t["alive"]: continue
            t["respawn"] -= 1
            if t["respawn"] <= 0:
                t["alive"] = True
                t["hp"]    = self.rng.randint(2, 5)
                _place(t, self.rng)
                back.append(t)
        return back

    def save(self):
        return [dict(t) for t in self.trees]

    @classmethod
    def from_save(cls, trees, rng=None):
        keep = []
        for i, t in enumerate(trees):
            keep.append({
                "id":      _num(t.get("id"), i),
                "x":       int(_num(t.get("x"), 1)),
                "y":       int(_num(t.get("y"), 2)),
                "hp":      int(_num(t.get("hp"), 1)),
                "alive":   bool(_num(t.get("alive"), True)),
                "respawn": int(_num(t.get("respawn"), 0)),
            })
        return cls(keep, rng)


def _num(v, default):
    return default if v is None else v
