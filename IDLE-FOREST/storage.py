"""
storage.py - key-value save store (one JSON file) and world snapshot/restore
"""
import json
import os
from config import SAVE, SAVE_KEY
from entities import Player
from world import World


class Store:
    """String values under string keys, kept in a single JSON file."""

    def __init__(self, path=SAVE):
        self.path = path

    def _read(self):
        if not os.path.exists(self.path): return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}

    def get(self, key):
        return self._read().get(key)

    def set(self, key, value):
        try:
            data = self._read()
        except ValueError:
            data = {}   # corrupt store file: start over
        data[key] = value
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
        os.replace(tmp, self.path)


# ─────────────────────────────────────────────────────
#  SNAPSHOT
# ─────────────────────────────────────────────────────
def snapshot(world, player):
    data = player.save()
    data["trees"] = world.save()
    return data

def dump(world, player):
    return json.dumps(snapshot(world, player), ensure_ascii=False)

def restore(raw):
    """Parse a saved blob. Returns (player, trees or None)."""
    s = json.loads(raw)
    return Player.load(s), s.get("trees")


def load_game(store, rng=None):
    """Saved (world, player), or (None, None) when nothing usable is stored."""
    try:
        raw = store.get(SAVE_KEY)
        if not raw: return None, None
        player, trees = restore(raw)
        world = World.from_save(trees, rng) if trees is not None else World(rng=rng)
        return world, player
    except Exception as e:
        print(f"[load] {e}")
        return None, None

def save_game(store, world, player):
    try:
        store.set(SAVE_KEY, dump(world, player))
        return True
    except Exception as e:
        print(f"[save] {e}")
        return False
