"""
config.py - game constants, palette and upgrade data
"""
import os

# ─────────────────────────────────────────────────────
#  GRID
# ─────────────────────────────────────────────────────
TILE   = 16                   # base tile size (pixel art)
GRID_W = 20                   # grid width in tiles
GRID_H = 12                   # grid height in tiles
WORLD_W = GRID_W * TILE
WORLD_H = GRID_H * TILE
SCALE  = 2                    # world canvas zoom on screen

TREE_COUNT = 12

# ─────────────────────────────────────────────────────
#  TIMING / RATES
# ─────────────────────────────────────────────────────
TICK_MS          = 500        # game tick every 0.5s (idle-friendly)
HUNGER_DECAY     = 1          # hunger per tick
HEALTH_DECAY     = 2          # health per tick while hunger is 0
BASE_WOOD_RATE   = 1          # wood per chop

DAY_MS           = 30000      # 30s = 1 day
TICKS_PER_DAY    = round(DAY_MS / TICK_MS)
NIGHT_REFRESH_MS = 200
AUTOSAVE_MS      = 4000
MAX_CATCHUP      = 8          # ticks replayed at most per frame after a stall

FPS = 60

# ─────────────────────────────────────────────────────
#  COSTS
# ─────────────────────────────────────────────────────
COST_CAMPFIRE = 20
COST_HUT      = 50

UPGRADES = [
    {"id":"campfire", "name":"Campfire", "cost":COST_CAMPFIRE, "flag":"has_campfire", "key":"1"},
    {"id":"hut",      "name":"Hut",      "cost":COST_HUT,      "flag":"has_hut",      "key":"2"},
]

# ─────────────────────────────────────────────────────
#  SAVE
# ─────────────────────────────────────────────────────
SAVE_KEY = "idle-forest-save"
SAVE = os.environ.get("IDLE_FOREST_SAVE") or os.path.join(os.path.expanduser("~"), ".idle_forest_store.json")

# ─────────────────────────────────────────────────────
#  LAYOUT
# ─────────────────────────────────────────────────────
TOPBAR_H = 48
ACTIONS_H = 60
FOOTER_H = 28
SW = WORLD_W * SCALE + 40
SH = TOPBAR_H + WORLD_H * SCALE + 40 + ACTIONS_H + FOOTER_H

# ─────────────────────────────────────────────────────
#  PALETTE
# ─────────────────────────────────────────────────────
PAL = {
    "grass1":     (54, 108, 62),     # #366c3e
    "grass2":     (47, 93, 54),      # #2f5d36
    "tree_trunk": (91, 58, 30),      # #5b3a1e
    "tree_top":   (46, 125, 50),     # #2e7d32
    "fire":       (255, 111, 0),     # #ff6f00
    "hut":        (121, 85, 72),     # #795548
    "hut_door":   (62, 39, 35),      # #3e2723
    "player":     (30, 136, 229),    # #1e88e5
    "eye":        (255, 255, 255),
    "night":      (0, 0, 0),

    "ui_bg":      (16, 39, 26),      # #10271a
    "ui_bar":     (21, 53, 33),      # #153521
    "ui_border":  (32, 79, 51),      # #204f33
    "ui_label":   (155, 231, 196),   # #9be7c4
    "ui_text":    (224, 242, 241),   # #e0f2f1
    "ui_warn":    (244, 67, 54),     # #f44336
    "ui_tip":     (200, 230, 201),   # #c8e6c9
    "btn":        (27, 94, 32),      # #1b5e20
    "btn_hover":  (46, 125, 50),
    "btn_text":   (232, 245, 233),   # #e8f5e9
    "btn_danger": (183, 28, 28),     # #b71c1c
}
