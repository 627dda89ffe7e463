"""
renderer.py - draw the world canvas (grass, trees, campfire, hut, player, night)
"""
import pygame
from config import PAL, TILE, GRID_W, GRID_H, WORLD_W, WORLD_H
from world import get_tile_surf

CAMPFIRE_AT = (4, 3)
HUT_AT      = (2, 2)


def draw_grass(surf):
    for ty in range(GRID_H):
        for tx in range(GRID_W):
            surf.blit(get_tile_surf(tx, ty), (tx*TILE, ty*TILE))

def draw_tree(surf, tx, ty):
    x, y = tx*TILE, ty*TILE
    # trunk
    pygame.draw.rect(surf, PAL["tree_trunk"], (x, y+6, 4, 6))
    # pixel canopy
    pygame.draw.rect(surf, PAL["tree_top"], (x-2, y+2, 12, 10))

def draw_campfire(surf, tx, ty):
    x, y = tx*TILE, ty*TILE
    pygame.draw.rect(surf, PAL["tree_trunk"], (x, y, 6, 2))
    pygame.draw.rect(surf, PAL["fire"], (x+1, y-3, 4, 3))

def draw_hut(surf, tx, ty):
    x, y = tx*TILE, ty*TILE
    pygame.draw.rect(surf, PAL["hut"], (x, y, TILE, TILE))
    pygame.draw.rect(surf, PAL["hut_door"], (x+4, y+6, 4, 6))

def draw_player(surf, tx, ty):
    x, y = tx*TILE, ty*TILE
    pygame.draw.rect(surf, PAL["player"], (x, y, TILE, TILE))
    pygame.draw.rect(surf, PAL["eye"], (x+5, y+4, 2, 2))

def draw_night(surf, alpha, night_surf=None):
    if alpha <= 0: return
    if night_surf is None:
        night_surf = pygame.Surface((WORLD_W, WORLD_H), pygame.SRCALPHA)
    night_surf.fill((*PAL["night"], min(255, alpha)))
    surf.blit(night_surf, (0, 0))

def draw_world(surf, world, player, night_alpha=0, night_surf=None):
    """Full scene onto a WORLD_W x WORLD_H surface, back to front."""
    draw_grass(surf)
    for t in world.trees:
        if t["alive"]: draw_tree(surf, t["x"], t["y"])
    if player.has_campfire: draw_campfire(surf, *CAMPFIRE_AT)
    if player.has_hut:      draw_hut(surf, *HUT_AT)
    draw_player(surf, player.x, player.y)
    draw_night(surf, night_alpha, night_surf)
