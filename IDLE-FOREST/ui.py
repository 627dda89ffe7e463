"""
ui.py - top stat bar, upgrade/restart buttons, tip footer, notifications, game over
"""
import math
import pygame
from config import PAL, SW, SH, TOPBAR_H, ACTIONS_H, FOOTER_H, UPGRADES


# ─────────────────────────────────────────────────────
#  UI HELPERS
# ─────────────────────────────────────────────────────
def _panel(surf, x, y, w, h, alpha=200):
    s = pygame.Surface((w,h), pygame.SRCALPHA)
    s.fill((*PAL["ui_bar"], alpha)); surf.blit(s,(x,y))
    pygame.draw.rect(surf, PAL["ui_border"], (x,y,w,h), 1, border_radius=8)

def _btn(surf, rect, text, font, hover=False, disabled=False, danger=False):
    bc = PAL["btn_danger"] if danger else (PAL["btn_hover"] if hover and not disabled else PAL["btn"])
    if disabled:
        bc = tuple(c//2 for c in bc)    # ~50% opacity on the dark background
    fc = PAL["btn_text"] if not disabled else tuple(c//2 + 40 for c in PAL["btn_text"])
    pygame.draw.rect(surf, bc, rect, border_radius=8)
    t = font.render(text, True, fc)
    surf.blit(t, (rect[0]+rect[2]//2-t.get_width()//2, rect[1]+rect[3]//2-t.get_height()//2))

def _stat(surf, cx, label, value, fonts, warn=False):
    F, Fm, Fs = fonts
    lt = Fs.render(label, True, PAL["ui_label"])
    vt = F.render(str(value), True, PAL["ui_warn"] if warn else PAL["ui_text"])
    surf.blit(lt, (cx-lt.get_width()//2, 6))
    surf.blit(vt, (cx-vt.get_width()//2, 22))


# ─────────────────────────────────────────────────────
#  LAYOUT
# ─────────────────────────────────────────────────────
def action_rects():
    """Button rects keyed by upgrade id plus "restart"."""
    ids = [u["id"] for u in UPGRADES] + ["restart"]
    bw, bh, gap = 150, 40, 8
    total = len(ids)*bw + (len(ids)-1)*gap
    x0 = SW//2 - total//2
    y  = SH - FOOTER_H - ACTIONS_H + (ACTIONS_H-bh)//2
    return {k: pygame.Rect(x0 + i*(bw+gap), y, bw, bh) for i, k in enumerate(ids)}

def hit_action(pos, rects=None):
    rects = rects or action_rects()
    for k, r in rects.items():
        if r.collidepoint(pos): return k
    return None


# ─────────────────────────────────────────────────────
#  HUD
# ─────────────────────────────────────────────────────
def stat_rows(p, phase=""):
    """(label, value, warn) per top-bar column."""
    return [
        ("Day",    p.day if not phase else f"{p.day} {phase}", False),
        ("Wood",   math.floor(p.wood),          False),
        ("Hunger", f"{math.floor(p.hunger)}%",  p.hunger <= 20),
        ("Health", f"{math.floor(p.health)}%",  p.health <= 30),
    ]

def draw_topbar(surf, fonts, p, phase=""):
    pygame.draw.rect(surf, PAL["ui_bar"], (0, 0, SW, TOPBAR_H))
    pygame.draw.line(surf, PAL["ui_border"], (0, TOPBAR_H-1), (SW, TOPBAR_H-1), 1)
    stats = stat_rows(p, phase)
    col_w = SW // len(stats)
    for i, (lbl, val, warn) in enumerate(stats):
        _stat(surf, col_w*i + col_w//2, lbl, val, fonts, warn)
    return stats

def draw_actions(surf, fonts, mouse, p):
    F, Fm, Fs = fonts
    y0 = SH - FOOTER_H - ACTIONS_H
    pygame.draw.rect(surf, PAL["ui_bar"], (0, y0, SW, ACTIONS_H))
    rects = action_rects()
    for u in UPGRADES:
        r = rects[u["id"]]
        off = not p.can_buy(u["id"])
        tail = "built" if p.owns(u["id"]) else u["cost"]
        _btn(surf, r, f"[{u['key']}] {u['name']} ({tail})", Fs, r.collidepoint(mouse), off)
    r = rects["restart"]
    _btn(surf, r, "[R] Restart", Fs, r.collidepoint(mouse), danger=True)
    return rects

def draw_footer(surf, fonts):
    F, Fm, Fs = fonts
    t = Fs.render("Tip: the campfire lightens the night and slowly restores health.", True, PAL["ui_tip"])
    surf.blit(t, (SW//2-t.get_width()//2, SH-FOOTER_H+(FOOTER_H-t.get_height())//2))

def draw_notes(surf, fonts, notifs):
    F, Fm, Fs = fonts
    for i, (msg, rem, tot) in enumerate(notifs[-3:]):
        alpha = min(255, int(rem/tot*255*2.5))
        t = Fs.render(msg, True, PAL["ui_text"])
        _nb = pygame.Surface((t.get_width()+20, t.get_height()+8))
        _nb.set_alpha(min(200, alpha)); _nb.fill(PAL["ui_bg"])
        surf.blit(_nb, (SW//2-_nb.get_width()//2, TOPBAR_H+8+i*28))
        surf.blit(t,   (SW//2-t.get_width()//2,   TOPBAR_H+12+i*28))


# ─────────────────────────────────────────────────────
#  GAME OVER
# ─────────────────────────────────────────────────────
def draw_gameover(surf, fonts, mouse, p):
    F, Fm, Fs = fonts
    ov = pygame.Surface((SW,SH), pygame.SRCALPHA); ov.fill((0,0,0,170)); surf.blit(ov,(0,0))
    pw, ph = 360, 190
    px, py = SW//2-pw//2, SH//2-ph//2
    _panel(surf, px, py, pw, ph, 235)
    t = Fm.render("Game Over", True, PAL["ui_warn"])
    surf.blit(t, (SW//2-t.get_width()//2, py+16))
    s = F.render("You fainted from hunger. Restart?", True, PAL["ui_text"])
    surf.blit(s, (SW//2-s.get_width()//2, py+70))
    d = Fs.render(f"Survived {p.day} day(s)", True, PAL["ui_label"])
    surf.blit(d, (SW//2-d.get_width()//2, py+100))
    br = pygame.Rect(SW//2-80, py+ph-56, 160, 40)
    _btn(surf, br, "Restart", F, br.collidepoint(mouse), danger=True)
    return br
