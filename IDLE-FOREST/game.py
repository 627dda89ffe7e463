"""
game.py - main Game class: timers, events, update, draw
"""
import sys
import traceback
import random
import pygame

from config import (
    SW, SH, FPS, SAVE, TICK_MS, AUTOSAVE_MS, MAX_CATCHUP,
    WORLD_W, WORLD_H, SCALE, TOPBAR_H, PAL, UPGRADES,
)
from world import World
from entities import Player, upgrade
from sim import run_ticks
from daynight import DayNight, phase_label
from storage import Store, load_game, save_game
from renderer import draw_world
from ui import draw_topbar, draw_actions, draw_footer, draw_notes, draw_gameover, hit_action

NOTES = {
    "fell":   "Tree felled!",
    "regrow": "A tree grew back",
    "dead":   "You fainted from hunger!",
}


class Game:
    def __init__(self, save_path=SAVE, seed=None):
        pygame.init()
        self.screen = pygame.display.set_mode((SW,SH))
        pygame.display.set_caption("Idle Forest")
        self.clock = pygame.time.Clock()

        def make_font(size, bold=False):
            for fn in ["DejaVu Sans","FreeSans","Arial",None]:
                try: return pygame.font.SysFont(fn, size, bold=bold)
                except Exception: pass
            return pygame.font.Font(None, size)

        self.fonts = (make_font(18,True), make_font(36,True), make_font(13))

        # Pre-allocated surfaces
        self._canvas     = pygame.Surface((WORLD_W, WORLD_H))
        self._night_surf = pygame.Surface((WORLD_W, WORLD_H), pygame.SRCALPHA)
        self._scaled     = pygame.Surface((WORLD_W*SCALE, WORLD_H*SCALE))
        self.world_pos   = (SW//2 - WORLD_W*SCALE//2, TOPBAR_H + 20)

        self.rng   = random.Random(seed)
        self.store = Store(save_path)
        self.world, self.player = load_game(self.store, self.rng)
        if self.world is None:
            self.world = World(rng=self.rng); self.player = Player()

        now = pygame.time.get_ticks()
        self.daynight  = DayNight(now, self.player.has_campfire)
        self.next_tick = now + TICK_MS
        self.next_save = now + AUTOSAVE_MS

        self.notifs  = []   # [msg, remaining, total]
        self._acts   = {}
        self._go_btn = pygame.Rect(0,0,1,1)
        self.running = True

    # ── Notify ──
    def note(self, msg, dur=2.5):
        if self.notifs and self.notifs[-1][0] == msg:
            self.notifs[-1][1] = dur; return
        self.notifs.append([msg, dur, dur])
        if len(self.notifs) > 5:
            self.notifs = self.notifs[-5:]

    # ── Actions ──
    def reset(self):
        self.world.reset()
        self.player = Player()
        self.notifs = []
        self.next_tick = pygame.time.get_ticks() + TICK_MS
        self.note("New forest!")

    def buy(self, uid):
        if self.player.dead: return
        if self.player.buy(uid):
            self.note(f"Built {upgrade(uid)['name']}!")

    def save(self):
        if save_game(self.store, self.world, self.player):
            return True
        self.note("Save failed")
        return False

    # ── Main loop ──
    def run(self):
        while self.running:
            try:
                self._events()
            except Exception:
                traceback.print_exc()

            try:
                self._update(self.clock.get_time() / 1000.0)
            except Exception:
                traceback.print_exc()

            try:
                self._draw()
            except Exception as e:
                print(f"[draw error] {e}")
                traceback.print_exc()

            self.clock.tick(FPS)

        self.save()
        pygame.quit(); sys.exit()

    # ── Events ──
    def _events(self):
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                self.running = False; return

            if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                if self.player.dead:
                    if self._go_btn.collidepoint(ev.pos): self.reset()
                    continue
                act = hit_action(ev.pos, self._acts or None)
                if act == "restart": self.reset()
                elif act:            self.buy(act)

            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE: self.running = False
                elif ev.key == pygame.K_r:    self.reset()
                elif ev.key == pygame.K_F5:
                    if self.save(): self.note("Saved!")
                else:
                    for u in UPGRADES:
                        if ev.unicode == u["key"]: self.buy(u["id"])

    # ── Update ──
    def _update(self, dt):
        now = pygame.time.get_ticks()
        p = self.player

        # Fixed-interval ticks, bounded catch-up after a stall
        due = 0
        while now >= self.next_tick and due < MAX_CATCHUP:
            self.next_tick += TICK_MS; due += 1
        if now >= self.next_tick:
            self.next_tick = now + TICK_MS
        for events in run_ticks(self.world, p, due):
            if "day" in events: self.note(f"Day {p.day}")
            for ev in events:
                if ev in NOTES: self.note(NOTES[ev])

        self.daynight.update(now, p.has_campfire)

        if now >= self.next_save:
            self.next_save = now + AUTOSAVE_MS
            self.save()

        self.notifs = [[m,t-dt,mt] for m,t,mt in self.notifs if t > 0]

    # ── Draw ──
    def _draw(self):
        surf  = self.screen
        mouse = pygame.mouse.get_pos()
        p = self.player

        surf.fill(PAL["ui_bg"])
        draw_world(self._canvas, self.world, p, self.daynight.alpha(), self._night_surf)
        pygame.transform.scale(self._canvas, (WORLD_W*SCALE, WORLD_H*SCALE), self._scaled)
        surf.blit(self._scaled, self.world_pos)

        phase = phase_label(self.daynight.elapsed(pygame.time.get_ticks()))
        draw_topbar(surf, self.fonts, p, phase)
        self._acts = draw_actions(surf, self.fonts, mouse, p)
        draw_footer(surf, self.fonts)
        draw_notes(surf, self.fonts, self.notifs)

        if p.dead:
            self._go_btn = draw_gameover(surf, self.fonts, mouse, p)

        pygame.display.flip()
