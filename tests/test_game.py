import json

import pygame
import pytest

from config import SW, SH, TICK_MS, AUTOSAVE_MS, MAX_CATCHUP, SAVE_KEY, COST_CAMPFIRE
from entities import Player
from storage import Store
import ui


@pytest.fixture
def clock(monkeypatch):
    now = [0]
    monkeypatch.setattr(pygame.time, "get_ticks", lambda: now[0])
    return now


@pytest.fixture
def game(tmp_path, clock):
    from game import Game
    g = Game(save_path=str(tmp_path / "kv.json"), seed=7)
    yield g
    pygame.quit()


def test_fresh_game_without_save(game):
    assert game.player.day == 1 and game.player.wood == 0
    assert len(game.world.trees) == 12


def test_ticks_on_fixed_interval(game, clock):
    clock[0] = TICK_MS - 1
    game._update(0.016)
    assert game.player.ticks == 0
    clock[0] = TICK_MS
    game._update(0.016)
    assert game.player.ticks == 1


def test_catch_up_is_bounded(game, clock):
    clock[0] = TICK_MS * 100
    game._update(0.016)
    assert game.player.ticks == MAX_CATCHUP
    assert game.next_tick == clock[0] + TICK_MS


def test_autosave_writes_store(game, clock, tmp_path):
    clock[0] = AUTOSAVE_MS
    game._update(0.016)
    blob = json.loads(Store(str(tmp_path / "kv.json")).get(SAVE_KEY))
    assert blob["day"] == 1 and len(blob["trees"]) == 12


def test_saved_game_is_restored(tmp_path, clock):
    from game import Game
    g = Game(save_path=str(tmp_path / "kv.json"), seed=1)
    g.player.wood = 33; g.player.day = 5
    g.save()
    pygame.quit()
    g2 = Game(save_path=str(tmp_path / "kv.json"), seed=2)
    assert g2.player.wood == 33 and g2.player.day == 5
    assert g2.world.trees == g.world.trees
    pygame.quit()


def test_buy_and_reset(game):
    game.player.wood = COST_CAMPFIRE
    game.buy("campfire")
    assert game.player.has_campfire and game.player.wood == 0
    assert game.notifs[-1][0] == "Built Campfire!"
    game.reset()
    assert not game.player.has_campfire
    assert game.player.hunger == 100


def test_dead_player_cannot_buy(game):
    game.player.wood = 100; game.player.dead = True
    game.buy("hut")
    assert not game.player.has_hut


def test_draw_smoke(game):
    game._draw()
    game.player.dead = True
    game._draw()
    assert game._go_btn.width > 1


def test_action_buttons_fit_and_hit():
    rects = ui.action_rects()
    assert set(rects) == {"campfire", "hut", "restart"}
    screen = pygame.Rect(0, 0, SW, SH)
    for k, r in rects.items():
        assert screen.contains(r)
        assert ui.hit_action(r.center, rects) == k
    assert ui.hit_action((0, 0), rects) is None


def test_upgrade_keys_and_restart_via_events(game):
    game.player.wood = 80
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_2, unicode="2", mod=0))
    game._events()
    assert game.player.has_hut and game.player.wood == 30
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r, unicode="r", mod=0))
    game._events()
    assert isinstance(game.player, Player) and not game.player.has_hut


def test_cli_args(tmp_path):
    from main import _parse_args
    args = _parse_args(["--save", str(tmp_path / "x.json"), "--seed", "3"])
    assert args.save.endswith("x.json") and args.seed == 3


def test_topbar_warns_on_low_hunger_and_health(game):
    p = game.player
    p.hunger, p.health = 21, 31
    assert [w for _, _, w in ui.stat_rows(p)] == [False, False, False, False]
    p.hunger, p.health = 20, 30
    rows = ui.draw_topbar(game.screen, game.fonts, p, "Night")
    assert rows[0][1] == "1 Night"
    assert [w for _, _, w in rows] == [False, False, True, True]


def _click(pos):
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos))


def test_click_on_unaffordable_campfire_does_nothing(game):
    game.player.wood = 5
    _click(ui.action_rects()["campfire"].center)
    game._events()
    assert game.player.wood == 5 and not game.player.has_campfire
    assert game.notifs == []


def test_click_buys_campfire(game):
    game.player.wood = COST_CAMPFIRE
    game._draw()
    _click(game._acts["campfire"].center)
    game._events()
    assert game.player.has_campfire and game.player.wood == 0


def test_key_1_buys_campfire(game):
    game.player.wood = COST_CAMPFIRE
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_1, unicode="1", mod=0))
    game._events()
    assert game.player.has_campfire and game.player.wood == 0


def test_gameover_restart_button(game):
    game.player.dead = True; game.player.day = 4
    game._draw()
    _click((0, 0))
    game._events()
    assert game.player.dead
    _click(game._go_btn.center)
    game._events()
    assert not game.player.dead and game.player.day == 1
    assert game.notifs[-1][0] == "New forest!"


def test_f5_saves(game, tmp_path):
    game.player.wood = 12
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_F5, unicode="", mod=0))
    game._events()
    blob = json.loads(Store(str(tmp_path / "kv.json")).get(SAVE_KEY))
    assert blob["wood"] == 12
    assert game.notifs[-1][0] == "Saved!"


def test_escape_quits_and_run_saves(game, tmp_path):
    game.player.day = 3
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, unicode="\x1b", mod=0))
    game._events()
    assert game.running is False
    with pytest.raises(SystemExit):
        game.run()
    blob = json.loads(Store(str(tmp_path / "kv.json")).get(SAVE_KEY))
    assert blob["day"] == 3
