"""
sim.py - one idle tick: day counter, hunger/health, auto-harvest, tree regrowth
"""
from config import TICKS_PER_DAY


def tick(world, player):
    """Advance the world by one tick. Returns event names for notifications."""
    if player.dead: return []
    events = []

    # Day counter
    player.ticks += 1
    if player.ticks % TICKS_PER_DAY == 0:
        player.day += 1
        events.append("day")

    # Hunger and health
    if player.starve_step():
        events.append("dead")

    # Auto-harvest
    target, best = world.nearest(player.x, player.y)
    if target:
        if best > 1:
            player.step_towards(target["x"], target["y"])
            events.append("step")
        else:
            fell = world.chop(target)
            player.wood += player.wood_rate()
            events.append("chop")
            if fell: events.append("fell")

    # Respawn, also counts down a tree felled this tick
    if world.regrow():
        events.append("regrow")
    return events


def run_ticks(world, player, n):
    """Headless fast-forward; stops early once the player is dead."""
    log = []
    for _ in range(n):
        if player.dead: break
        log.append(tick(world, player))
    return log
