"""
daynight.py - wall-clock day/night oscillator for the darkness overlay
"""
import math
from config import DAY_MS, NIGHT_REFRESH_MS


def night_opacity(elapsed_ms, has_campfire=False):
    """Overlay opacity 0.25..0.6, 0.12 lighter with a campfire. Darkest at phase 0."""
    phase = (elapsed_ms % DAY_MS) / DAY_MS
    night = max(0.0, math.cos(phase * math.pi * 2))
    base = 0.25 + 0.35 * night
    if has_campfire: base = max(0.0, base - 0.12)
    return base

def phase_label(elapsed_ms):
    phase = (elapsed_ms % DAY_MS) / DAY_MS
    if   phase < 1/6:  return "Night"
    elif phase < 0.25: return "Dawn"
    elif phase < 0.75: return "Day"
    elif phase < 5/6:  return "Dusk"
    else:              return "Night"


class DayNight:
    def __init__(self, start_ms, has_campfire=False):
        self.start   = start_ms
        self.last    = start_ms
        self.opacity = night_opacity(0, has_campfire)

    def elapsed(self, now_ms):
        return now_ms - self.start

    def update(self, now_ms, has_campfire):
        """Recompute at most every NIGHT_REFRESH_MS. Returns True when refreshed."""
        if now_ms - self.last < NIGHT_REFRESH_MS: return False
        self.last = now_ms
        self.opacity = night_opacity(self.elapsed(now_ms), has_campfire)
        return True

    def alpha(self):
        return int(round(self.opacity * 255))
