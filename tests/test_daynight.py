import pytest

from config import DAY_MS, NIGHT_REFRESH_MS
from daynight import DayNight, night_opacity, phase_label


def test_darkest_at_start_of_day():
    assert night_opacity(0) == pytest.approx(0.6)
    assert night_opacity(DAY_MS) == pytest.approx(0.6)


def test_daytime_floor():
    assert night_opacity(DAY_MS // 2) == pytest.approx(0.25)
    assert night_opacity(DAY_MS // 4) == pytest.approx(0.25)


def test_campfire_lightens_by_fixed_amount():
    assert night_opacity(0, True) == pytest.approx(0.48)
    assert night_opacity(DAY_MS // 2, True) == pytest.approx(0.13)


def test_opacity_stays_in_range():
    for ms in range(0, DAY_MS, 250):
        assert 0.25 <= night_opacity(ms) <= 0.6 + 1e-9


def test_phase_labels():
    assert phase_label(0) == "Night"
    assert phase_label(DAY_MS // 5) == "Dawn"
    assert phase_label(DAY_MS // 2) == "Day"
    assert phase_label(DAY_MS * 4 // 5) == "Dusk"
    assert phase_label(DAY_MS - 1) == "Night"


def test_refresh_is_throttled():
    dn = DayNight(1000)
    assert dn.opacity == pytest.approx(0.6)
    assert dn.update(1000 + NIGHT_REFRESH_MS - 1, False) is False
    assert dn.update(1000 + DAY_MS // 2, False) is True
    assert dn.opacity == pytest.approx(0.25)


def test_campfire_applies_on_next_refresh():
    dn = DayNight(0)
    dn.update(NIGHT_REFRESH_MS, True)
    assert dn.opacity < night_opacity(NIGHT_REFRESH_MS)
    assert dn.alpha() == round(dn.opacity * 255)
