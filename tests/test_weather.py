from __future__ import annotations

import numpy as np
import pytest

from agrisim.models.enums import Season
from agrisim.services.weather import make_rng, next_weather, round_tenth, season_for_day


@pytest.mark.parametrize(
    ("day", "season"),
    [
        (0, Season.spring),
        (89, Season.spring),
        (90, Season.summer),
        (179, Season.summer),
        (180, Season.autumn),
        (269, Season.autumn),
        (270, Season.winter),
        (364, Season.winter),
        (365, Season.spring),
        (455, Season.summer),
    ],
)
def test_season_for_day(day: int, season: Season) -> None:
    assert season_for_day(day) is season


def test_dry_day_uses_four_draws(scripted) -> None:
    rng = scripted([0.5, 0.9, 0.5, 0.5])

    sample = next_weather(Season.spring, 65.0, rng)

    assert rng.draws == 4
    assert sample.temperature == pytest.approx(18.0)
    assert sample.rainfall == 0.0
    assert sample.humidity == pytest.approx(65.0)
    assert sample.solar == pytest.approx(650.0)
    assert sample.is_rainy is False


def test_rainy_day_draws_magnitude_after_occurrence(scripted) -> None:
    rng = scripted([0.5, 0.1, 0.5, 0.5, 0.5])

    sample = next_weather(Season.spring, 65.0, rng)

    assert rng.draws == 5
    assert sample.rainfall == pytest.approx(7.5)
    assert sample.is_rainy is True


def test_rainfall_rounded_to_tenth(scripted) -> None:
    rng = scripted([0.5, 0.0, 0.123, 0.5, 0.5])

    sample = next_weather(Season.summer, 65.0, rng)

    # 2 * 0.123 * 3 = 0.738
    assert sample.rainfall == pytest.approx(0.7)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.25, 0.3), (2.25, 2.3), (0.24, 0.2), (0.0, 0.0), (1.75, 1.8)],
)
def test_round_tenth_breaks_ties_upward(value: float, expected: float) -> None:
    assert round_tenth(value) == pytest.approx(expected)


@pytest.mark.parametrize(
    ("season", "base"),
    [(Season.summer, 28.0), (Season.winter, 8.0), (Season.spring, 18.0), (Season.autumn, 18.0)],
)
def test_seasonal_temperature_base(scripted, season: Season, base: float) -> None:
    low = next_weather(season, 65.0, scripted([0.0, 0.9, 0.5, 0.5]))
    high = next_weather(season, 65.0, scripted([0.999, 0.9, 0.5, 0.5]))

    assert low.temperature == pytest.approx(base - 5)
    assert base + 4.9 < high.temperature < base + 5


def test_humidity_is_clamped(scripted) -> None:
    wet = next_weather(Season.spring, 88.0, scripted([0.5, 0.9, 0.99, 0.5]))
    dry = next_weather(Season.spring, 31.0, scripted([0.5, 0.9, 0.0, 0.5]))

    assert wet.humidity == 90.0
    assert dry.humidity == 30.0


def test_seeded_generators_repeat() -> None:
    first = make_rng(123)
    second = make_rng(123)

    samples_a = [next_weather(Season.summer, 65.0, first) for _ in range(50)]
    samples_b = [next_weather(Season.summer, 65.0, second) for _ in range(50)]

    assert samples_a == samples_b


def test_generated_ranges_hold_over_many_days() -> None:
    rng = np.random.default_rng(9)
    humidity = 65.0
    for day in range(730):
        sample = next_weather(season_for_day(day), humidity, rng)
        humidity = sample.humidity
        assert sample.temperature >= 0
        assert 30 <= sample.humidity <= 90
        assert sample.rainfall >= 0
        assert 300 <= sample.solar <= 1000
