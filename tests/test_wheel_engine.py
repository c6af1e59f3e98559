"""Spin-wheel selection tests."""

from __future__ import annotations

import logging
import random

import pytest

from campusplay.errors import InvalidInput
from campusplay.games import wheel


class FixedDraw(random.Random):
    """Random source that always returns the same unit draw."""

    def __init__(self, value: float) -> None:
        super().__init__()
        self.value = value

    def random(self) -> float:
        return self.value


def test_weight_table_is_fixed() -> None:
    assert len(wheel.WHEEL_SEGMENTS) == 16
    assert [s.multiplier for s in wheel.WHEEL_SEGMENTS] == [1, 2, 1, 5, 1, 2, 1, 10, 1, 2, 1, 50, 1, 2, 1, 100]
    assert wheel.TOTAL_WEIGHT == pytest.approx(191.0)
    assert wheel.WHEEL_SEGMENTS[-1].label == "Jackpot"


def test_selection_ignores_display_probabilities() -> None:
    probabilities = wheel.selection_probabilities()
    assert sum(probabilities) == pytest.approx(1.0)
    assert probabilities[15] == pytest.approx(0.15 / 191)
    assert probabilities[15] != pytest.approx(wheel.WHEEL_SEGMENTS[15].display_probability)


def test_cumulative_walk_boundaries() -> None:
    assert wheel.select_wheel_segment(FixedDraw(0.0)).index == 0
    assert wheel.select_wheel_segment(FixedDraw(17.9 / 191)).index == 0
    assert wheel.select_wheel_segment(FixedDraw(18.5 / 191)).index == 1
    jackpot = wheel.select_wheel_segment(FixedDraw(0.99999))
    assert (jackpot.index, jackpot.multiplier, jackpot.label) == (15, 100, "Jackpot")


def test_exhausted_walk_falls_back_to_first_segment(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="campusplay.games.wheel"):
        outcome = wheel.select_wheel_segment(FixedDraw(1.5))
    assert outcome.index == 0
    assert "ran past cumulative weight" in caplog.text


def test_frequencies_match_weights() -> None:
    rng = random.Random(2024)
    spins = 100_000
    hits = [0] * len(wheel.WHEEL_SEGMENTS)
    for _ in range(spins):
        hits[wheel.select_wheel_segment(rng).index] += 1
    for observed, expected in zip(hits, wheel.selection_probabilities()):
        assert observed / spins == pytest.approx(expected, abs=0.005)
    assert hits[15] / spins == pytest.approx(0.15 / 191, abs=0.0005)


def test_default_source_is_secure() -> None:
    outcome = wheel.select_wheel_segment()
    assert 0 <= outcome.index < 16


def test_spin_payout() -> None:
    assert wheel.spin_payout(250, 2) == 500
    assert wheel.spin_payout(10.5, 5) == 53
    assert wheel.spin_payout(0, 100) == 0
    with pytest.raises(InvalidInput):
        wheel.spin_payout(-1, 2)


def test_break_even_is_not_a_win() -> None:
    assert not wheel.is_winning_multiplier(1)
    assert wheel.is_winning_multiplier(2)


def test_expected_multiplier() -> None:
    assert wheel.expected_multiplier() == pytest.approx(296.5 / 191)
