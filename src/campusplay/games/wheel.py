"""Spin-the-wheel outcome selection and payout."""

from __future__ import annotations

import logging
import random

from campusplay.errors import InvalidInput
from campusplay.games.rng import secure_rng
from campusplay.games.types import SpinOutcome, WheelSegment
from campusplay.money import round_whole, to_decimal

logger = logging.getLogger(__name__)

JACKPOT_MULTIPLIER = 100

# ``weight`` drives selection. ``display_probability`` only sizes the rendered
# arcs and must never be used to pick an outcome.
WHEEL_SEGMENTS: tuple[WheelSegment, ...] = (
    WheelSegment(multiplier=1, label="1x", weight=18, display_probability=0.35),
    WheelSegment(multiplier=2, label="2x", weight=10, display_probability=0.30),
    WheelSegment(multiplier=1, label="1x", weight=18, display_probability=0.35),
    WheelSegment(multiplier=5, label="5x", weight=5, display_probability=0.15),
    WheelSegment(multiplier=1, label="1x", weight=18, display_probability=0.35),
    WheelSegment(multiplier=2, label="2x", weight=10, display_probability=0.30),
    WheelSegment(multiplier=1, label="1x", weight=18, display_probability=0.35),
    WheelSegment(multiplier=10, label="10x", weight=1.5, display_probability=0.05),
    WheelSegment(multiplier=1, label="1x", weight=18, display_probability=0.35),
    WheelSegment(multiplier=2, label="2x", weight=10, display_probability=0.30),
    WheelSegment(multiplier=1, label="1x", weight=18, display_probability=0.35),
    WheelSegment(multiplier=50, label="50x", weight=0.35, display_probability=0.008),
    WheelSegment(multiplier=1, label="1x", weight=18, display_probability=0.35),
    WheelSegment(multiplier=2, label="2x", weight=10, display_probability=0.30),
    WheelSegment(multiplier=1, label="1x", weight=18, display_probability=0.35),
    WheelSegment(multiplier=100, label="Jackpot", weight=0.15, display_probability=0.002),
)

TOTAL_WEIGHT: float = sum(segment.weight for segment in WHEEL_SEGMENTS)


def _outcome(index: int) -> SpinOutcome:
    segment = WHEEL_SEGMENTS[index]
    return SpinOutcome(index=index, multiplier=segment.multiplier, label=segment.label)


def select_wheel_segment(rng: random.Random | None = None) -> SpinOutcome:
    """Pick one segment with probability ``weight / TOTAL_WEIGHT``."""

    draw = (rng or secure_rng()).random() * TOTAL_WEIGHT
    cumulative = 0.0
    for index, segment in enumerate(WHEEL_SEGMENTS):
        cumulative += segment.weight
        if draw <= cumulative:
            return _outcome(index)
    logger.warning("Wheel draw %.12f ran past cumulative weight %.12f", draw, cumulative)
    return _outcome(0)


def spin_payout(stake: float, multiplier: int) -> int:
    if stake < 0:
        raise InvalidInput("stake must be non-negative")
    return round_whole(to_decimal(stake) * multiplier)


def is_winning_multiplier(multiplier: int) -> bool:
    """A 1x segment returns the stake; only multipliers above 1 count as wins."""

    return multiplier > 1


def selection_probabilities() -> list[float]:
    return [segment.weight / TOTAL_WEIGHT for segment in WHEEL_SEGMENTS]


def expected_multiplier() -> float:
    return sum(s.weight * s.multiplier for s in WHEEL_SEGMENTS) / TOTAL_WEIGHT
