"""Cryptographically secure randomness shared by every game engine."""

from __future__ import annotations

import random
import secrets

_SYSTEM_RNG = secrets.SystemRandom()


def secure_rng() -> random.Random:
    """Return the process-wide OS-entropy generator.

    ``SystemRandom`` keeps no internal state, so it is safe to share across
    request handlers without locking.
    """

    return _SYSTEM_RNG


def roll_die(rng: random.Random | None = None) -> int:
    return (rng or _SYSTEM_RNG).randint(1, 6)


def roll_dice(count: int = 5, rng: random.Random | None = None) -> list[int]:
    rng = rng or _SYSTEM_RNG
    return [roll_die(rng) for _ in range(count)]
