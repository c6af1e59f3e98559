"""Exceptions raised by the CampusPlay engines."""

from __future__ import annotations


class InvalidInput(ValueError):
    """Malformed dice, unknown payment method, non-positive price and the like."""


class DuelUnresolved(RuntimeError):
    """A dice duel kept tying past the configured re-roll bound."""

    def __init__(self, rerolls: int) -> None:
        super().__init__(f"Dice duel still tied after {rerolls} re-rolls")
        self.rerolls = rerolls
