"""Dice duel: poker-style ranking of five-dice hands."""

from __future__ import annotations

import logging
import random
from collections import Counter
from collections.abc import Sequence

from campusplay.config import get_settings
from campusplay.errors import DuelUnresolved, InvalidInput
from campusplay.games.rng import roll_dice, secure_rng
from campusplay.games.types import DuelResult, DuelWinner, HandRank, HandResult

logger = logging.getLogger(__name__)

HAND_SIZE = 5

HAND_RANKINGS: dict[HandRank, tuple[int, str]] = {
    HandRank.FIVE_OF_A_KIND: (8, "Five of a Kind"),
    HandRank.FOUR_OF_A_KIND: (7, "Four of a Kind"),
    HandRank.FULL_HOUSE: (6, "Full House"),
    HandRank.STRAIGHT: (5, "Straight"),
    HandRank.THREE_OF_A_KIND: (4, "Three of a Kind"),
    HandRank.TWO_PAIR: (3, "Two Pair"),
    HandRank.ONE_PAIR: (2, "One Pair"),
    HandRank.HIGH_CARD: (1, "High Card"),
}

# Practice-mode points awarded to the duel winner.
HAND_SCORES: dict[HandRank, int] = {
    HandRank.FIVE_OF_A_KIND: 100,
    HandRank.FOUR_OF_A_KIND: 80,
    HandRank.FULL_HOUSE: 70,
    HandRank.STRAIGHT: 60,
    HandRank.THREE_OF_A_KIND: 50,
    HandRank.TWO_PAIR: 40,
    HandRank.ONE_PAIR: 30,
    HandRank.HIGH_CARD: 20,
}


def _validate(dice: Sequence[int]) -> list[int]:
    if isinstance(dice, (str, bytes)) or not isinstance(dice, Sequence):
        raise InvalidInput("dice must be a sequence of five integers")
    values = list(dice)
    if len(values) != HAND_SIZE:
        raise InvalidInput(f"expected {HAND_SIZE} dice, got {len(values)}")
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInput(f"die value {value!r} is not an integer")
        if not 1 <= value <= 6:
            raise InvalidInput(f"die value {value} is outside 1..6")
    return values


def _result(rank: HandRank, tiebreak: Sequence[int]) -> HandResult:
    value, name = HAND_RANKINGS[rank]
    return HandResult(rank=rank, rank_value=value, name=name, tiebreak=tuple(tiebreak))


def evaluate_dice_hand(dice: Sequence[int]) -> HandResult:
    """Classify five dice, first matching rule wins."""

    values = _validate(dice)
    counts = Counter(values)
    # faces ordered by multiplicity, then by face, both descending
    groups = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    shape = [count for _, count in groups]

    if shape[0] == 5:
        return _result(HandRank.FIVE_OF_A_KIND, [groups[0][0]])
    if shape[0] == 4:
        return _result(HandRank.FOUR_OF_A_KIND, [groups[0][0]])
    if shape == [3, 2]:
        return _result(HandRank.FULL_HOUSE, [groups[0][0], groups[1][0]])
    if len(counts) == HAND_SIZE and max(values) - min(values) == 4:
        return _result(HandRank.STRAIGHT, [max(values)])
    if shape[0] == 3:
        return _result(HandRank.THREE_OF_A_KIND, [groups[0][0]])
    if shape[:2] == [2, 2]:
        return _result(HandRank.TWO_PAIR, [groups[0][0], groups[1][0]])
    if shape[0] == 2:
        return _result(HandRank.ONE_PAIR, [groups[0][0]])
    return _result(HandRank.HIGH_CARD, sorted(values, reverse=True))


def compare_hands(player: HandResult, ai: HandResult) -> DuelWinner:
    if player.rank_value != ai.rank_value:
        return DuelWinner.PLAYER if player.rank_value > ai.rank_value else DuelWinner.AI
    for mine, theirs in zip(player.tiebreak, ai.tiebreak):
        if mine != theirs:
            return DuelWinner.PLAYER if mine > theirs else DuelWinner.AI
    return DuelWinner.TIE


def hand_score(hand: HandResult) -> int:
    return HAND_SCORES[hand.rank]


def play_duel(rng: random.Random | None = None, max_rerolls: int | None = None) -> DuelResult:
    """Roll a hand for each side and re-roll ties until someone wins.

    Raises ``DuelUnresolved`` if every roll within ``max_rerolls`` ties.
    """

    rng = rng or secure_rng()
    if max_rerolls is None:
        max_rerolls = get_settings().duel_max_rerolls
    if max_rerolls < 0:
        raise InvalidInput("max_rerolls must be non-negative")

    for attempt in range(max_rerolls + 1):
        player_dice = roll_dice(HAND_SIZE, rng)
        ai_dice = roll_dice(HAND_SIZE, rng)
        player_hand = evaluate_dice_hand(player_dice)
        ai_hand = evaluate_dice_hand(ai_dice)
        winner = compare_hands(player_hand, ai_hand)
        if winner is DuelWinner.TIE:
            logger.debug("Duel tie on %s vs %s, re-rolling", player_dice, ai_dice)
            continue
        score = hand_score(player_hand) if winner is DuelWinner.PLAYER else 0
        return DuelResult(
            player_dice=player_dice,
            ai_dice=ai_dice,
            player_hand=player_hand,
            ai_hand=ai_hand,
            winner=winner,
            rerolls=attempt,
            score=score,
        )
    raise DuelUnresolved(max_rerolls)
