"""Dice hand evaluator tests."""

from __future__ import annotations

import itertools
import random

import pytest

from campusplay.errors import DuelUnresolved, InvalidInput
from campusplay.games import dice
from campusplay.games.types import DuelWinner, HandRank


@pytest.mark.parametrize(
    ("faces", "rank", "tiebreak"),
    [
        ([3, 3, 3, 3, 3], HandRank.FIVE_OF_A_KIND, (3,)),
        ([4, 4, 2, 4, 4], HandRank.FOUR_OF_A_KIND, (4,)),
        ([2, 2, 2, 5, 5], HandRank.FULL_HOUSE, (2, 5)),
        ([1, 2, 3, 4, 5], HandRank.STRAIGHT, (5,)),
        ([6, 2, 5, 4, 3], HandRank.STRAIGHT, (6,)),
        ([5, 1, 5, 3, 5], HandRank.THREE_OF_A_KIND, (5,)),
        ([2, 6, 2, 6, 1], HandRank.TWO_PAIR, (6, 2)),
        ([4, 1, 4, 6, 2], HandRank.ONE_PAIR, (4,)),
        ([1, 2, 3, 4, 6], HandRank.HIGH_CARD, (6, 4, 3, 2, 1)),
    ],
)
def test_evaluate_known_hands(faces: list[int], rank: HandRank, tiebreak: tuple[int, ...]) -> None:
    hand = dice.evaluate_dice_hand(faces)
    assert hand.rank is rank
    assert hand.tiebreak == tiebreak


def test_gapped_run_is_not_a_straight() -> None:
    # 1-2-3-4-6 spans five faces but max - min is 5
    hand = dice.evaluate_dice_hand([6, 1, 2, 4, 3])
    assert hand.rank is HandRank.HIGH_CARD
    assert hand.tiebreak == (6, 4, 3, 2, 1)


def test_rank_values_follow_ladder() -> None:
    assert dice.evaluate_dice_hand([3, 3, 3, 3, 3]).rank_value == 8
    assert dice.evaluate_dice_hand([1, 2, 3, 4, 6]).rank_value == 1


def test_evaluation_is_permutation_invariant() -> None:
    for faces in ([2, 2, 2, 5, 5], [6, 2, 5, 4, 3], [2, 6, 2, 6, 1], [1, 3, 5, 6, 6]):
        results = {dice.evaluate_dice_hand(list(p)) for p in itertools.permutations(faces)}
        assert len(results) == 1


@pytest.mark.parametrize(
    "bad",
    [[1, 2, 3, 4], [1, 2, 3, 4, 5, 6], [0, 1, 2, 3, 4], [1, 2, 3, 4, 7], [1, 2, 3, 4, 2.5], [True, 1, 1, 1, 1], "12345"],
)
def test_malformed_dice_rejected(bad) -> None:
    with pytest.raises(InvalidInput):
        dice.evaluate_dice_hand(bad)


def test_compare_hands_rank_then_tiebreak() -> None:
    full_house = dice.evaluate_dice_hand([2, 2, 2, 5, 5])
    straight = dice.evaluate_dice_hand([6, 5, 4, 3, 2])
    assert dice.compare_hands(full_house, straight) is DuelWinner.PLAYER
    assert dice.compare_hands(straight, full_house) is DuelWinner.AI

    low_pair = dice.evaluate_dice_hand([2, 2, 6, 5, 3])
    high_pair = dice.evaluate_dice_hand([5, 5, 1, 2, 3])
    assert dice.compare_hands(low_pair, high_pair) is DuelWinner.AI


def test_compare_identical_hands_ties() -> None:
    a = dice.evaluate_dice_hand([1, 3, 3, 6, 4])
    b = dice.evaluate_dice_hand([3, 4, 1, 3, 6])
    assert dice.compare_hands(a, b) is DuelWinner.TIE


def test_compare_hands_is_antisymmetric() -> None:
    rng = random.Random(7)
    flip = {DuelWinner.PLAYER: DuelWinner.AI, DuelWinner.AI: DuelWinner.PLAYER, DuelWinner.TIE: DuelWinner.TIE}
    for _ in range(500):
        a = dice.evaluate_dice_hand([rng.randint(1, 6) for _ in range(5)])
        b = dice.evaluate_dice_hand([rng.randint(1, 6) for _ in range(5)])
        assert dice.compare_hands(b, a) is flip[dice.compare_hands(a, b)]


def test_compare_hands_is_transitive() -> None:
    rng = random.Random(13)
    hands = [dice.evaluate_dice_hand([rng.randint(1, 6) for _ in range(5)]) for _ in range(40)]
    for a in hands:
        for b in hands:
            if dice.compare_hands(a, b) is not DuelWinner.PLAYER:
                continue
            for c in hands:
                if dice.compare_hands(b, c) is DuelWinner.PLAYER:
                    assert dice.compare_hands(a, c) is DuelWinner.PLAYER


def test_hand_scores() -> None:
    assert dice.hand_score(dice.evaluate_dice_hand([6, 6, 6, 6, 6])) == 100
    assert dice.hand_score(dice.evaluate_dice_hand([2, 2, 2, 5, 5])) == 70
    assert dice.hand_score(dice.evaluate_dice_hand([1, 2, 3, 4, 6])) == 20


def test_play_duel_reports_a_winner() -> None:
    result = dice.play_duel(rng=random.Random(11), max_rerolls=20)
    assert result.winner in (DuelWinner.PLAYER, DuelWinner.AI)
    assert result.winner is dice.compare_hands(result.player_hand, result.ai_hand)
    if result.winner is DuelWinner.PLAYER:
        assert result.score == dice.hand_score(result.player_hand)
    else:
        assert result.score == 0


def test_play_duel_rerolls_ties(monkeypatch) -> None:
    rolls = iter([[1, 1, 2, 2, 3], [1, 1, 2, 2, 3], [6, 6, 6, 6, 6], [1, 2, 3, 4, 6]])
    monkeypatch.setattr(dice, "roll_dice", lambda count, rng: next(rolls))
    result = dice.play_duel(rng=random.Random(0), max_rerolls=3)
    assert result.rerolls == 1
    assert result.winner is DuelWinner.PLAYER
    assert result.score == 100


def test_play_duel_gives_up_after_bound(monkeypatch) -> None:
    monkeypatch.setattr(dice, "roll_dice", lambda count, rng: [1, 1, 2, 2, 3])
    with pytest.raises(DuelUnresolved):
        dice.play_duel(rng=random.Random(0), max_rerolls=2)
