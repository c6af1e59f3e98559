"""Dataclasses and enums for mini-game outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class HandRank(str, Enum):
    FIVE_OF_A_KIND = "five_of_a_kind"
    FOUR_OF_A_KIND = "four_of_a_kind"
    FULL_HOUSE = "full_house"
    STRAIGHT = "straight"
    THREE_OF_A_KIND = "three_of_a_kind"
    TWO_PAIR = "two_pair"
    ONE_PAIR = "one_pair"
    HIGH_CARD = "high_card"


class DuelWinner(str, Enum):
    PLAYER = "player"
    AI = "ai"
    TIE = "tie"


class WinPattern(str, Enum):
    LINE = "line"
    FOUR_CORNERS = "four_corners"
    FULL_HOUSE = "full_house"
    NONE = "none"


@dataclass(frozen=True)
class HandResult:
    rank: HandRank
    rank_value: int
    name: str
    tiebreak: Tuple[int, ...]


@dataclass
class DuelResult:
    player_dice: List[int]
    ai_dice: List[int]
    player_hand: HandResult
    ai_hand: HandResult
    winner: DuelWinner
    rerolls: int = 0
    score: int = 0


@dataclass
class BingoCell:
    phrase: str
    marked: bool = False
    is_free_space: bool = False


@dataclass
class BingoCard:
    """A 5x5 grid of cells, row-major."""

    grid: List[List[BingoCell]] = field(default_factory=list)

    def cell(self, row: int, col: int) -> BingoCell:
        return self.grid[row][col]

    def phrases(self) -> List[str]:
        return [cell.phrase for row in self.grid for cell in row if not cell.is_free_space]

    def marked_count(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell.marked)


@dataclass
class BingoClaim:
    winner: DuelWinner
    player_pattern: WinPattern
    ai_pattern: WinPattern
    player_points: int
    ai_points: int


@dataclass(frozen=True)
class WheelSegment:
    multiplier: int
    label: str
    weight: float
    display_probability: float


@dataclass(frozen=True)
class SpinOutcome:
    index: int
    multiplier: int
    label: str
