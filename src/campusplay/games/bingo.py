"""Campus bingo: card generation, phrase calling and win-pattern detection."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from campusplay.config import get_settings
from campusplay.errors import InvalidInput
from campusplay.games.rng import secure_rng
from campusplay.games.types import BingoCard, BingoCell, BingoClaim, DuelWinner, WinPattern
from campusplay.money import round_whole, to_decimal

logger = logging.getLogger(__name__)

GRID_SIZE = 5
CENTER = (2, 2)
FREE_SPACE = "FREE SPACE"

PATTERN_MULTIPLIERS: dict[WinPattern, float] = {
    WinPattern.LINE: 0.20,
    WinPattern.FOUR_CORNERS: 0.30,
    WinPattern.FULL_HOUSE: 0.50,
}

PHRASE_POOL: tuple[str, ...] = (
    "Lecturer no come",
    "NEPA take light",
    "Sign out",
    "No water in hostel",
    "Carry over",
    "Project defense",
    "Clear course",
    "Sorority party",
    "Night class",
    "No data on phone",
    "Broke before month end",
    "SUG election",
    "School fees deadline",
    "Crush sat beside me",
    "Extra credit assignment",
    "Last minute studying",
    "Cafe food spoil",
    "Roommate wahala",
    "Generator don spoil",
    "TDB on result",
    "Surprise test",
    "Extension on deadline",
    "Departmental party",
    "Hostel allocation stress",
    "Course registration closed",
    "Library full",
    "Porter catch you",
    "VC speech too long",
    "Convocation postponed",
    "Textbook too expensive",
    "Group project drama",
    "Lab practical cancelled",
    "Exam hall too hot",
    "Result delayed",
    "Power bank die",
    "Wifi down again",
    "Class cancelled last minute",
    "Sign my clearance form",
    "Missed attendance",
    "Course clash",
    "Retake semester",
    "Dean's list achievement",
    "All-night reading",
    "Transport fare increase",
    "Handout not ready",
    "Lecturer ask question",
    "Phone confiscated",
    "Hostel inspection",
    "ID card expired",
    "Burst pipe in hostel",
)

_CORNERS = ((0, 0), (0, GRID_SIZE - 1), (GRID_SIZE - 1, 0), (GRID_SIZE - 1, GRID_SIZE - 1))


def _shuffled_pool(rng: random.Random) -> list[str]:
    pool = list(PHRASE_POOL)
    rng.shuffle(pool)
    return pool


def generate_bingo_card(rng: random.Random | None = None) -> BingoCard:
    """Deal 24 distinct phrases row-major around the pre-marked free space."""

    phrases = iter(_shuffled_pool(rng or secure_rng()))
    grid: list[list[BingoCell]] = []
    for row in range(GRID_SIZE):
        cells = []
        for col in range(GRID_SIZE):
            if (row, col) == CENTER:
                cells.append(BingoCell(phrase=FREE_SPACE, marked=True, is_free_space=True))
            else:
                cells.append(BingoCell(phrase=next(phrases)))
        grid.append(cells)
    return BingoCard(grid=grid)


def generate_call_sequence(rng: random.Random | None = None) -> list[str]:
    return _shuffled_pool(rng or secure_rng())


def _check_shape(card: BingoCard) -> None:
    if len(card.grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in card.grid):
        raise InvalidInput(f"bingo card must be {GRID_SIZE}x{GRID_SIZE}")


def _is_full_house(card: BingoCard) -> bool:
    return all(cell.marked for row in card.grid for cell in row)


def _is_four_corners(card: BingoCard) -> bool:
    return all(card.cell(row, col).marked for row, col in _CORNERS)


def _is_line(card: BingoCard) -> bool:
    grid = card.grid
    span = range(GRID_SIZE)
    if any(all(cell.marked for cell in row) for row in grid):
        return True
    if any(all(grid[row][col].marked for row in span) for col in span):
        return True
    if all(grid[i][i].marked for i in span):
        return True
    return all(grid[i][GRID_SIZE - 1 - i].marked for i in span)


# Strongest first; the first satisfied rule is reported.
_PATTERN_RULES = (
    (WinPattern.FULL_HOUSE, _is_full_house),
    (WinPattern.FOUR_CORNERS, _is_four_corners),
    (WinPattern.LINE, _is_line),
)


def detect_win_pattern(card: BingoCard) -> WinPattern:
    _check_shape(card)
    for pattern, rule in _PATTERN_RULES:
        if rule(card):
            return pattern
    return WinPattern.NONE


def _coerce(pattern: WinPattern | str) -> WinPattern:
    try:
        return WinPattern(pattern)
    except ValueError as exc:
        raise InvalidInput(f"unknown win pattern {pattern!r}") from exc


def pattern_payout(pattern: WinPattern, stake: float = 0, practice: bool = False) -> int:
    """Points (practice) or winnings (real money) for a pattern."""

    multiplier = PATTERN_MULTIPLIERS.get(_coerce(pattern))
    if multiplier is None:
        return 0
    if practice:
        return round_whole(to_decimal(multiplier) * get_settings().practice_points_base)
    if stake < 0:
        raise InvalidInput("stake must be non-negative")
    return round_whole(to_decimal(stake) * to_decimal(multiplier))


def mark_cell(card: BingoCard, row: int, col: int, called: Iterable[str]) -> BingoCell:
    """Mark a player's cell once its phrase has been called."""

    _check_shape(card)
    if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
        raise InvalidInput(f"cell ({row}, {col}) is off the card")
    cell = card.cell(row, col)
    if cell.is_free_space or cell.marked:
        return cell
    if cell.phrase not in set(called):
        raise InvalidInput(f'"{cell.phrase}" hasn\'t been called yet')
    cell.marked = True
    return cell


def auto_mark(card: BingoCard, phrase: str) -> bool:
    """Mark ``phrase`` on an opponent card; returns whether anything changed."""

    changed = False
    for row in card.grid:
        for cell in row:
            if cell.phrase == phrase and not cell.marked:
                cell.marked = True
                changed = True
    if changed:
        logger.debug("Opponent marked %r", phrase)
    return changed


def resolve_claim(
    player_pattern: WinPattern,
    ai_pattern: WinPattern = WinPattern.NONE,
    stake: float = 0,
    practice: bool = False,
) -> BingoClaim:
    """Settle a bingo call. Ties in points go to the player."""

    player_pattern = _coerce(player_pattern)
    ai_pattern = _coerce(ai_pattern)
    if player_pattern is WinPattern.NONE:
        raise InvalidInput("no winning pattern to claim")
    player_points = pattern_payout(player_pattern, stake, practice)
    ai_points = pattern_payout(ai_pattern, stake, practice)
    winner = DuelWinner.PLAYER if player_points >= ai_points else DuelWinner.AI
    return BingoClaim(
        winner=winner,
        player_pattern=player_pattern,
        ai_pattern=ai_pattern,
        player_points=player_points,
        ai_points=ai_points,
    )
