"""Monte Carlo audit of the game engines."""

from __future__ import annotations

import argparse
import random
from collections import Counter

import pandas as pd

from campusplay.errors import InvalidInput
from campusplay.games.dice import HAND_RANKINGS, evaluate_dice_hand
from campusplay.games.rng import roll_dice, secure_rng
from campusplay.games.wheel import WHEEL_SEGMENTS, select_wheel_segment, selection_probabilities


def simulate_wheel(spins: int = 100_000, rng: random.Random | None = None) -> pd.DataFrame:
    """Spin ``spins`` times and compare observed with configured frequencies."""

    if spins <= 0:
        raise InvalidInput("spins must be positive")
    rng = rng or secure_rng()
    hits = Counter(select_wheel_segment(rng).index for _ in range(spins))
    frame = pd.DataFrame(
        {
            "index": range(len(WHEEL_SEGMENTS)),
            "label": [segment.label for segment in WHEEL_SEGMENTS],
            "multiplier": [segment.multiplier for segment in WHEEL_SEGMENTS],
            "weight": [segment.weight for segment in WHEEL_SEGMENTS],
            "expected": selection_probabilities(),
            "hits": [hits.get(i, 0) for i in range(len(WHEEL_SEGMENTS))],
        }
    )
    frame["observed"] = frame["hits"] / spins
    frame["deviation"] = frame["observed"] - frame["expected"]
    return frame


def summarize_wheel(frame: pd.DataFrame) -> dict[str, float]:
    """Collapse a wheel simulation into per-multiplier totals and the return."""

    by_multiplier = frame.groupby("multiplier")[["expected", "observed"]].sum()
    summary = {f"{int(m)}x_observed": float(row["observed"]) for m, row in by_multiplier.iterrows()}
    summary["observed_return"] = float((frame["observed"] * frame["multiplier"]).sum())
    summary["expected_return"] = float((frame["expected"] * frame["multiplier"]).sum())
    summary["max_abs_deviation"] = float(frame["deviation"].abs().max())
    return summary


def simulate_dice_ranks(rounds: int = 50_000, rng: random.Random | None = None) -> pd.DataFrame:
    """Distribution of hand ranks over ``rounds`` random five-dice hands."""

    if rounds <= 0:
        raise InvalidInput("rounds must be positive")
    rng = rng or secure_rng()
    ranks = Counter(evaluate_dice_hand(roll_dice(5, rng)).rank for _ in range(rounds))
    rows = [
        {"rank": rank.value, "name": name, "rank_value": value, "hits": ranks.get(rank, 0)}
        for rank, (value, name) in HAND_RANKINGS.items()
    ]
    frame = pd.DataFrame(rows).sort_values("rank_value", ascending=False, ignore_index=True)
    frame["frequency"] = frame["hits"] / rounds
    return frame


def main() -> None:
    parser = argparse.ArgumentParser(description="Audit CampusPlay game odds")
    parser.add_argument("--spins", type=int, default=100_000)
    parser.add_argument("--dice-rounds", type=int, default=50_000)
    parser.add_argument("--seed", type=int, default=None, help="Seeded PRNG for reproducible audits")
    args = parser.parse_args()

    rng = random.Random(args.seed) if args.seed is not None else None
    wheel = simulate_wheel(args.spins, rng)
    print(wheel.to_string(index=False))
    print(summarize_wheel(wheel))
    print(simulate_dice_ranks(args.dice_rounds, rng).to_string(index=False))


if __name__ == "__main__":  # pragma: no cover
    main()
