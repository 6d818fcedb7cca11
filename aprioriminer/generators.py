"""Random basket and CSV data generation."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Protocol


class _RandomSource(Protocol):
    def random(self) -> float: ...


def random_ratio(rng: _RandomSource | None = None) -> float:
    """A uniform random number in [0, 1)."""
    return (rng or random).random()


def generate_0_or_1(probability: float, rng: _RandomSource | None = None) -> int:
    """1 with the given probability, otherwise 0."""
    draw = random_ratio(rng)
    if draw < probability:
        return 1
    return 0


def generate_baskets_randomly(
    nb_baskets: int,
    nb_items: int,
    probability: float,
    rng: _RandomSource | None = None,
) -> list[list[int]]:
    """A ``nb_baskets`` x ``nb_items`` matrix of 0/1 presence flags."""
    if not 0 <= probability <= 1:
        raise ValueError(f"probability must lie in [0, 1], got {probability}")
    return [
        [generate_0_or_1(probability, rng) for _ in range(nb_items)]
        for _ in range(nb_baskets)
    ]


def generate_csv(
    nb_baskets: int,
    nb_items: int,
    probability: float,
    path: str | Path = "DataRand.csv",
    rng: _RandomSource | None = None,
) -> Path:
    """Write random ``transaction,item`` rows to ``path`` and return the path.

    Transactions and items are numbered from 1; each pair appears with the
    given probability.
    """
    path = Path(path)
    with path.open("w", encoding="utf-8", newline="") as out:
        out.write("transaction ID,items")
        for basket in range(1, nb_baskets + 1):
            for item in range(1, nb_items + 1):
                if generate_0_or_1(probability, rng):
                    out.write(f"\n{basket},{item}")
    return path