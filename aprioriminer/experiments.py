"""Timing experiments on randomly generated transaction files, plotted with gnuplot."""

from __future__ import annotations

import random
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from .generators import generate_csv
from .mining import apriori_algorithm_1

CSV_FILE = "DataRand.csv"
DATA_FILE = "execution_times.dat"
ITEM_COLUMN = 1
BASKET_COLUMN = 2


def get_execution_time(
    path: str | Path, support: int, item_column: int, basket_column: int
) -> float:
    """Processor seconds taken by one run of the re-reading Apriori algorithm."""
    begin = time.process_time()
    apriori_algorithm_1(path, support, item_column, basket_column)
    return time.process_time() - begin


def plot_results(data_path: str | Path, xlabel: str) -> None:
    """Plot execution time against the varied parameter with gnuplot."""
    script = (
        f"set xlabel '{xlabel}'\n"
        "set ylabel 'Temps execution (secondes)'\n"
        f"plot '{data_path}' with linespoints title 'Execution Time'\n"
        "pause -1\n"
        "exit\n"
    )
    try:
        subprocess.run(["gnuplot", "-persist"], input=script, text=True, check=False)
    except OSError as exc:
        raise RuntimeError("Error executing gnuplot.") from exc


@dataclass(frozen=True)
class _Point:
    label: str
    nb_baskets: int
    nb_items: int
    probability: float
    support: int


def _sweep(
    directory: str | Path,
    points: Iterable[_Point],
    xlabel: str,
    rng: random.Random | None = None,
) -> Path:
    """Time one run per point, write ``label time`` lines, then plot them."""
    directory = Path(directory)
    rng = rng or random.Random()
    csv_path = directory / CSV_FILE
    data_path = directory / DATA_FILE
    with data_path.open("w", encoding="utf-8") as out:
        for point in points:
            generate_csv(point.nb_baskets, point.nb_items, point.probability, csv_path, rng)
            elapsed = get_execution_time(csv_path, point.support, ITEM_COLUMN, BASKET_COLUMN)
            out.write(f"{point.label} {elapsed:f}\n")
    plot_results(data_path, xlabel)
    return data_path


def _probabilities() -> Iterator[float]:
    probability = 0.1
    while probability <= 0.9:
        yield probability
        probability += 0.02


def run_experiment_probability(directory: str | Path = ".") -> Path:
    """Vary the probability of an item being in a transaction."""
    points = (_Point(f"{p:.2f}", 60, 100, p, 30) for p in _probabilities())
    return _sweep(directory, points, "Probablité")


def run_experiment_transaction(directory: str | Path = ".") -> Path:
    """Vary the number of transactions."""
    points = (_Point(str(n), n, 100, 0.7, 20) for n in range(30, 61))
    return _sweep(directory, points, "Nb de transactions")


def run_experiment_items(directory: str | Path = ".") -> Path:
    """Vary the number of items."""
    points = (_Point(str(n), 60, n, 0.5, 20) for n in range(50, 101))
    return _sweep(directory, points, "Nb de items")


def run_experiment_support(directory: str | Path = ".") -> Path:
    """Vary the support threshold."""
    points = (_Point(str(s), 60, 60, 0.15, s) for s in range(1, 41))
    return _sweep(directory, points, "Support")


_EXPERIMENTS = {
    1: run_experiment_probability,
    2: run_experiment_transaction,
    3: run_experiment_items,
    4: run_experiment_support,
}


def run_experiment(varchoice: int, directory: str | Path = ".") -> Path:
    """Run experiment 1 (probability), 2 (transactions), 3 (items) or 4 (support)."""
    try:
        experiment = _EXPERIMENTS[varchoice]
    except KeyError:
        raise ValueError(f"unknown experiment {varchoice}; expected 1 to 4") from None
    return experiment(directory)