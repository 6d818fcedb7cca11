"""Reading transaction files into item lists, candidate tables and basket bitmaps."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from .itemsets import ItemSet, ItemSetTable

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(token: str) -> int:
    """Leading integer of ``token``, or 0 when it does not start with one."""
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


def _check_column(column: int) -> None:
    if column < 1:
        raise ValueError(f"column numbers start at 1, got {column}")


def _rows(path: str | Path, width: int) -> Iterator[list[int]]:
    """Integer values of the first ``width`` fields of every row after the header.

    Empty fields are skipped, as consecutive separators count as one.
    """
    with Path(path).open(encoding="utf-8") as source:
        next(source, None)
        for line_number, line in enumerate(source, start=2):
            tokens = [token for token in line.split(",") if token]
            if len(tokens) < width:
                raise ValueError(
                    f"{path}:{line_number}: expected at least {width} columns, "
                    f"found {len(tokens)}"
                )
            yield [_atoi(token) for token in tokens[:width]]


@dataclass
class Baskets:
    """Transactions stored as 0/1 bitmaps over the indexed items."""

    bitmaps: list[list[int]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.bitmaps)

    def __len__(self) -> int:
        return len(self.bitmaps)

    def __iter__(self) -> Iterator[list[int]]:
        return iter(self.bitmaps)

    def __getitem__(self, position: int) -> list[int]:
        return self.bitmaps[position]

    def add_bitmap(self, bitmap: Sequence[int]) -> None:
        """Store a copy of ``bitmap`` as a new basket."""
        self.bitmaps.append(list(bitmap))

    def format(self) -> str:
        if not self.bitmaps:
            return "No baskets found\n"
        return "".join(
            f"Basket {number} : " + "".join(f"{flag} " for flag in bitmap) + "\n"
            for number, bitmap in enumerate(self.bitmaps, start=1)
        )


def read_column(path: str | Path, column: int) -> list[int]:
    """Distinct values of the 1-based ``column``, in order of first appearance."""
    _check_column(column)
    seen: dict[int, None] = {}
    for row in _rows(path, column):
        seen.setdefault(row[column - 1], None)
    return list(seen)


def construct_c1(item_ids: Iterable[int]) -> ItemSetTable:
    """A table of single-item sets, each indexed by its position in ``item_ids``."""
    table = ItemSetTable()
    for position, item_id in enumerate(item_ids):
        table.add_item(item_id, position)
    return table


def construct_l1(path: str | Path, support: int, column: int) -> ItemSetTable:
    """Single-item sets whose item appears in at least ``support`` rows."""
    item_ids = read_column(path, column)
    frequencies = Counter(row[column - 1] for row in _rows(path, column))
    l1 = ItemSetTable()
    for item_id in item_ids:
        if frequencies[item_id] >= support:
            l1.add(ItemSet([item_id]))
    return l1


def construct_ck(lk_1: ItemSetTable) -> ItemSetTable:
    """Candidates one item larger than those of ``lk_1`` whose subsets all lie in it."""
    possible_items = lk_1.item_ids()
    ck = ItemSetTable()
    for item_set in lk_1:
        for item_id in possible_items:
            candidate = item_set.copy()
            if candidate.add(item_id) and lk_1.contains_all_subsets(candidate):
                ck.add(candidate)
    return ck


def construct_baskets(
    path: str | Path, item_column: int, basket_column: int
) -> Baskets:
    """Group consecutive rows with the same basket id into item bitmaps.

    Bit positions follow the order in which items first appear in the file.
    """
    _check_column(item_column)
    _check_column(basket_column)
    item_ids = read_column(path, item_column)
    indexes = construct_c1(item_ids)
    baskets = Baskets()
    bitmap = [0] * len(item_ids)
    current = -1

    def mark(item_id: int) -> None:
        position = indexes.index_of(item_id)
        if position is not None:
            bitmap[position] = 1

    def switch(basket_id: int) -> None:
        nonlocal current, bitmap
        if basket_id == current:
            return
        if current != -1:
            baskets.add_bitmap(bitmap)
            bitmap = [0] * len(item_ids)
        current = basket_id

    for row in _rows(path, max(item_column, basket_column)):
        item_id = row[item_column - 1]
        basket_id = row[basket_column - 1]
        if basket_column <= item_column:
            switch(basket_id)
            mark(item_id)
        else:
            mark(item_id)
            switch(basket_id)
    baskets.add_bitmap(bitmap)
    return baskets