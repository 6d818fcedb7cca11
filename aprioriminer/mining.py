"""The Apriori frequent-item-set algorithms over transaction files."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Sequence

from .dataset import construct_baskets, construct_c1, construct_ck, construct_l1, read_column
from .itemsets import ItemSetTable, all_items_in_bitmap
from .tid import TidMap


def _count_in_baskets(
    ck: ItemSetTable, bitmaps: Iterable[Sequence[int]], indexes: ItemSetTable
) -> None:
    """Raise the counter of every candidate once per basket that holds it."""
    for bitmap in bitmaps:
        for item_set in ck:
            if all_items_in_bitmap(item_set, bitmap, indexes):
                item_set.count += 1


def apriori_algorithm_1(
    path: str | Path, support: int, item_column: int, basket_column: int
) -> ItemSetTable:
    """Frequent item sets of every size, reading the file again on each pass."""
    result = construct_l1(path, support, item_column)
    lk_1 = construct_l1(path, support, item_column)
    found = True
    while found:
        found = False
        ck = construct_ck(lk_1)
        lk_1 = ItemSetTable()
        indexes = construct_c1(read_column(path, item_column))
        _count_in_baskets(ck, construct_baskets(path, item_column, basket_column), indexes)
        for item_set in ck:
            if item_set.count >= support:
                lk_1.add(item_set.copy())
                result.add(item_set.copy())
                found = True
    return result


def apriori_algorithm_2(
    path: str | Path, support: int, item_column: int, basket_column: int
) -> ItemSetTable:
    """Frequent item sets of every size, counted over baskets read once.

    Counting of a candidate stops as soon as it reaches ``support``.
    """
    item_ids = read_column(path, item_column)
    indexes = construct_c1(item_ids)
    ck = construct_c1(item_ids)
    lk = ItemSetTable()
    result = ItemSetTable()
    baskets = construct_baskets(path, item_column, basket_column)
    found = True
    while found:
        found = False
        for item_set in ck:
            for bitmap in baskets:
                if not all_items_in_bitmap(item_set, bitmap, indexes):
                    continue
                item_set.count += 1
                if item_set.count >= support:
                    lk.add(item_set.copy())
                    result.add(item_set.copy())
                    found = True
                    break
        ck = construct_ck(lk)
        lk = ItemSetTable()
    return result


def apriori_tid_algorithm(
    path: str | Path, support: int, item_column: int, basket_column: int
) -> ItemSetTable:
    """Transaction-id variant of Apriori.

    Returns the frequent single items; the larger sets it walks through while
    building transaction-id maps are not added to the result.
    """
    tid_map = TidMap()
    result = construct_l1(path, support, item_column)
    lk = construct_l1(path, support, item_column)
    while True:
        ck = construct_ck(lk)
        baskets = construct_baskets(path, item_column, basket_column)
        tid_map.update(ck, baskets)
        new_lk = tid_map.generate_lk(support)
        if not any(item_set.count >= support for item_set in new_lk):
            break
        lk = new_lk
    return result


_ALGORITHMS: dict[int, Callable[[str | Path, int, int, int], ItemSetTable]] = {
    1: apriori_algorithm_1,
    2: apriori_algorithm_2,
}


def apriori(
    path: str | Path, support: int, item_column: int, basket_column: int, algorithm: int
) -> ItemSetTable:
    """Run algorithm 1 (re-read the file) or 2 (stored baskets)."""
    try:
        run = _ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(f"unknown algorithm {algorithm}; expected 1 or 2") from None
    return run(path, support, item_column, basket_column)