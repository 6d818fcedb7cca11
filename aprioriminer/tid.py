"""Transaction-id map used by the TID variant of the Apriori algorithm."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .dataset import Baskets
from .itemsets import ItemSet, ItemSetTable, all_items_in_bitmap


@dataclass
class TidEntry:
    """An item set found in the transaction numbered ``tid``."""

    tid: int
    itemset: ItemSet


@dataclass
class TidMap:
    """Ordered list of (transaction id, item set) entries."""

    entries: list[TidEntry] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[TidEntry]:
        return iter(self.entries)

    def add(self, tid: int, item_set: ItemSet) -> None:
        """Record a copy of ``item_set`` (with a fresh counter) under ``tid``."""
        self.entries.append(TidEntry(tid, item_set.copy()))

    def contains_all(self, tid: int, item_set: ItemSet) -> bool:
        """True when the first entry for ``tid`` holds every item of ``item_set``."""
        for entry in self.entries:
            if entry.tid == tid:
                return all(item_id in entry.itemset for item_id in item_set)
        return False

    def update(self, lk: ItemSetTable, baskets: Baskets) -> None:
        """Replace the entries with the sets of ``lk`` that each basket contains."""
        self.entries.clear()
        for tid, bitmap in enumerate(baskets):
            for item_set in lk:
                if all_items_in_bitmap(item_set, bitmap, lk):
                    self.add(tid, item_set)

    def generate_lk(self, support: int) -> ItemSetTable:
        """A table of the recorded sets whose counter reaches ``support``."""
        new_lk = ItemSetTable()
        for entry in self.entries:
            if entry.itemset.count >= support:
                new_lk.add(entry.itemset)
        return new_lk