"""Item sets and the bucketed hash table that stores them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

TABLE_SIZE = 100
MAX_ITEMS = 10000


def hash_item_set(items: Iterable[int]) -> int:
    """Bucket index of a set of item ids: the sum of the ids modulo the table size."""
    return sum(items) % TABLE_SIZE


def hash_item_id(item_id: int) -> int:
    """Bucket index of a single item id."""
    return item_id % TABLE_SIZE


@dataclass
class ItemSet:
    """An ordered collection of distinct item ids with a support counter."""

    items: list[int] = field(default_factory=list)
    count: int = 0

    def __post_init__(self) -> None:
        given = list(self.items)
        self.items = []
        for item_id in given:
            self.add(item_id)

    @property
    def k(self) -> int:
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[int]:
        return iter(self.items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self.items

    def add(self, item_id: int) -> bool:
        """Append ``item_id`` unless already present; report whether it was added."""
        if item_id in self.items:
            return False
        self.items.append(item_id)
        return True

    def without(self, item_id: int) -> ItemSet:
        """A new set holding every item except ``item_id``."""
        return ItemSet([i for i in self.items if i != item_id])

    def copy(self) -> ItemSet:
        """A new set with the same items and a fresh counter."""
        return ItemSet(list(self.items))

    def is_similar(self, other: ItemSet) -> bool:
        """True when both sets hold the same items, in any order."""
        return len(self.items) == len(other.items) and all(i in other for i in self.items)

    def format(self) -> str:
        body = " ,".join(f" {i}" for i in self.items)
        return "{" + body + " }"


@dataclass
class _Node:
    item_set: ItemSet
    index: int = -1


class ItemSetTable:
    """A fixed-size bucketed table of distinct item sets.

    New entries go to the front of their bucket. Single-item entries may carry
    an index, their position in the list the table was built from.
    """

    def __init__(self) -> None:
        self._buckets: list[list[_Node]] = [[] for _ in range(TABLE_SIZE)]

    def __iter__(self) -> Iterator[ItemSet]:
        for bucket in self._buckets:
            for node in bucket:
                yield node.item_set

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, item_set: object) -> bool:
        if not isinstance(item_set, ItemSet):
            return False
        bucket = self._buckets[hash_item_set(item_set.items)]
        return any(item_set.is_similar(node.item_set) for node in bucket)

    def add(self, item_set: ItemSet) -> bool:
        """Store ``item_set`` unless it is empty or already present."""
        if not item_set.items or item_set in self:
            return False
        self._buckets[hash_item_set(item_set.items)].insert(0, _Node(item_set))
        return True

    def add_item(self, item_id: int, index: int) -> bool:
        """Store the single-item set ``{item_id}`` with its ``index``."""
        if self.contains_item(item_id):
            return False
        self._buckets[hash_item_id(item_id)].insert(0, _Node(ItemSet([item_id]), index))
        return True

    def contains_item(self, item_id: int) -> bool:
        return ItemSet([item_id]) in self

    def index_of(self, item_id: int) -> int | None:
        """Index stored with the single-item set ``{item_id}``, or None if absent."""
        probe = ItemSet([item_id])
        for node in self._buckets[hash_item_set(probe.items)]:
            if probe.is_similar(node.item_set):
                return node.index
        return None

    def item_ids(self) -> list[int]:
        """Every distinct item id across all stored sets, in bucket order."""
        seen: dict[int, None] = {}
        for item_set in self:
            for item_id in item_set:
                seen.setdefault(item_id, None)
        return list(seen)

    def contains_all_subsets(self, item_set: ItemSet) -> bool:
        """True when every subset of ``item_set`` missing one item is stored."""
        return all(item_set.without(i) in self for i in item_set.items)

    def merge(self, other: ItemSetTable) -> ItemSetTable:
        """Add copies of the sets of ``other`` not already here; return self."""
        for item_set in other:
            if item_set not in self:
                self.add(item_set.copy())
        return self

    def format(self) -> str:
        return "".join(f" {s.k}-k Itemset : {s.format()}\n" for s in self)


def all_items_in_bitmap(
    item_set: ItemSet, bitmap: Sequence[int], indexes: ItemSetTable
) -> bool:
    """True unless some item of ``item_set`` is indexed and absent from ``bitmap``.

    Items unknown to ``indexes`` do not count against the set.
    """
    for item_id in item_set:
        position = indexes.index_of(item_id)
        if position is not None and not bitmap[position]:
            return False
    return True