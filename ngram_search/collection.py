"""
Searchable collections of items.

A Collection pairs an Index with a list of payload items, so each item can
be registered under several names and searches return the items themselves
instead of positions.
"""

from typing import Any, Iterable, List, Optional, Tuple

from .indexer import Index, IndexBuilder


class CollectionBuilder:
    """Accumulates items and their names before building a Collection."""

    def __init__(self, n: int):
        self.index_builder: IndexBuilder = Index.builder(n)
        self.items: List[Any] = []

    def insert(self, item: Any, names: Iterable) -> int:
        """
        Add an item searchable by each of the given names.

        Returns:
            Position of the item, usable with add_name().
        """
        item_index = len(self.items)
        self.items.append(item)
        for name in names:
            self.index_builder.insert(item_index, name)
        return item_index

    def add_name(self, item_index: int, name) -> None:
        """Register one more name for an already inserted item."""
        self.index_builder.insert(item_index, name)

    def build(self) -> "Collection":
        return Collection(self.index_builder.build(), self.items)


class Collection:
    """Read-only searchable group of items."""

    def __init__(self, index: Index, items: List[Any]):
        self.index = index
        self.items = tuple(items)

    @classmethod
    def builder(cls, n: int) -> CollectionBuilder:
        return CollectionBuilder(n)

    @classmethod
    def from_items(cls, pairs: Iterable[Tuple[Any, Iterable]], n: int) -> "Collection":
        """
        Construct a collection from (item, names) pairs.

        Args:
            pairs: Items with any number of names each.
            n: N-gram width.
        """
        builder = cls.builder(n)
        for item, names in pairs:
            builder.insert(item, names)
        return builder.build()

    def __len__(self) -> int:
        return len(self.items)

    def _has(self, item_index: Any) -> bool:
        return isinstance(item_index, int) and 0 <= item_index < len(self.items)

    def get(self, item_index: Any) -> Optional[Any]:
        """Return the item at a position, or None when out of range."""
        return self.items[item_index] if self._has(item_index) else None

    def search(self, query: str, max_results: int) -> List[Tuple[Any, float]]:
        """
        Rank the items against a query.

        The result may be shorter than max_results: ids the index returns
        that do not map to an item are dropped.
        """
        return [
            (self.items[item_index], score)
            for item_index, score in self.index.search(query, max_results)
            if self._has(item_index)
        ]

    def best_match(self, query: str) -> Optional[Any]:
        return self.get(self.index.best_match(query))

    async def search_async(self, query: str, max_results: int) -> List[Tuple[Any, float]]:
        return self.search(query, max_results)

    async def best_match_async(self, query: str) -> Optional[Any]:
        return self.best_match(query)
