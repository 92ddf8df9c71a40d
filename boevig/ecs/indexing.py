"""Value indices over components: equality pages and indexers."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from boevig.rang import Ordered, Seekable

_MISSING = object()


class IndexPage:
    """Maps entity ids to values of one type and values back to ids."""

    def __init__(self, value_type: type) -> None:
        self.value_type = value_type
        self._id_to_value: dict[int, Hashable] = {}
        self._value_to_ids: dict[Hashable, set[int]] = {}
        self._ordered: Ordered[int] = Ordered()

    def _check(self, value: object) -> None:
        if type(value) is not self.value_type:
            raise TypeError(
                f"index value {value!r}: invalid type, got {type(value).__name__}, "
                f"want {self.value_type.__name__}"
            )

    def _discard(self, entity_id: int, value: Hashable) -> None:
        ids = self._value_to_ids.get(value)
        if ids is None:
            return
        ids.discard(entity_id)
        if not ids:
            del self._value_to_ids[value]

    def set(self, entity_id: int, value: Hashable) -> None:
        """Record ``value`` for ``entity_id``, replacing any earlier value."""
        self._check(value)
        existing = self._id_to_value.get(entity_id, _MISSING)
        if existing is not _MISSING:
            if existing == value:
                return
            self._discard(entity_id, existing)
        self._id_to_value[entity_id] = value
        self._value_to_ids.setdefault(value, set()).add(entity_id)

    def remove(self, entity_id: int) -> None:
        """Forget the value of ``entity_id``, if there is one."""
        value = self._id_to_value.pop(entity_id, _MISSING)
        if value is _MISSING:
            return
        self._discard(entity_id, value)

    def seek_seq(self, value: Hashable) -> Iterator[Seekable[int]]:
        """Yield, in order and as seekables, the ids whose value is ``value``."""
        self._check(value)

        def from_start(start: Optional[int]) -> list[int]:
            ids = sorted(self._value_to_ids.get(value, ()))
            begin = 0 if start is None else bisect_left(ids, start)
            return ids[begin:]

        return self._ordered.seek_iterator(from_start)


class IndexBook:
    """All index pages, keyed by index name and value type."""

    def __init__(self) -> None:
        self._pages: dict[tuple[str, type], IndexPage] = {}
        self._ordered: Ordered[int] = Ordered()

    def set(self, entity_id: int, component: Any) -> None:
        """Index every value ``component`` reports for ``entity_id``."""
        for indexer in component.index():
            indexer.apply(self, entity_id)

    def remove_all(self, entity_id: int) -> None:
        """Remove ``entity_id`` from every index."""
        for page in self._pages.values():
            page.remove(entity_id)

    def remove(self, entity_id: int, component: Any) -> None:
        """Remove ``entity_id`` from the indices ``component`` reports."""
        for indexer in component.index():
            indexer.remove(self, entity_id)

    def search(self, *args: Any) -> Iterator[Seekable[int]]:
        """Yield the ids matched by every one of the given indexers."""
        seqs = [indexer.search(self) for indexer in args]
        if not seqs:
            return iter(())
        if len(seqs) == 1:
            return iter(seqs[0])
        return self._ordered.intersect(*seqs)

    def page(self, index_name: str, value: Hashable) -> IndexPage:
        """Return the page for ``index_name`` and the type of ``value``."""
        key = (index_name, type(value))
        page = self._pages.get(key)
        if page is None:
            page = IndexPage(type(value))
            self._pages[key] = page
        return page


@dataclass(frozen=True)
class EqualityIndexer:
    """Indexes, or searches for, ``value`` under ``index_name``."""

    index_name: str
    value: Hashable

    def search(self, book: IndexBook) -> Iterator[Seekable[int]]:
        """Yield the ids whose indexed value equals this one."""
        return book.page(self.index_name, self.value).seek_seq(self.value)

    def apply(self, book: IndexBook, entity_id: int) -> None:
        """Record this value for ``entity_id``."""
        book.page(self.index_name, self.value).set(entity_id, self.value)

    def remove(self, book: IndexBook, entity_id: int) -> None:
        """Forget the value of ``entity_id`` under this index."""
        book.page(self.index_name, self.value).remove(entity_id)


def EQ(index_name: str, value: Hashable) -> EqualityIndexer:
    """Build an equality indexer for ``value`` under ``index_name``."""
    return EqualityIndexer(index_name, value)