"""The entity database: entities, their components and searches over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Union

from boevig.ecs.components import Component, ComponentBook
from boevig.ecs.indexing import IndexBook
from boevig.rang import Ordered, Seekable, unseek


class DB:
    """Holds entities and the components attached to them."""

    def __init__(self) -> None:
        self._components = ComponentBook()
        self._indices = IndexBook()
        self._active: set[int] = set()
        self._last_id = 0

    def new_entity(self, *args: Component) -> int:
        """Create an entity with the given components and return its id."""
        self._last_id += 1
        while self._last_id in self._active:
            self._last_id += 1
        self._active.add(self._last_id)
        self.set(self._last_id, *args)
        return self._last_id

    def remove(self, entity_id: int) -> None:
        """Delete the entity along with its components and index entries."""
        self._active.discard(entity_id)
        self._components.remove(entity_id)
        self._indices.remove_all(entity_id)

    def get(
        self, entity_id: int, *args: type
    ) -> Union[Component, tuple[Component, ...], None]:
        """Return the entity's components of the given types, or None.

        One type gives the component, several give a tuple; None is returned
        if the entity lacks any of them.
        """
        return self._components.get(entity_id, *args)

    def set(self, entity_id: int, *args: Component) -> None:
        """Attach or replace components of the entity and index them."""
        self._components.add(entity_id, *args)
        for component in args:
            self._indices.set(entity_id, component)

    def unset(self, entity_id: int, component_type: type) -> None:
        """Detach the entity's component of the given type."""
        current = self._components.get(entity_id, component_type)
        self._components.remove_component(entity_id, component_type)
        if current is not None:
            self._indices.remove(entity_id, current)

    def search_components(self, *args: type) -> Iterator[Seekable[int]]:
        """Yield, as seekables, the ids holding every given component type."""
        return self._components.all(*args)

    def search_index(self, *args: Any) -> Iterator[Seekable[int]]:
        """Yield, as seekables, the ids matched by every given indexer."""
        return self._indices.search(*args)

    def search(self) -> SearchBuilder:
        """Start building a search."""
        return SearchBuilder(self)


class SearchBuilder:
    """Combines component and index searches; the result is their intersection."""

    def __init__(self, db: DB) -> None:
        self._db = db
        self._seqs: list[Iterable[Seekable[int]]] = []

    def components(self, *args: type) -> SearchBuilder:
        """Require every given component type."""
        self._seqs.append(self._db.search_components(*args))
        return self

    def index(self, *args: Any) -> SearchBuilder:
        """Require a match on every given indexer."""
        self._seqs.append(self._db.search_index(*args))
        return self

    def seek_seq(self, seq: Iterable[Seekable[int]]) -> SearchBuilder:
        """Require membership of an arbitrary seekable id sequence."""
        self._seqs.append(seq)
        return self

    def done(self) -> Iterator[int]:
        """Yield the matching entity ids in ascending order."""
        if not self._seqs:
            return iter(())
        if len(self._seqs) == 1:
            return unseek(self._seqs[0])
        return unseek(Ordered().intersect(*self._seqs))