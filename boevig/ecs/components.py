"""Component storage: one ordered page per component type."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional, Union

from sortedcontainers import SortedDict

from boevig.rang import Ordered, Seekable


class Component:
    """Base class for values that can be attached to entities.

    Subclasses are usually dataclasses. Override :meth:`index` to report
    indexers that keep the component searchable by value.
    """

    def index(self) -> list[Any]:
        """Return the indexers describing this component's indexed values."""
        return []


def _check_component_type(component_type: object) -> None:
    if not (isinstance(component_type, type) and issubclass(component_type, Component)):
        raise TypeError(f"{component_type!r} is not a Component type")


class ComponentPage:
    """Components of a single type, ordered by entity id."""

    def __init__(self, component_type: type) -> None:
        _check_component_type(component_type)
        self.component_type = component_type
        self._items: SortedDict = SortedDict()
        self._ordered: Ordered[int] = Ordered()

    def add(self, entity_id: int, component: Component) -> None:
        """Store ``component`` for ``entity_id``, replacing any earlier one."""
        if type(component) is not self.component_type:
            raise TypeError(
                f"adding {entity_id} component {type(component).__name__}: "
                f"invalid component type, expected {self.component_type.__name__}"
            )
        self._items[entity_id] = component

    def remove(self, entity_id: int) -> None:
        """Drop the component of ``entity_id``, if there is one."""
        self._items.pop(entity_id, None)

    def get(self, entity_id: int) -> Optional[Component]:
        """Return the component of ``entity_id``, or None."""
        return self._items.get(entity_id)

    def seek_seq(self) -> Iterator[Seekable[int]]:
        """Yield the ids holding this component, in order, as seekables."""
        return self._ordered.seek_iterator(
            lambda start: self._items.irange(minimum=start)
        )

    def items(self) -> Iterator[tuple[int, Component]]:
        """Yield ``(entity_id, component)`` pairs in id order."""
        return iter(self._items.items())


class ComponentBook:
    """All component pages, keyed by component type."""

    def __init__(self) -> None:
        self._pages: dict[type, ComponentPage] = {}
        self._ordered: Ordered[int] = Ordered()

    def _page(self, component_type: type) -> ComponentPage:
        page = self._pages.get(component_type)
        if page is None:
            page = ComponentPage(component_type)
            self._pages[component_type] = page
        return page

    def add(self, entity_id: int, *args: Component) -> None:
        """Store each of the given components for ``entity_id``."""
        for component in args:
            if not isinstance(component, Component):
                raise TypeError(f"{component!r} is not a Component")
            self._page(type(component)).add(entity_id, component)

    def remove(self, entity_id: int) -> None:
        """Drop every component of ``entity_id``."""
        for page in self._pages.values():
            page.remove(entity_id)

    def remove_component(self, entity_id: int, component_type: type) -> None:
        """Drop the component of the given type from ``entity_id``."""
        self._page(component_type).remove(entity_id)

    def get(
        self, entity_id: int, *args: type
    ) -> Union[Component, tuple[Component, ...], None]:
        """Return the components of the given types for ``entity_id``.

        With one type the component itself is returned, with several a tuple
        in the order asked for. None is returned if any of them is missing.
        """
        found = []
        for component_type in args:
            component = self._page(component_type).get(entity_id)
            if component is None:
                return None
            found.append(component)
        if len(found) == 1:
            return found[0]
        return tuple(found)

    def all(self, *args: type) -> Iterator[Seekable[int]]:
        """Yield, as seekables, the ids that hold every one of the given types."""
        pages = [self._page(component_type) for component_type in args]
        return self._ordered.intersect(*[page.seek_seq() for page in pages])