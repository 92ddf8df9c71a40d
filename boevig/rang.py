"""Ordered, seekable iteration: seek iterators, intersections and unions."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

Less = Callable[[T, T], bool]
SeekConstructor = Callable[[Optional[T]], Iterable[T]]


class _SeekState(Generic[T]):
    """Seek request shared between an iterator and the values it yields."""

    __slots__ = ("pending", "target")

    def __init__(self) -> None:
        self.pending = False
        self.target: Optional[T] = None

    def take(self) -> T:
        self.pending = False
        return self.target  # type: ignore[return-value]


class Seekable(Generic[T]):
    """A value yielded by a seekable sequence.

    Calling :meth:`seek` asks the producing sequence to continue from the
    given value instead of the next one.
    """

    __slots__ = ("value", "less", "_state")

    def __init__(self, value: T, state: _SeekState[T], less: Less) -> None:
        self.value = value
        self.less = less
        self._state = state

    def seek(self, value: T) -> None:
        """Request a jump forward to ``value``; backward seeks are ignored."""
        if self.less(value, self.value):
            return
        self._state.pending = True
        self._state.target = value

    def __repr__(self) -> str:
        return f"Seekable({self.value!r})"


def _close(iterator: object) -> None:
    close = getattr(iterator, "close", None)
    if close is not None:
        close()


class _Holder(Generic[T]):
    """Pulls values one at a time from a seekable sequence."""

    def __init__(self, seq: Iterable[Seekable[T]]) -> None:
        self._iterator: Optional[Iterator[Seekable[T]]] = iter(seq)
        self.current: Optional[Seekable[T]] = None
        self.advance()

    @property
    def alive(self) -> bool:
        return self._iterator is not None

    @property
    def value(self) -> T:
        assert self.current is not None
        return self.current.value

    def advance(self) -> None:
        if self._iterator is None:
            return
        try:
            self.current = next(self._iterator)
        except StopIteration:
            self.stop()

    def seek(self, to: T) -> None:
        if self._iterator is None:
            return
        assert self.current is not None
        self.current.seek(to)
        self.advance()

    def stop(self) -> None:
        if self._iterator is None:
            return
        _close(self._iterator)
        self._iterator = None
        self.current = None


@dataclass(frozen=True)
class Ordered(Generic[T]):
    """Builds seekable sequences over values ordered by ``less``."""

    less: Less = field(default=operator.lt)

    def _equal(self, a: T, b: T) -> bool:
        return not (self.less(a, b) or self.less(b, a))

    def _extreme(self, holders: list[_Holder[T]], pick_max: bool) -> tuple[bool, Optional[T]]:
        found = False
        best: Optional[T] = None
        for holder in holders:
            if not holder.alive:
                continue
            v = holder.value
            if not found:
                best, found = v, True
            elif pick_max and self.less(best, v):
                best = v
            elif not pick_max and self.less(v, best):
                best = v
        return found, best

    def seek_iterator(self, constructor: SeekConstructor) -> Iterator[Seekable[T]]:
        """Yield seekable values from ``constructor``.

        ``constructor(None)`` gives the sequence from the start;
        ``constructor(v)`` gives it from the first value not less than ``v``.
        """
        state: _SeekState[T] = _SeekState()
        source = iter(constructor(None))
        try:
            while True:
                for v in source:
                    yield Seekable(v, state, self.less)
                    if state.pending:
                        break
                if not state.pending:
                    return
                _close(source)
                source = iter(constructor(state.take()))
        finally:
            _close(source)

    def intersect(self, *args: Iterable[Seekable[T]]) -> Iterator[Seekable[T]]:
        """Yield the values present in every one of the given sequences."""
        holders = [_Holder(seq) for seq in args]
        state: _SeekState[T] = _SeekState()
        try:
            while all(h.alive for h in holders):
                found, highest = self._extreme(holders, pick_max=True)
                if not found:
                    return
                if not all(self._equal(highest, h.value) for h in holders):
                    for h in holders:
                        h.seek(highest)
                    continue
                yield Seekable(highest, state, self.less)
                if state.pending:
                    target = state.take()
                    for h in holders:
                        h.seek(target)
                    continue
                for h in holders:
                    h.advance()
        finally:
            for h in holders:
                h.stop()

    def union(self, *args: Iterable[Seekable[T]]) -> Iterator[Seekable[T]]:
        """Yield each value present in any of the given sequences, once."""
        holders = [_Holder(seq) for seq in args]
        state: _SeekState[T] = _SeekState()
        try:
            while any(h.alive for h in holders):
                found, lowest = self._extreme(holders, pick_max=False)
                if not found:
                    return
                yield Seekable(lowest, state, self.less)
                if state.pending:
                    target = state.take()
                    for h in holders:
                        h.seek(target)
                    continue
                for h in holders:
                    if h.alive and self._equal(lowest, h.value):
                        h.advance()
        finally:
            for h in holders:
                h.stop()


def unseek(seq: Iterable[Seekable[T]]) -> Iterator[T]:
    """Strip the seek ability, yielding plain values."""
    return (s.value for s in seq)


def first(seq: Iterable[T]) -> T:
    """Return the first value of ``seq``; raise ValueError if it is empty."""
    iterator = iter(seq)
    try:
        return next(iterator)
    except StopIteration:
        raise ValueError("sequence is empty") from None
    finally:
        _close(iterator)


def to_list(seq: Iterable[T]) -> list[T]:
    """Collect ``seq`` into a list."""
    return list(seq)