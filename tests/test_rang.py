import bisect

import pytest

from boevig.rang import Ordered, first, to_list, unseek


class Searcher:
    def __init__(self, *values):
        self.values = sorted(set(values))

    def search(self, start):
        if start is None:
            yield from self.values
            return
        yield from self.values[bisect.bisect_left(self.values, start):]


VALUES = (-2, -1, 1, 2, 3, 4, 5, 6)


def seq_of(*values):
    return Ordered().seek_iterator(Searcher(*values).search)


def test_seek_iterator_simple():
    assert to_list(unseek(seq_of(*VALUES))) == [-2, -1, 1, 2, 3, 4, 5, 6]


def test_seek_iterator_break():
    got = []
    for v in seq_of(*VALUES):
        if v.value >= 4:
            break
        got.append(v.value)
    assert got == [-2, -1, 1, 2, 3]


def test_seek_iterator_seek():
    got = []
    seek_once = False
    for v in seq_of(*VALUES):
        if v.value < 4:
            assert not seek_once
            seek_once = True
            v.seek(4)
            continue
        got.append(v.value)
    assert seek_once
    assert got == [4, 5, 6]


def test_seek_iterator_seek_back_fails():
    got = []
    seek_once = False
    for v in seq_of(*VALUES):
        if v.value == 4:
            assert not seek_once
            seek_once = True
            v.seek(2)
            continue
        got.append(v.value)
    assert seek_once
    assert got == [-2, -1, 1, 2, 3, 5, 6]


def test_seek_iterator_custom_order():
    ordered = Ordered(lambda a, b: a > b)
    values = [6, 5, 4, 3]

    def search(start):
        if start is None:
            return iter(values)
        return (v for v in values if v <= start)

    got = []
    for v in ordered.seek_iterator(search):
        if v.value == 6:
            v.seek(4)
            continue
        got.append(v.value)
    assert got == [4, 3]


COLLECTIONS = [
    ("no overlap", [1, 2, 3], [4, 5, 6], [], [1, 2, 3, 4, 5, 6]),
    ("left empty", [], [4, 5, 6], [], [4, 5, 6]),
    ("right empty", [4, 5, 6], [], [], [4, 5, 6]),
    ("both empty", [], [], [], []),
    ("overlap all", [1, 2, 3], [1, 2, 3], [1, 2, 3], [1, 2, 3]),
    ("overlap middle", [1, 2, 3, 4], [3, 4, 5, 6], [3, 4], [1, 2, 3, 4, 5, 6]),
    ("overlap big left", [1, 2, 3, 4, 5, 6, 7, 8], [6], [6], [1, 2, 3, 4, 5, 6, 7, 8]),
    ("overlap big right", [6], [1, 2, 3, 4, 5, 6, 7, 8], [6], [1, 2, 3, 4, 5, 6, 7, 8]),
]


@pytest.mark.parametrize("desc,left,right,ex_intersect,ex_union", COLLECTIONS)
def test_intersect(desc, left, right, ex_intersect, ex_union):
    o = Ordered()
    result = to_list(unseek(o.intersect(seq_of(*left), seq_of(*right))))
    assert result == ex_intersect


@pytest.mark.parametrize("desc,left,right,ex_intersect,ex_union", COLLECTIONS)
def test_union(desc, left, right, ex_intersect, ex_union):
    o = Ordered()
    result = to_list(unseek(o.union(seq_of(*left), seq_of(*right))))
    assert result == ex_union


def test_intersect_with_seek():
    o = Ordered()
    values = [1, 2, 3, 4, 5, 6, 7, 8]
    got = []
    for v in o.intersect(seq_of(*values), seq_of(*values)):
        if v.value == 2:
            v.seek(6)
            continue
        got.append(v.value)
    assert got == [1, 6, 7, 8]


def test_union_with_seek():
    o = Ordered()
    got = []
    for v in o.union(seq_of(1, 3, 5, 7), seq_of(2, 4, 6, 8)):
        if v.value == 2:
            v.seek(6)
            continue
        got.append(v.value)
    assert got == [1, 6, 7, 8]


def test_intersect_three_sequences():
    o = Ordered()
    result = to_list(
        unseek(o.intersect(seq_of(1, 2, 3, 4, 5), seq_of(2, 3, 5), seq_of(3, 5, 9)))
    )
    assert result == [3, 5]


def test_intersect_single_sequence_passes_through():
    o = Ordered()
    assert to_list(unseek(o.intersect(seq_of(*VALUES)))) == list(VALUES)


def test_intersect_no_sequences_is_empty():
    assert to_list(Ordered().intersect()) == []


def test_first_returns_first_value():
    assert first(unseek(seq_of(*VALUES))) == -2


def test_first_on_empty_raises():
    with pytest.raises(ValueError):
        first(unseek(seq_of()))


def test_to_list_collects():
    assert to_list(iter([3, 1, 2])) == [3, 1, 2]