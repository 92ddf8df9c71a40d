# boevig

An in-memory entity-component store for games, built on ordered, seekable
iterators.

## Modules

- `boevig.rang`: seekable ordered sequences. `Ordered` (ordered by a `less`
  function, `operator.lt` by default) offers `seek_iterator`, `intersect` and
  `union`. The helpers are `unseek`, `first` and `to_list`.
- `boevig.ecs.components`: the `Component` base class and per-type storage
  (`ComponentPage`, `ComponentBook`).
- `boevig.ecs.indexing`: equality indices (`EQ`, `EqualityIndexer`,
  `IndexPage`, `IndexBook`).
- `boevig.ecs.db`: the `DB` that ties components and indices together, and
  its chained `SearchBuilder`.
- `boevig.game`: a few plain game types. `Player`, `GridLocation(x, y)` and
  `Terrain(passable)` are frozen dataclasses. `Direction` is an `IntFlag` with
  `N`, `E`, `S`, `W` and the diagonals `NE`, `SE`, `SW`, `NW` built from them.

## Installing

Install the project directory with pip. The `test` extra adds pytest, which
runs the test suite.

## Using it

Components are subclasses of `Component`. Dataclasses are the usual choice. A
component can report values to equality indices by overriding `index()`:

```python
from dataclasses import dataclass

from boevig.ecs.components import Component
from boevig.ecs.db import DB
from boevig.ecs.indexing import EQ
from boevig.rang import first


@dataclass
class Monster(Component):
    name: str = ""


@dataclass
class Location(Component):
    coord: tuple[int, int] = (0, 0)

    def index(self):
        return [EQ("Location.coord", self.coord)]


db = DB()
bat = db.new_entity(Monster("bat"), Location((1, 1)))
rat = db.new_entity(Monster("rat"), Location((1, 2)))

# Every entity that has a Monster and sits on (1, 2).
ids = list(
    db.search()
    .components(Monster)
    .index(EQ("Location.coord", (1, 2)))
    .done()
)
assert ids == [rat]

# The first entity that has a Monster.
assert first(db.search().components(Monster).done()) == bat

# Fetch components by type: one type gives the component, several give a
# tuple, and None comes back when any of them is missing.
monster, location = db.get(bat, Monster, Location)
```

`DB` has these methods:

- `new_entity(*components)` returns a new id.
- `set(id, *components)` attaches components to an entity or replaces them.
- `unset(id, ComponentType)` detaches one component and its index entries.
- `remove(id)` deletes the entity with all its components and index entries.
- `search_components` and `search_index` give the raw seekable id sequences.

`SearchBuilder.seek_seq` adds any other seekable id sequence to a search.

Searches yield entity ids in ascending order. When a search combines several
component types or index queries, it yields only the ids that match all of
them. A search with nothing added yields nothing.

### Seekable sequences

The iterators in `boevig.rang` yield `Seekable` items, and each item's
`.value` holds the element. Calling `seek(value)` on an item during iteration
moves the sequence forward to the first element not less than `value`.
Seeking backwards has no effect.

- `Ordered.intersect` yields the values that every input sequence has.
- `Ordered.union` yields each value found in any input, once.

Both read their inputs lazily. `unseek` turns a seekable sequence back into
plain values. `first` returns the first element and raises `ValueError` if
the sequence is empty.

## What it does not do

Everything is held in memory. There is no storage to disk, no serialisation
of entities, and no command-line tool. The indices support equality lookups
only, with no range queries. The types in `boevig.game` are plain dataclasses,
not `Component` subclasses.