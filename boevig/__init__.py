"""In-memory entity-component store with seekable ordered iterators and equality indices."""

__version__ = "0.1.0"