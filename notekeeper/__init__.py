"""Notes and folders kept in SQLite, with note listing, sorting, filtering and selection helpers."""

__version__ = "0.1.0"