"""Manage a small lending library of users, books and rentals in SQLite."""

__version__ = "0.1.0"
__all__ = ["database", "rent", "library", "cli"]