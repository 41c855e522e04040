"""Library operations: listing, renting, returning, adding and removing."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable

from booklib.rent import Rental

_ACTIVE_RENTALS = """
    SELECT users.name, books.title
    FROM rentals
    JOIN users ON users.id = rentals.user_id
    JOIN books ON books.id = rentals.book_id
    WHERE return_date IS NULL
    ORDER BY users.name
"""


def filter_names(names: Iterable[str], text: str) -> list[str]:
    """Return the names containing *text*, ignoring case, in their original order."""
    needle = text.casefold()
    return [name for name in names if needle in name.casefold()]


class Library:
    """Operations on a library database connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def _column(self, sql: str, params: tuple = ()) -> list:
        return [row[0] for row in self._conn.execute(sql, params)]

    def _pairs(self, sql: str, params: tuple = ()) -> list[tuple[int, str]]:
        return [(row[0], row[1]) for row in self._conn.execute(sql, params)]

    def users(self) -> list[str]:
        """Names of all users, sorted by name."""
        return self._column("SELECT name FROM users ORDER BY name")

    def books(self) -> list[str]:
        """Titles of all books, sorted by title."""
        return self._column("SELECT title FROM books ORDER BY title")

    def active_rentals(self) -> list[Rental]:
        """Rentals not yet returned, sorted by user name."""
        return [Rental(user, book) for user, book in self._conn.execute(_ACTIVE_RENTALS)]

    def rentable_users(self) -> list[tuple[int, str]]:
        """Every user as an (id, name) pair."""
        return self._pairs("SELECT id, name FROM users")

    def available_books(self) -> list[tuple[int, str]]:
        """Books not currently rented, as (id, title) pairs."""
        return self._pairs(
            """
            SELECT id, title FROM books
            WHERE id NOT IN (
                SELECT book_id FROM rentals WHERE return_date IS NULL
            )
            """
        )

    def users_with_rentals(self) -> list[tuple[int, str]]:
        """Users holding at least one unreturned book, sorted by name."""
        return self._pairs(
            """
            SELECT DISTINCT users.id, users.name
            FROM rentals
            JOIN users ON users.id = rentals.user_id
            WHERE return_date IS NULL
            ORDER BY users.name
            """
        )

    def books_rented_by(self, user_id: int) -> list[tuple[int, str]]:
        """Books the user holds and has not returned, as (id, title) pairs."""
        return self._pairs(
            """
            SELECT books.id, books.title
            FROM rentals
            JOIN books ON books.id = rentals.book_id
            WHERE rentals.user_id = ? AND return_date IS NULL
            """,
            (user_id,),
        )

    def rent_book(self, user_id: int | None, book_id: int | None) -> int | None:
        """Record a rental dated today; return its id, or None when no user or book is given."""
        if not user_id or not book_id:
            return None
        with self._conn:
            cursor = self._conn.execute(
                "INSERT INTO rentals (user_id, book_id) VALUES (?, ?)",
                (user_id, book_id),
            )
        return cursor.lastrowid

    def return_book(self, user_id: int | None, book_id: int | None) -> int:
        """Mark the user's open rentals of the book as returned today; return how many."""
        if not user_id or not book_id:
            return 0
        with self._conn:
            cursor = self._conn.execute(
                """
                UPDATE rentals
                SET return_date = CURRENT_DATE
                WHERE user_id = ? AND book_id = ? AND return_date IS NULL
                """,
                (user_id, book_id),
            )
        return cursor.rowcount

    def _insert(self, sql: str, value: str) -> int | None:
        value = value.strip()
        if not value:
            return None
        with self._conn:
            cursor = self._conn.execute(sql, (value,))
        return cursor.lastrowid

    def _delete(self, sql: str, value: str) -> int:
        value = value.strip()
        if not value:
            return 0
        with self._conn:
            cursor = self._conn.execute(sql, (value,))
        return cursor.rowcount

    def add_user(self, name: str) -> int | None:
        """Add a user with the trimmed name; return its id, or None if the name is blank."""
        return self._insert("INSERT INTO users (name) VALUES (?)", name)

    def add_book(self, title: str) -> int | None:
        """Add a book with the trimmed title; return its id, or None if the title is blank."""
        return self._insert("INSERT INTO books (title) VALUES (?)", title)

    def remove_user(self, name: str) -> int:
        """Delete every user with the trimmed name; return how many were deleted."""
        return self._delete("DELETE FROM users WHERE name = ?", name)

    def remove_book(self, title: str) -> int:
        """Delete every book with the trimmed title; return how many were deleted."""
        return self._delete("DELETE FROM books WHERE title = ?", title)