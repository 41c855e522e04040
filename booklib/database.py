"""SQLite storage for the library: schema creation and sample data."""

from __future__ import annotations

import sqlite3
from os import PathLike

DEFAULT_PATH = "library.db"

_ID_COLUMN = "id INTEGER PRIMARY KEY AUTOINCREMENT"


def _references(column: str, table: str) -> str:
    return f"FOREIGN KEY({column}) REFERENCES {table}(id)"


def _link_table(ref_column: str, ref_table: str) -> tuple[str, ...]:
    return (
        f"{ref_column} INTEGER",
        "book_id INTEGER",
        _references(ref_column, ref_table),
        _references("book_id", "books"),
        f"PRIMARY KEY({ref_column}, book_id)",
    )


# Table name -> column and constraint definitions, in creation order.
_TABLES: dict[str, tuple[str, ...]] = {
    "users": (_ID_COLUMN, "name TEXT NOT NULL"),
    "authors": (_ID_COLUMN, "name TEXT NOT NULL"),
    "genres": (_ID_COLUMN, "name TEXT NOT NULL"),
    "books": (_ID_COLUMN, "title TEXT NOT NULL"),
    "comments": (
        _ID_COLUMN,
        "user_id INTEGER",
        "book_id INTEGER",
        "content TEXT NOT NULL",
        _references("user_id", "users"),
        _references("book_id", "books"),
    ),
    "rentals": (
        _ID_COLUMN,
        "user_id INTEGER",
        "book_id INTEGER",
        "rent_date DATE DEFAULT CURRENT_DATE",
        "return_date DATE",
        _references("user_id", "users"),
        _references("book_id", "books"),
    ),
    "favourites": (
        "user_id INTEGER NOT NULL",
        "book_id INTEGER NOT NULL",
        _references("user_id", "users"),
        _references("book_id", "books"),
        "PRIMARY KEY(user_id, book_id)",
    ),
    "authors_books_join_table": _link_table("authors_id", "authors"),
    "genres_books_join_table": _link_table("genres_id", "genres"),
}

_SAMPLE_USERS = ("Alice", "Bob", "Charlie")
_SAMPLE_AUTHORS = (
    "George Orwell",
    "Aldous Huxley",
    "Ray Bradbury",
    "Harper Lee",
    "J.R.R. Tolkien",
)
_SAMPLE_GENRES = ("Dystopian", "Fantasy", "Classic")
# (title, index into authors, index into genres)
_SAMPLE_BOOKS = (
    ("1984", 0, 0),
    ("Brave New World", 1, 0),
    ("Fahrenheit 451", 2, 0),
    ("To Kill a Mockingbird", 3, 2),
    ("The Hobbit", 4, 1),
)
# (index into users, index into books) of rentals still open today
_SAMPLE_OPEN_RENTALS = ((0, 0), (1, 1))
# (index into users, index into books) of a rental already returned
_SAMPLE_RETURNED_RENTAL = (2, 2)
_SAMPLE_FAVOURITE = (0, 0)

# Identifier used for a seeded row that was not inserted in this run.
_MISSING = -1


def connect(path: str | PathLike[str] = DEFAULT_PATH) -> sqlite3.Connection:
    """Open the database at *path*, create the schema and seed sample data."""
    conn = sqlite3.connect(path)
    try:
        create_schema(conn)
        seed_test_data(conn)
    except Exception:
        conn.close()
        raise
    return conn


def create_schema(conn: sqlite3.Connection) -> None:
    """Create every table that does not exist yet."""
    with conn:
        for table, definitions in _TABLES.items():
            body = ", ".join(definitions)
            conn.execute(f"CREATE TABLE IF NOT EXISTS {table} ({body})")


def _is_empty(conn: sqlite3.Connection, table: str) -> bool:
    (count,) = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()
    return count == 0


def _insert_values(
    conn: sqlite3.Connection, table: str, column: str, values: tuple[str, ...]
) -> list[int]:
    sql = f"INSERT INTO {table} ({column}) VALUES (?)"
    return [conn.execute(sql, (value,)).lastrowid for value in values]


def _link_book(
    conn: sqlite3.Connection, table: str, column: str, ref_id: int, book_id: int
) -> None:
    conn.execute(
        f"INSERT INTO {table} ({column}, book_id) VALUES (?, ?)", (ref_id, book_id)
    )


def seed_test_data(conn: sqlite3.Connection) -> None:
    """Fill each empty table with a fixed set of sample rows.

    Tables that already hold rows are left alone; references to rows that
    were not inserted in this call use the identifier -1.
    """
    user_ids = [_MISSING] * len(_SAMPLE_USERS)
    author_ids = [_MISSING] * len(_SAMPLE_AUTHORS)
    genre_ids = [_MISSING] * len(_SAMPLE_GENRES)
    book_ids = [_MISSING] * len(_SAMPLE_BOOKS)

    with conn:
        if _is_empty(conn, "users"):
            user_ids = _insert_values(conn, "users", "name", _SAMPLE_USERS)
        if _is_empty(conn, "authors"):
            author_ids = _insert_values(conn, "authors", "name", _SAMPLE_AUTHORS)
        if _is_empty(conn, "genres"):
            genre_ids = _insert_values(conn, "genres", "name", _SAMPLE_GENRES)

        if _is_empty(conn, "books"):
            book_ids = []
            for title, author_index, genre_index in _SAMPLE_BOOKS:
                (book_id,) = _insert_values(conn, "books", "title", (title,))
                book_ids.append(book_id)
                _link_book(
                    conn,
                    "authors_books_join_table",
                    "authors_id",
                    author_ids[author_index],
                    book_id,
                )
                _link_book(
                    conn,
                    "genres_books_join_table",
                    "genres_id",
                    genre_ids[genre_index],
                    book_id,
                )

        if _is_empty(conn, "rentals"):
            conn.executemany(
                "INSERT INTO rentals (user_id, book_id, rent_date) "
                "VALUES (?, ?, CURRENT_DATE)",
                [(user_ids[u], book_ids[b]) for u, b in _SAMPLE_OPEN_RENTALS],
            )
            user_index, book_index = _SAMPLE_RETURNED_RENTAL
            conn.execute(
                "INSERT INTO rentals (user_id, book_id, rent_date, return_date) "
                "VALUES (?, ?, DATE('now', '-15 days'), DATE('now', '-10 days'))",
                (user_ids[user_index], book_ids[book_index]),
            )

        if _is_empty(conn, "favourites"):
            user_index, book_index = _SAMPLE_FAVOURITE
            conn.execute(
                "INSERT INTO favourites (user_id, book_id) VALUES (?, ?)",
                (user_ids[user_index], book_ids[book_index]),
            )