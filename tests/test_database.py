import sqlite3

import pytest

from booklib.database import connect, create_schema, seed_test_data

TABLES = {
    "users",
    "authors",
    "genres",
    "books",
    "comments",
    "rentals",
    "favourites",
    "authors_books_join_table",
    "genres_books_join_table",
}


@pytest.fixture
def conn():
    connection = connect(":memory:")
    yield connection
    connection.close()


def _table_names(connection):
    rows = connection.execute(
        "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
    ).fetchall()
    return {name for (name,) in rows}


def test_schema_has_all_tables(conn):
    assert _table_names(conn) == TABLES


def test_create_schema_is_idempotent():
    connection = sqlite3.connect(":memory:")
    create_schema(connection)
    create_schema(connection)
    assert _table_names(connection) == TABLES
    connection.close()


def test_seeded_users(conn):
    names = [name for (name,) in conn.execute("SELECT name FROM users ORDER BY id")]
    assert names == ["Alice", "Bob", "Charlie"]


def test_seeded_genres(conn):
    names = [name for (name,) in conn.execute("SELECT name FROM genres ORDER BY id")]
    assert names == ["Dystopian", "Fantasy", "Classic"]


def test_books_linked_to_authors_and_genres(conn):
    rows = conn.execute(
        """
        SELECT books.title, authors.name, genres.name
        FROM books
        JOIN authors_books_join_table ab ON ab.book_id = books.id
        JOIN authors ON authors.id = ab.authors_id
        JOIN genres_books_join_table gb ON gb.book_id = books.id
        JOIN genres ON genres.id = gb.genres_id
        """
    ).fetchall()
    assert set(rows) == {
        ("1984", "George Orwell", "Dystopian"),
        ("Brave New World", "Aldous Huxley", "Dystopian"),
        ("Fahrenheit 451", "Ray Bradbury", "Dystopian"),
        ("To Kill a Mockingbird", "Harper Lee", "Classic"),
        ("The Hobbit", "J.R.R. Tolkien", "Fantasy"),
    }


def test_active_rentals(conn):
    rows = conn.execute(
        """
        SELECT users.name, books.title, rentals.rent_date = CURRENT_DATE
        FROM rentals
        JOIN users ON users.id = rentals.user_id
        JOIN books ON books.id = rentals.book_id
        WHERE return_date IS NULL
        """
    ).fetchall()
    assert set(rows) == {("Alice", "1984", 1), ("Bob", "Brave New World", 1)}


def test_returned_rental_dates(conn):
    row = conn.execute(
        """
        SELECT users.name, books.title,
               rent_date = DATE('now', '-15 days'),
               return_date = DATE('now', '-10 days')
        FROM rentals
        JOIN users ON users.id = rentals.user_id
        JOIN books ON books.id = rentals.book_id
        WHERE return_date IS NOT NULL
        """
    ).fetchall()
    assert row == [("Charlie", "Fahrenheit 451", 1, 1)]


def test_favourites(conn):
    rows = conn.execute(
        """
        SELECT users.name, books.title FROM favourites
        JOIN users ON users.id = favourites.user_id
        JOIN books ON books.id = favourites.book_id
        """
    ).fetchall()
    assert rows == [("Alice", "1984")]


def test_reconnect_does_not_reseed(tmp_path):
    path = tmp_path / "library.db"
    first = connect(path)
    before = {t: first.execute(f"SELECT COUNT(*) FROM {t}").fetchone() for t in TABLES}
    first.close()

    second = connect(path)
    after = {t: second.execute(f"SELECT COUNT(*) FROM {t}").fetchone() for t in TABLES}
    second.close()
    assert after == before


def test_seed_leaves_populated_tables_alone():
    connection = sqlite3.connect(":memory:")
    create_schema(connection)
    connection.execute("INSERT INTO users (name) VALUES ('Dora')")
    connection.commit()
    seed_test_data(connection)

    names = [name for (name,) in connection.execute("SELECT name FROM users")]
    assert names == ["Dora"]
    user_ids = {uid for (uid,) in connection.execute("SELECT user_id FROM rentals")}
    assert user_ids == {-1}
    connection.close()


def test_connect_to_directory_fails(tmp_path):
    with pytest.raises(sqlite3.OperationalError):
        connect(tmp_path)