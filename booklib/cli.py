"""Command-line front end for the library database."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from contextlib import closing

from booklib import database
from booklib.library import Library, filter_names
from booklib.rent import RentFilter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="booklib", description="Manage a small book library.")
    parser.add_argument("--db", default=database.DEFAULT_PATH, help="database file")
    sub = parser.add_subparsers(dest="command", required=True)

    users = sub.add_parser("users", help="list users")
    users.add_argument("--filter", default="", help="case-insensitive substring")
    books = sub.add_parser("books", help="list books")
    books.add_argument("--filter", default="", help="case-insensitive substring")

    rentals = sub.add_parser("rentals", help="list active rentals")
    rentals.add_argument("--user", default="", help="filter on user name")
    rentals.add_argument("--book", default="", help="filter on book title")

    sub.add_parser("available", help="list books that can be rented")
    sub.add_parser("borrowers", help="list users holding books")
    borrowed = sub.add_parser("borrowed", help="list books held by a user")
    borrowed.add_argument("user_id", type=int)

    for name in ("rent", "return"):
        cmd = sub.add_parser(name, help=f"{name} a book")
        cmd.add_argument("user_id", type=int)
        cmd.add_argument("book_id", type=int)

    sub.add_parser("add-user", help="add a user").add_argument("name")
    sub.add_parser("add-book", help="add a book").add_argument("title")
    sub.add_parser("remove-user", help="remove users by name").add_argument("name")
    sub.add_parser("remove-book", help="remove books by title").add_argument("title")
    return parser


def _print_pairs(pairs: list[tuple[int, str]]) -> None:
    for item_id, label in pairs:
        print(f"{item_id}\t{label}")


def _run(library: Library, args: argparse.Namespace) -> None:
    command = args.command
    if command == "users":
        print("\n".join(filter_names(library.users(), args.filter)))
    elif command == "books":
        print("\n".join(filter_names(library.books(), args.filter)))
    elif command == "rentals":
        for rental in RentFilter(args.user, args.book).apply(library.active_rentals()):
            print(f"{rental.user}\t{rental.book}")
    elif command == "available":
        _print_pairs(library.available_books())
    elif command == "borrowers":
        _print_pairs(library.users_with_rentals())
    elif command == "borrowed":
        _print_pairs(library.books_rented_by(args.user_id))
    elif command == "rent":
        rental_id = library.rent_book(args.user_id, args.book_id)
        print("Nothing rented." if rental_id is None else f"Rented as rental {rental_id}.")
    elif command == "return":
        print(f"Returned {library.return_book(args.user_id, args.book_id)} rental(s).")
    elif command == "add-user":
        user_id = library.add_user(args.name)
        print("Nothing added." if user_id is None else f"Added user {user_id}.")
    elif command == "add-book":
        book_id = library.add_book(args.title)
        print("Nothing added." if book_id is None else f"Added book {book_id}.")
    elif command == "remove-user":
        print(f"Removed {library.remove_user(args.name)} user(s).")
    elif command == "remove-book":
        print(f"Removed {library.remove_book(args.title)} book(s).")


def main(argv: list[str] | None = None) -> int:
    """Run one library command and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        with closing(database.connect(args.db)) as conn:
            _run(Library(conn), args)
    except sqlite3.Error as exc:
        print(f"Database error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())