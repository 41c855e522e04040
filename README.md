# booklib

booklib keeps track of a small lending library. It stores users, books and
rentals in an SQLite database.

When it opens a database, it creates any tables that are missing: users,
authors, genres, books, comments, rentals, favourites, and the tables that link
books to authors and genres. It then fills every empty table with fixed sample
data:

- three users: Alice, Bob and Charlie
- five books, with their authors and genres
- two open rentals and one rental that has already been returned
- one favourite

Tables that already hold rows are not touched.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package adds a `booklib` command:

```
booklib --help
booklib [--db FILE] COMMAND ...
```

`--db` selects the database file. The default is `library.db` in the current
directory. Each command opens the database and does one thing:

| Command | What it does |
| --- | --- |
| `users [--filter TEXT]` | Lists user names, sorted. |
| `books [--filter TEXT]` | Lists book titles, sorted. |
| `rentals [--user TEXT] [--book TEXT]` | Lists unreturned rentals as `user<TAB>book`, ordered by user name. |
| `available` | Lists books that are not currently rented, as `id<TAB>title`. |
| `borrowers` | Lists users who still hold a book, as `id<TAB>name`. |
| `borrowed USER_ID` | Lists the books a user still holds, as `id<TAB>title`. |
| `rent USER_ID BOOK_ID` | Records a rental dated today. |
| `return USER_ID BOOK_ID` | Sets today as the return date of that user's open rentals of the book. |
| `add-user NAME` | Adds a user. |
| `add-book TITLE` | Adds a book. |
| `remove-user NAME` | Deletes every user with that name. |
| `remove-book TITLE` | Deletes every book with that title. |

All filters match a case-insensitive substring. If a database error occurs, the
command prints it to standard error and exits with status 1.

## Library use

```python
from booklib.database import connect
from booklib.library import Library, filter_names
from booklib.rent import RentFilter

conn = connect("library.db")        # creates the schema and sample data
library = Library(conn)

print(library.users())              # user names, sorted
print(library.books())              # book titles, sorted
print(filter_names(library.books(), "the"))

library.add_user("Dana")            # returns the new id
library.add_book("Dune")

rentals = library.active_rentals()  # Rental(user, book) items, ordered by user name
print(RentFilter(user_filter="ali").apply(rentals))
```

`booklib.database` also provides `create_schema(conn)` and
`seed_test_data(conn)`, which you can call on any `sqlite3` connection.

### Renting and returning

- `rent_book(user_id, book_id)` inserts a rental dated today and returns its
  id. If either id is `0` or `None`, it does nothing and returns `None`. It does
  not check whether the book is already out.
- `return_book(user_id, book_id)` sets today as the return date of that user's
  open rentals of the book and returns how many rentals it changed.

These methods give you the choices for the two calls above. Each one returns
`(id, name)` pairs:

- `rentable_users()`: every user.
- `available_books()`: books that are not currently rented.
- `users_with_rentals()`: users who still hold a book, sorted by name.
- `books_rented_by(user_id)`: the books one user still holds.

### Adding and removing

`add_user` and `add_book` trim the name first. They return `None` for a blank
name.

`remove_user` and `remove_book` delete every row that has the trimmed name and
return how many rows they deleted. They do not delete rentals. A rental whose
user or book has been removed no longer appears in `active_rentals()`.

## What it does not do

- It has no graphical interface. You work with it only through the command line
  and the Python API above.
- Authors, genres, comments and favourites are stored, and the sample data fills
  them in, but the package has no operations for listing or editing them.