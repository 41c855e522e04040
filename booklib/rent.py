"""Active rentals and the text filter applied to them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Rental:
    """One rental as shown in the rentals table: who has which book."""

    user: str
    book: str


def _contains(text: str, needle: str) -> bool:
    return needle.casefold() in text.casefold()


@dataclass
class RentFilter:
    """Case-insensitive substring filter on a rental's user and book."""

    user_filter: str = ""
    book_filter: str = ""

    def accepts(self, rental: Rental) -> bool:
        """Return True when both the user and the book match their filters."""
        return _contains(rental.user, self.user_filter) and _contains(
            rental.book, self.book_filter
        )

    def apply(self, rentals: Iterable[Rental]) -> list[Rental]:
        """Return the accepted rentals, keeping their order."""
        return [rental for rental in rentals if self.accepts(rental)]