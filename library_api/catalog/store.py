"""
In-memory data store for the catalogue API.

``CatalogStore`` owns an ordered list of ``Book`` records. Nothing is
persisted: the list starts from ``SEED_BOOKS`` (or empty) and is lost
when the process exits. All lookups are linear scans returning the
first record whose id matches, so a duplicated id shadows any later
record carrying the same id.

FastAPI runs synchronous route handlers on a thread pool, so every
operation takes ``self._lock`` for its whole read or read-modify-write
sequence. Records leave the store as copies made under the lock;
callers can serialize them without racing a concurrent mutation.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from ..errors import BookNotFound, BookUnavailable, NoSearchResults
from .schemas import Book

logger = logging.getLogger(__name__)


SEED_BOOKS: List[Book] = [
    Book(id="1", title="In Search of Lost Time", author="Marcel Proust", quantity=2),
    Book(id="2", title="The Great Gatsby", author="F. Scott Fitzgerald", quantity=5),
    Book(id="3", title="War and Peace", author="Leo Tolstoy", quantity=6),
]


def _norm(s: Optional[str]) -> str:
    """Normalize a string for case-insensitive comparison."""
    return (s or "").lower()


class CatalogStore:
    """Lock-guarded, insertion-ordered collection of books."""

    def __init__(self, books: Optional[Iterable[Book]] = None) -> None:
        self._lock = threading.Lock()
        self._books: List[Book] = [b.model_copy() for b in (books or [])]

    @classmethod
    def seeded(cls) -> "CatalogStore":
        """Return a store holding a fresh copy of ``SEED_BOOKS``."""
        return cls(SEED_BOOKS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def _index_of(self, book_id: str) -> int:
        # Caller must hold self._lock.
        for i, book in enumerate(self._books):
            if book.id == book_id:
                return i
        raise BookNotFound()

    def list_books(self) -> List[Book]:
        with self._lock:
            return [b.model_copy() for b in self._books]

    def get_book(self, book_id: str) -> Book:
        """Return the first book whose id equals ``book_id``.

        Raises
        ------
        BookNotFound
            When no record carries that id.
        """
        with self._lock:
            return self._books[self._index_of(book_id)].model_copy()

    def checkout(self, book_id: str) -> Book:
        """Take one copy of a book off the shelf.

        The stored record is decremented in place and a copy of the
        updated record is returned.

        Raises
        ------
        BookNotFound
            When no record carries that id.
        BookUnavailable
            When the book's quantity is zero or below; the quantity
            is left untouched.
        """
        with self._lock:
            book = self._books[self._index_of(book_id)]
            if book.quantity <= 0:
                raise BookUnavailable()
            book.quantity -= 1
            logger.info("Checked out book %s, %d left", book.id, book.quantity)
            return book.model_copy()

    def return_book(self, book_id: str) -> Book:
        """Put one copy of a book back. There is no upper bound."""
        with self._lock:
            book = self._books[self._index_of(book_id)]
            book.quantity += 1
            logger.info("Returned book %s, %d on shelf", book.id, book.quantity)
            return book.model_copy()

    def add_book(self, book: Book) -> Book:
        """Append ``book`` to the end of the catalog.

        No duplicate-id check is made; see the module docstring for how
        duplicates are resolved.
        """
        with self._lock:
            stored = book.model_copy()
            self._books.append(stored)
            logger.info("Added book %s (%d in catalog)", stored.id, len(self._books))
            return stored.model_copy()

    def delete_book(self, book_id: str) -> None:
        """Remove the first book matching ``book_id``, keeping the order of the rest."""
        with self._lock:
            del self._books[self._index_of(book_id)]
            logger.info("Deleted book %s (%d in catalog)", book_id, len(self._books))

    def replace_book(self, book_id: str, book: Book) -> Book:
        """Replace every field of the first record matching ``book_id``.

        The replacement keeps the old record's position but may carry a
        different id.
        """
        with self._lock:
            index = self._index_of(book_id)
            stored = book.model_copy()
            self._books[index] = stored
            logger.info("Replaced book %s with %s", book_id, stored.id)
            return stored.model_copy()

    def available_books(self) -> List[Book]:
        """Return books with at least one copy on the shelf.

        An empty list is a valid answer here, unlike ``search``.
        """
        with self._lock:
            return [b.model_copy() for b in self._books if b.quantity > 0]

    def search(self, query: str) -> List[Book]:
        """Case-insensitive substring search over title and author.

        Parameters
        ----------
        query : str
            Text to look for. An empty string matches every book.

        Returns
        -------
        List[Book]
            Matching books in catalog order.

        Raises
        ------
        NoSearchResults
            When nothing matches.
        """
        nq = _norm(query)
        with self._lock:
            results = [
                b.model_copy()
                for b in self._books
                if nq in _norm(b.title) or nq in _norm(b.author)
            ]
        if not results:
            raise NoSearchResults()
        return results
