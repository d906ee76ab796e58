"""
Route definitions for the catalogue API.

Endpoints:
- GET    /books               : every book in catalog order
- GET    /books/available     : books with quantity > 0
- GET    /books/search?query= : case-insensitive title/author search
- GET    /books/{book_id}     : one book
- POST   /books               : append a book
- PUT    /books/{book_id}     : replace a book
- DELETE /books/{book_id}     : remove a book
- PATCH  /checkout?id=        : take one copy
- PATCH  /return?id=          : give one copy back

Starlette matches routes in registration order, so the literal
``/books/available`` and ``/books/search`` routes must stay above
``/books/{book_id}`` or they would be captured as ids.

Query parameters are declared optional and checked here rather than by
FastAPI so that a missing one is answered with the catalog's own
``{"message": ...}`` payload.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status

from ..errors import MissingParameter
from .schemas import Book, Message
from .store import CatalogStore

router = APIRouter(tags=["catalog"])


def get_catalog(request: Request) -> CatalogStore:
    """Return the store owned by the running application."""
    return request.app.state.catalog


def _require(value: Optional[str], message: str) -> str:
    if value is None:
        raise MissingParameter(message)
    return value


@router.get("/books", response_model=List[Book])
def list_books(catalog: CatalogStore = Depends(get_catalog)) -> List[Book]:
    return catalog.list_books()


@router.get("/books/available", response_model=List[Book])
def available_books(catalog: CatalogStore = Depends(get_catalog)) -> List[Book]:
    """Return books that can be checked out.

    An empty list is returned when nothing is on the shelf.
    """
    return catalog.available_books()


@router.get("/books/search", response_model=List[Book])
def search_books(
    query: Optional[str] = Query(default=None, description="Text to find in title or author"),
    catalog: CatalogStore = Depends(get_catalog),
) -> List[Book]:
    """Search titles and authors.

    Unlike ``/books/available``, an empty result is reported as 404.
    """
    return catalog.search(_require(query, "Missing search query."))


@router.get("/books/{book_id}", response_model=Book)
def get_book(book_id: str, catalog: CatalogStore = Depends(get_catalog)) -> Book:
    return catalog.get_book(book_id)


@router.post("/books", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(payload: Book, catalog: CatalogStore = Depends(get_catalog)) -> Book:
    return catalog.add_book(payload)


@router.put("/books/{book_id}", response_model=Book)
def update_book(
    book_id: str,
    payload: Book,
    catalog: CatalogStore = Depends(get_catalog),
) -> Book:
    return catalog.replace_book(book_id, payload)


@router.delete("/books/{book_id}", response_model=Message)
def delete_book(book_id: str, catalog: CatalogStore = Depends(get_catalog)) -> Message:
    catalog.delete_book(book_id)
    return Message(message="Book deleted successfully.")


@router.patch("/checkout", response_model=Book)
def checkout_book(
    id: Optional[str] = Query(default=None, description="Id of the book to check out"),
    catalog: CatalogStore = Depends(get_catalog),
) -> Book:
    return catalog.checkout(_require(id, "Missing id query parameter."))


@router.patch("/return", response_model=Book)
def return_book(
    id: Optional[str] = Query(default=None, description="Id of the book to return"),
    catalog: CatalogStore = Depends(get_catalog),
) -> Book:
    return catalog.return_book(_require(id, "Missing id query parameter."))
