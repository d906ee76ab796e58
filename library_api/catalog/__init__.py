"""
Catalog package for the library API.

This package holds the book schema, the in-memory ``CatalogStore``
and the routes that expose it: listing, lookup, create, update,
delete, checkout/return of copies, availability and search. The
store lives on the application (``app.state.catalog``) and reaches
the routes through the ``get_catalog`` dependency.
"""

from .router import router as catalog_router  # noqa: F401
from .store import CatalogStore  # noqa: F401
