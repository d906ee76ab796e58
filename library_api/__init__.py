"""
Library Catalog API.

A small FastAPI service keeping a list of books in memory and exposing
CRUD, checkout/return, availability and search endpoints over it.
``library_api.main.create_app`` builds the application; the
``catalog`` subpackage holds the schema, store and routes.
"""
