"""
Pydantic schema definitions for the catalog module.

The ``Book`` model is both the request body for create/update and the
response shape for every endpoint returning a record. Every field
falls back to an empty/zero value when a client omits it, but a field
of the wrong JSON type is rejected: the model is strict, so ``"5"``
is not an int and ``4`` is not a str. ``Message`` is the single-field
payload used for confirmations and errors.
"""

from pydantic import BaseModel, ConfigDict


class Book(BaseModel):
    """A single book entry.

    ``id`` is supplied by the caller and is used as the lookup key.
    It is not checked for uniqueness or format. ``quantity`` is the
    number of copies on the shelf; checkout refuses to take it below
    zero but an update may set any integer.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    id: str = ""
    title: str = ""
    author: str = ""
    quantity: int = 0


class Message(BaseModel):
    message: str
