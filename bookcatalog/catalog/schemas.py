"""
Pydantic schema definitions for the catalog API.

Records themselves are returned as :class:`bookcatalog.models.Record`.
The models here describe request bodies and the listing entries a
front-end needs to render the current result set: a display line plus
the identifier and path used by its "Remove" action.
"""

from typing import Optional

from pydantic import BaseModel


class RecordIn(BaseModel):
    """Raw form input for a new record.

    Fields are optional here so that missing values reach the record
    builder and are reported as a validation error with every missing
    field named, rather than as a schema error.
    """

    title: Optional[str] = None
    author: Optional[str] = None
    identifier: Optional[str] = None


class ListingEntry(BaseModel):
    display_line: str
    identifier: str
    remove_path: str


class CommandIn(BaseModel):
    line: str


class CommandOut(BaseModel):
    status: str = "ok"
    command: str
