"""
Route definitions for the catalogue API.

Endpoints under /api/catalog:
- GET    /books               : listing of records matching ``q`` (all when absent)
- GET    /books/{identifier}  : one record (identifier percent-encoded, may contain "/")
- POST   /books               : add a record from form fields
- DELETE /books/{identifier}  : remove a record
- DELETE /books               : clear the catalogue
- POST   /commands            : run a text command (``add ...`` / ``remove ...``)
"""

from __future__ import annotations

from typing import List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from ..commands import AddRecordCommand, ClearCatalogCommand, RemoveRecordCommand
from ..display import Formatter, render_listing
from ..errors import CatalogError
from ..interpreter import TextCommandInterpreter
from ..models import Record, RecordBuilder
from ..storage import CatalogStore
from .schemas import CommandIn, CommandOut, ListingEntry, RecordIn


PREFIX = "/api/catalog"

router = APIRouter(prefix=PREFIX, tags=["catalog"])


def get_store(request: Request) -> CatalogStore:
    return request.app.state.store


def get_display_formatter(request: Request) -> Formatter:
    return request.app.state.formatter


def get_interpreter(request: Request) -> TextCommandInterpreter:
    return request.app.state.interpreter


@router.get("/books", response_model=List[ListingEntry])
def list_books(
    q: Optional[str] = Query(default=None, description="Search text (title/author)"),
    store: CatalogStore = Depends(get_store),
    formatter: Formatter = Depends(get_display_formatter),
) -> List[ListingEntry]:
    """Return the current listing, filtered by ``q`` when given."""
    records = store.search(q)
    return [
        ListingEntry(
            display_line=line,
            identifier=identifier,
            remove_path=f"{PREFIX}/books/{quote(identifier, safe='')}",
        )
        for line, identifier in render_listing(records, formatter)
    ]


@router.get("/books/{identifier:path}", response_model=Record)
def get_book(identifier: str, store: CatalogStore = Depends(get_store)) -> Record:
    record = store.get(identifier)
    if record is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return record


@router.post("/books", response_model=Record)
def add_book(req: RecordIn, store: CatalogStore = Depends(get_store)) -> Record:
    try:
        record = (
            RecordBuilder()
            .title(req.title)
            .author(req.author)
            .identifier(req.identifier)
            .build()
        )
    except CatalogError as e:
        raise HTTPException(status_code=400, detail=str(e))
    AddRecordCommand(store, record).execute()
    return record


@router.delete("/books/{identifier:path}")
def remove_book(identifier: str, store: CatalogStore = Depends(get_store)):
    command = RemoveRecordCommand(store, identifier)
    command.execute()
    return {"status": "ok", "removed": command.removed}


@router.delete("/books")
def clear_books(store: CatalogStore = Depends(get_store)):
    ClearCatalogCommand(store).execute()
    return {"status": "ok"}


@router.post("/commands", response_model=CommandOut)
def run_command(
    req: CommandIn,
    interpreter: TextCommandInterpreter = Depends(get_interpreter),
) -> CommandOut:
    try:
        command = interpreter.interpret(req.line)
    except CatalogError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return CommandOut(command=type(command).__name__)
