"""
Text command interpreter.

Grammar (tokens are separated by whitespace, the verb is case-insensitive)::

    add <title> <author> <identifier>
    remove <identifier>

Fields cannot contain spaces; callers encode them beforehand, e.g.
``add Oamenii_din_Dublin James_Joyce 0987654321``. Tokens after the
last expected one are ignored.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from .commands import AddRecordCommand, Command, RemoveRecordCommand
from .errors import CatalogError, ParseError, UnknownCommandError
from .models import RecordBuilder
from .storage import CatalogStore


logger = logging.getLogger(__name__)


class TextCommandInterpreter:
    def __init__(self, store: CatalogStore):
        self.store = store
        self._handlers: Dict[str, Callable[[List[str]], Command]] = {
            "add": self._parse_add,
            "remove": self._parse_remove,
        }

    def interpret(self, line: str) -> Command:
        """Parse ``line``, execute the resulting command and return it.

        Raises ``ParseError``, ``ValidationError`` or
        ``UnknownCommandError``; in every error case the store is left
        untouched.
        """
        tokens = (line or "").split()
        try:
            if not tokens:
                raise ParseError("Empty command")
            verb = tokens[0].lower()
            handler = self._handlers.get(verb)
            if handler is None:
                raise UnknownCommandError(tokens[0])
            command = handler(tokens)
        except CatalogError as exc:
            logger.warning("Rejected command %r: %s", line, exc)
            raise
        command.execute()
        return command

    def _parse_add(self, tokens: List[str]) -> Command:
        if len(tokens) < 4:
            raise ParseError("Usage: add <title> <author> <identifier>")
        record = (
            RecordBuilder()
            .title(tokens[1])
            .author(tokens[2])
            .identifier(tokens[3])
            .build()
        )
        return AddRecordCommand(self.store, record)

    def _parse_remove(self, tokens: List[str]) -> Command:
        if len(tokens) < 2:
            raise ParseError("Usage: remove <identifier>")
        return RemoveRecordCommand(self.store, tokens[1])
