"""
Exceptions raised by the catalog core.

Every error here is local and recoverable: it is reported to the caller
and never leaves the store partially mutated. Lookups (``get`` and
``search``) do not raise; absence is an empty or ``None`` result.
"""

from typing import Iterable


class CatalogError(Exception):
    """Base class for catalog errors."""


class ValidationError(CatalogError):
    """A required record field is missing or empty."""

    def __init__(self, fields: Iterable[str]):
        self.fields = list(fields)
        super().__init__("Missing required field(s): " + ", ".join(self.fields))


class ParseError(CatalogError):
    """A text command is malformed (for example, too few tokens)."""


class UnknownCommandError(CatalogError):
    """A text command starts with a verb the interpreter does not know."""

    def __init__(self, verb: str):
        self.verb = verb
        super().__init__(f"Unknown command: {verb!r}")
