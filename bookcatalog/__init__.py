"""
In-memory book catalogue.

Records are built with :class:`RecordBuilder`, written to a
:class:`CatalogStore` through command objects, and queried directly
from the store. :class:`TextCommandInterpreter` turns lines such as
``add Dubliners James_Joyce 0987654321`` into the same commands.
"""

from .commands import (  # noqa: F401
    AddRecordCommand,
    ClearCatalogCommand,
    Command,
    CommandQueue,
    RemoveRecordCommand,
)
from .errors import CatalogError, ParseError, UnknownCommandError, ValidationError  # noqa: F401
from .interpreter import TextCommandInterpreter  # noqa: F401
from .models import Record, RecordBuilder  # noqa: F401
from .storage import CatalogStore  # noqa: F401
