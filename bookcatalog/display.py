"""
Display strategies for records.

A strategy is a plain ``format(record) -> str`` function. The active
one is picked by name from configuration (``CATALOG_DISPLAY_STYLE``).
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from typing_extensions import Literal, get_args

from .models import Record


logger = logging.getLogger(__name__)

DisplayStyle = Literal["standard", "special"]
Formatter = Callable[[Record], str]

DEFAULT_STYLE: DisplayStyle = "standard"


def format_standard(record: Record) -> str:
    return f"{record.title} by {record.author} (ISBN: {record.identifier})"


def format_special(record: Record) -> str:
    return f"Special: {format_standard(record)}"


FORMATTERS: Dict[DisplayStyle, Formatter] = {
    "standard": format_standard,
    "special": format_special,
}


def parse_display_style(value: Optional[str]) -> DisplayStyle:
    """Normalize a configured style name.

    Unknown or empty names fall back to ``DEFAULT_STYLE``.
    """
    style = (value or "").strip().lower()
    if style in get_args(DisplayStyle):
        return style
    logger.warning("Unknown display style %r, using %r", value, DEFAULT_STYLE)
    return DEFAULT_STYLE


def get_formatter(style: DisplayStyle) -> Formatter:
    return FORMATTERS[style]


def render_listing(
    records: Iterable[Record], formatter: Formatter = format_standard
) -> List[Tuple[str, str]]:
    """Pair each record's display line with the identifier used to remove it."""
    return [(formatter(r), r.identifier) for r in records]
