from typing import List, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints
from typing_extensions import Annotated

from .errors import ValidationError


# At least one non-whitespace character; the value itself is kept as given
NonBlankStr = Annotated[str, StringConstraints(pattern=r"\S")]


class Record(BaseModel):
    """One catalogue entry.

    Records are frozen once constructed, so the store can hand them out
    without callers being able to change what is stored. ``identifier``
    is the primary key (an ISBN in practice).
    """

    model_config = ConfigDict(frozen=True)

    identifier: NonBlankStr
    title: NonBlankStr
    author: NonBlankStr


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class RecordBuilder:
    """Stepwise constructor for :class:`Record`.

    Setters return the builder so calls can be chained::

        RecordBuilder().title("Dubliners").author("James Joyce").identifier("0987654321").build()

    ``build()`` can be called more than once; each call returns a new
    record made from the fields currently set.
    """

    def __init__(self) -> None:
        self._title: Optional[str] = None
        self._author: Optional[str] = None
        self._identifier: Optional[str] = None

    def title(self, value: Optional[str]) -> "RecordBuilder":
        self._title = value
        return self

    def author(self, value: Optional[str]) -> "RecordBuilder":
        self._author = value
        return self

    def identifier(self, value: Optional[str]) -> "RecordBuilder":
        self._identifier = value
        return self

    def build(self) -> Record:
        missing: List[str] = [
            name
            for name, value in (
                ("title", self._title),
                ("author", self._author),
                ("identifier", self._identifier),
            )
            if _is_blank(value)
        ]
        if missing:
            raise ValidationError(missing)
        return Record(
            identifier=self._identifier,
            title=self._title,
            author=self._author,
        )
