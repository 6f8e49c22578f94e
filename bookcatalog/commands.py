"""
Command objects for catalogue mutations.

Every write to the store goes through a command so callers can queue
and log mutations uniformly. Executing a command twice has the same
effect as executing it once.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque

from .models import Record
from .storage import CatalogStore


logger = logging.getLogger(__name__)


class Command(ABC):
    """A single mutation against a :class:`CatalogStore`."""

    @abstractmethod
    def execute(self) -> None:
        """Apply the mutation."""


class AddRecordCommand(Command):
    def __init__(self, store: CatalogStore, record: Record):
        self.store = store
        self.record = record

    def execute(self) -> None:
        logger.debug("Executing add for %s", self.record.identifier)
        self.store.add(self.record)


class RemoveRecordCommand(Command):
    """Remove one record.

    ``removed`` holds the outcome of the latest execution: ``True`` only
    when that run actually deleted a record.
    """

    def __init__(self, store: CatalogStore, identifier: str):
        self.store = store
        self.identifier = identifier
        self.removed = False

    def execute(self) -> None:
        logger.debug("Executing remove for %s", self.identifier)
        self.removed = self.store.remove(self.identifier)


class ClearCatalogCommand(Command):
    def __init__(self, store: CatalogStore):
        self.store = store

    def execute(self) -> None:
        logger.debug("Executing clear-all")
        self.store.clear_all()


class CommandQueue:
    """FIFO buffer of commands that are executed together by :meth:`run`."""

    def __init__(self) -> None:
        self._pending: Deque[Command] = deque()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def submit(self, command: Command) -> None:
        self._pending.append(command)

    def run(self) -> int:
        """Execute pending commands in submission order.

        If a command raises, it and everything after it stay queued.

        Returns
        -------
        int
            The number of commands executed.
        """
        executed = 0
        while self._pending:
            self._pending[0].execute()
            self._pending.popleft()
            executed += 1
        if executed:
            logger.debug("Ran %d queued command(s)", executed)
        return executed
