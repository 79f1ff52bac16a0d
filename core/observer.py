"""
Event observers injected into the orchestrator.

The orchestrator never logs directly: it reports each decision point to
an observer. ``record`` is for informational events, ``advise`` for
cautions the operator must see (an IV ignored under ECB, a reused IV).
"""

import logging
import sys
from abc import ABC, abstractmethod


class CryptoObserver(ABC):

    @abstractmethod
    def record(self, event: str, message: str):
        """Informational event at a decision point."""

    @abstractmethod
    def advise(self, event: str, message: str):
        """Advisory shown to the operator; never interrupts the flow."""


class LoggingObserver(CryptoObserver):
    """Forward events to the SymCrypt logger; echo advisories to *stream*."""

    def __init__(self, logger: logging.Logger | None = None, stream=None):
        self.logger = logger or logging.getLogger("SymCrypt.Orchestrator")
        self.stream = stream if stream is not None else sys.stderr

    def record(self, event: str, message: str):
        self.logger.info("%s [%s]", message, event)

    def advise(self, event: str, message: str):
        self.logger.warning("%s [%s]", message, event)
        print(message, file=self.stream)


class RecordingObserver(CryptoObserver):
    """Keep every event in memory, in order."""

    def __init__(self):
        self.events: list[tuple[str, str, str]] = []

    def record(self, event: str, message: str):
        self.events.append(("info", event, message))

    def advise(self, event: str, message: str):
        self.events.append(("advisory", event, message))

    @property
    def names(self) -> list[str]:
        return [name for _, name, _ in self.events]

    @property
    def advisories(self) -> list[str]:
        return [name for kind, name, _ in self.events if kind == "advisory"]
