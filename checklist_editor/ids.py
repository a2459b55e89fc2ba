"""Identifier generators for checklist items.

Identifiers only need to be unique within a process; they are not a
security property.
"""

from __future__ import annotations

import itertools
import random
import time
from abc import ABC, abstractmethod

from checklist_editor.models import IdStyle

UUID_FORMAT = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"


class IdGenerator(ABC):
    """Produces identifiers unique within a session."""

    @abstractmethod
    def next(self) -> str:
        """Return an identifier never returned before by this generator."""


class UuidGenerator(IdGenerator):
    """Version-4 style UUIDs mixing a millisecond timestamp with randomness.

    Every hex digit is uniformly random, so ids are distinct with
    overwhelming probability and no history is kept. The item store
    still rejects an id that is already live.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def next(self) -> str:
        d = time.time_ns() // 1_000_000
        chars = []
        for c in UUID_FORMAT:
            if c not in "xy":
                chars.append(c)
                continue
            r = int(d + self._rng.random() * 16) % 16
            d //= 16
            chars.append(format(r if c == "x" else (r & 0x3) | 0x8, "x"))
        return "".join(chars)


class SequentialIdGenerator(IdGenerator):
    """Monotonic counter ids: ``item-1``, ``item-2``, ..."""

    def __init__(self, prefix: str = "item", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)

    def next(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


def create_id_generator(style: IdStyle) -> IdGenerator:
    """Build the generator matching a configured id style."""
    if style == IdStyle.SEQUENTIAL:
        return SequentialIdGenerator()
    return UuidGenerator()
