"""Ordered, append-only storage of event record entries."""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

from .logger import get_logger
from .models import Particle


class ParticleSequence:
    """Owns the entries of one record; positions are their only identity.

    Entries are stored as owned copies. A position stays valid until the
    genealogy compactor reorders slots.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._entries: list[Particle] = []
        self._log = logger or get_logger()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._entries)

    def count(self) -> int:
        return len(self._entries)

    def append(self, particle: Particle) -> int:
        """Store a copy of ``particle`` and return its position."""
        self._entries.append(particle.clone())
        return len(self._entries) - 1

    def at(self, position: int) -> Optional[Particle]:
        if 0 <= position < len(self._entries):
            return self._entries[position]
        self._log.warning("No particle found with: (pos = %d) - Returning None", position)
        return None

    def replace_content(self, position: int, particle: Particle) -> None:
        if not 0 <= position < len(self._entries):
            raise IndexError(f"Slot {position} outside record of size {len(self._entries)}")
        self._entries[position].copy_from(particle)

    def find_first(
        self, predicate: Callable[[Particle], bool], start: int = 0
    ) -> Optional[int]:
        for i in range(max(start, 0), len(self._entries)):
            if predicate(self._entries[i]):
                return i
        return None

    def clear(self) -> None:
        self._entries.clear()
