"""
Daughter-list bookkeeping for the event record.

Every entry's daughters must occupy a contiguous block of the record,
described by the inclusive range (daughter1, daughter2). Entries are
appended in arbitrary genealogical order, so the range is maintained in two
ways:

- an incremental update after each append, which extends the mother's
  range when the new daughter lands next to it;
- a full compaction when it does not, which reorders record slots so that
  each mother's daughters sit next to each other and then derives every
  range again from the ``mother1`` fields.

Compaction moves entries, so any position held by a caller is stale after
it runs.
"""

from __future__ import annotations

import logging
from typing import Optional

from .logger import get_logger
from .sequence import ParticleSequence
from .status import Status

_INITIAL_STATES = (Status.INITIAL_STATE, Status.NUCLEON_TARGET)


def _is_contiguous(positions: list[int]) -> bool:
    """True if the sorted positions have no gaps."""
    return all(b - a <= 1 for a, b in zip(positions, positions[1:]))


class DaughterListCompactor:
    """Keeps the daughter ranges of a :class:`ParticleSequence` contiguous."""

    def __init__(
        self, particles: ParticleSequence, logger: Optional[logging.Logger] = None
    ) -> None:
        self._particles = particles
        self._log = logger or get_logger()
        self.n_compactions = 0
        # leading initial-state and target entries, as appended; never moved
        self.n_frozen = 0

    def update(self, pos: int) -> None:
        """Update the mother of the entry at ``pos`` after it was appended."""
        p = self._particles.at(pos)
        if p is None:
            raise IndexError(f"No entry at slot {pos} to update daughter lists for")

        if pos == self.n_frozen and p.status in _INITIAL_STATES:
            self.n_frozen += 1

        self._log.info("Updating the daughter-list for the mother of particle at: %d", pos)

        mom_pos = p.mother1
        if mom_pos == -1:
            return
        mom = self._particles.at(mom_pos) if mom_pos != pos else None
        if mom is None:
            self._log.warning("Mother of particle at %d does not resolve (mother = %d)", pos, mom_pos)
            return
        self._log.info("Mother particle is at slot: %d", mom_pos)

        dau1, dau2 = mom.daughter1, mom.daughter2

        if dau1 == -1:
            mom.daughter1 = mom.daughter2 = pos
            self._log.info("Done! Daughter-list is compact: [%d, %d]", pos, pos)
            return
        if pos == dau1 - 1:
            mom.daughter1 = pos
            self._log.info("Done! Daughter-list is compact: [%d, %d]", pos, dau2)
            return
        if pos == dau2 + 1:
            mom.daughter2 = pos
            self._log.info("Done! Daughter-list is compact: [%d, %d]", dau1, pos)
            return

        self._log.info("Daughter-list is not compact - Running compactifier")
        self.compactify()

    def daughters_of(self, pos: int) -> list[int]:
        """Positions of all entries whose first mother is ``pos``, ascending."""
        return [i for i, p in enumerate(self._particles) if p.mother1 == pos]

    def has_compact_daughter_list(self, pos: int) -> bool:
        compact = _is_contiguous(self.daughters_of(pos))
        self._log.debug(
            "Daughter-list of particle at: %d is %scompact", pos, "" if compact else "not "
        )
        return compact

    def first_non_init_state_entry(self) -> int:
        """First slot that may receive a packed daughter.

        The block ends at the first entry that was appended with a status
        other than initial-state or nucleon-target. Initial-state entries
        that compaction later packs next to the block do not extend it.
        """
        return min(self.n_frozen, len(self._particles))

    def reset(self) -> None:
        self.n_frozen = 0

    def swap_and_repoint(self, a: int, b: int) -> None:
        """Exchange the contents of slots ``a`` and ``b``.

        Mother references follow the moved entries: whatever pointed at
        ``a`` now points at ``b`` and the other way round, so each mother
        index still resolves to the slot holding that mother.
        """
        n = len(self._particles)
        if not (0 <= a < n and 0 <= b < n):
            raise IndexError(f"Cannot swap slots {a} and {b} in a record of size {n}")
        if a == b:
            return

        self._log.debug("Swapping particles: %d <--> %d", a, b)

        tmp = self._particles.at(a).clone()
        self._particles.replace_content(a, self._particles.at(b))
        self._particles.replace_content(b, tmp)

        for p in self._particles:
            if p.mother1 == a:
                p.mother1 = b
            elif p.mother1 == b:
                p.mother1 = a
            if p.mother2 == a:
                p.mother2 = b
            elif p.mother2 == b:
                p.mother2 = a

    def _next_root(self, cursor: int) -> int:
        """Lowest unsettled slot whose mother is not itself unsettled."""
        n = len(self._particles)
        for k in range(cursor, n):
            mom = self._particles.at(k).mother1
            if mom < cursor or mom >= n or mom == k:
                return k
        # only mother cycles are left
        return cursor

    def _pack_prefix_tail(self, cursor: int) -> int:
        """Pack the siblings of daughters that end the initial-state block.

        A struck nucleon is a target entry with a mother, so it sits in the
        block that never moves. Its siblings have to follow that block
        directly for the mother to keep a contiguous range.
        """
        n = len(self._particles)
        if cursor == 0 or cursor >= n:
            return cursor
        mom = self._particles.at(cursor - 1).mother1
        if not 0 <= mom < cursor - 1:
            return cursor
        settled = [k for k in self.daughters_of(mom) if k < cursor]
        if not _is_contiguous(settled):
            return cursor
        for k in range(cursor, n):
            if self._particles.at(k).mother1 == mom:
                self.swap_and_repoint(cursor, k)
                cursor += 1
        return cursor

    def compactify(self) -> None:
        """Reorder the record so that every daughter list is contiguous.

        Slots below ``cursor`` are settled. Positions are visited in order;
        each visited entry is settled before its daughters are packed right
        after the settled block, so the final layout is breadth-first.
        """
        self.n_compactions += 1
        n = len(self._particles)
        cursor = self.first_non_init_state_entry()
        cursor = self._pack_prefix_tail(cursor)

        for i in range(n):
            if i >= cursor:
                self.swap_and_repoint(cursor, self._next_root(cursor))
                cursor += 1

            daughters = self.daughters_of(i)
            if daughters and daughters[0] == cursor and self.has_compact_daughter_list(i):
                ndau = len(daughters)
                cursor += ndau
            else:
                ndau = 0
                for k in range(cursor, n):
                    if self._particles.at(k).mother1 == i:
                        self.swap_and_repoint(cursor, k)
                        cursor += 1
                        ndau += 1

            p = self._particles.at(i)
            if ndau > 0:
                p.daughter1, p.daughter2 = cursor - ndau, cursor - 1
            else:
                p.daughter1 = p.daughter2 = -1
            self._log.debug("Compactifying daughter-list for particle at slot: %d - Done!", i)

        self.finalize_daughter_lists()

    def finalize_daughter_lists(self) -> None:
        """Derive every daughter range from the ``mother1`` fields.

        Only meaningful once the daughter lists have been compactified.
        """
        ranges: dict[int, tuple[int, int]] = {}
        for k, p in enumerate(self._particles):
            if p.mother1 < 0:
                continue
            first, _ = ranges.get(p.mother1, (k, k))
            ranges[p.mother1] = (first, k)

        for i, p in enumerate(self._particles):
            p.daughter1, p.daughter2 = ranges.get(i, (-1, -1))

    def inconsistent_daughter_lists(self) -> list[int]:
        """Positions whose stored range is not exactly their contiguous daughters."""
        bad = []
        for i, p in enumerate(self._particles):
            daughters = self.daughters_of(i)
            if not daughters:
                ok = not p.has_daughters
            else:
                ok = (
                    _is_contiguous(daughters)
                    and (p.daughter1, p.daughter2) == (daughters[0], daughters[-1])
                )
            if not ok:
                bad.append(i)
        return bad
