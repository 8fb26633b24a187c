"""
Generated event record.

An :class:`EventRecord` is the flat, STDHEP-like list of entries of one
generated event together with an attached interaction summary and a few
flags describing why an event may be unphysical.

Positions returned by the lookup methods are invalidated whenever an
append triggers a compaction of the daughter lists; callers must not keep
them across ``add*`` calls.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

from .genealogy import DaughterListCompactor
from .logger import get_logger
from .models import Particle
from .printing import format_record
from .sequence import ParticleSequence
from .summary import Summary
from .vector import LorentzVector


def _on_off(flag: bool) -> str:
    return "ON" if flag else "OFF"


class EventRecord:
    """Particle list, interaction summary and outcome flags of one event."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger()
        self._particles = ParticleSequence(self._log)
        self._compactor = DaughterListCompactor(self._particles, self._log)
        self._summary: Optional[Summary] = None
        self._init_flags()

    @classmethod
    def from_record(cls, other: EventRecord, logger: Optional[logging.Logger] = None) -> EventRecord:
        record = cls(logger=logger)
        record.copy_from(other)
        return record

    def _init_flags(self) -> None:
        self._log.debug("Initializing event record")
        self.set_pauli_blocked(False)
        self.set_below_threshold_nrf(False)
        self.set_generic_error(False)

    # --- container protocol ------------------------------------------------

    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)

    def __getitem__(self, position: int) -> Particle:
        p = self._particles.at(position)
        if p is None:
            raise IndexError(f"No particle at slot {position}")
        return p

    def __str__(self) -> str:
        return format_record(self)

    def entries(self) -> Iterator[Particle]:
        """Iterate over all entries in record order."""
        return iter(self._particles)

    @property
    def n_compactions(self) -> int:
        """Number of full daughter-list compactions run so far."""
        return self._compactor.n_compactions

    @property
    def compactor(self) -> DaughterListCompactor:
        return self._compactor

    # --- interaction summary -----------------------------------------------

    def attach_summary(self, summary: Optional[Summary]) -> None:
        self._summary = summary

    def get_summary(self) -> Optional[Summary]:
        if self._summary is None:
            self._log.warning("Returning None interaction summary")
        return self._summary

    # --- lookups -----------------------------------------------------------

    def get_particle(self, position: int) -> Optional[Particle]:
        """Entry at ``position``, or None (with a warning) if out of range."""
        return self._particles.at(position)

    def _match(self, pdg_code: int, status: int) -> Callable[[Particle], bool]:
        return lambda p: p.status == status and p.pdg_code == pdg_code

    def find_particle(self, pdg_code: int, status: int, start: int = 0) -> Optional[Particle]:
        """First entry at or after ``start`` with the given PDG code and status."""
        pos = self._particles.find_first(self._match(pdg_code, status), start)
        if pos is None:
            self._log.warning(
                "No particle found with: (pos >= %d, pdg = %d, ist = %d) - Returning None",
                start, pdg_code, status,
            )
            return None
        return self._particles.at(pos)

    def particle_position(self, pdg_code: int, status: int, start: int = 0) -> int:
        pos = self._particles.find_first(self._match(pdg_code, status), start)
        if pos is None:
            self._log.warning("Returning invalid record position")
            return -1
        return pos

    def particle_position_of(self, particle: Particle, start: int = 0) -> int:
        """Position of the first entry with the same content as ``particle``."""
        pos = self._particles.find_first(particle.compare, start)
        if pos is None:
            self._log.warning("Returning invalid record position")
            return -1
        return pos

    # --- appending ---------------------------------------------------------

    def add(self, particle: Particle) -> int:
        """Append a copy of ``particle`` and update the daughter lists.

        Returns the slot the entry was stored at. A compaction triggered by
        this append may move it (and any other entry) elsewhere.
        """
        pos = len(self._particles)
        self._log.info("Adding particle with pdgc = %d at slot = %d", particle.pdg_code, pos)
        self._particles.append(particle)

        # update the mother's daughter list, compactifying if the new entry
        # broke it
        self._compactor.update(pos)
        return pos

    def add_particle(
        self,
        pdg_code: int,
        status: int,
        mother1: int,
        mother2: int,
        daughter1: int,
        daughter2: int,
        p4: LorentzVector,
        x4: LorentzVector,
    ) -> int:
        return self.add(Particle.from_vectors(
            pdg_code, status, mother1, mother2, daughter1, daughter2, p4, x4
        ))

    def add_particle_components(
        self,
        pdg_code: int,
        status: int,
        mother1: int,
        mother2: int,
        daughter1: int,
        daughter2: int,
        px: float,
        py: float,
        pz: float,
        energy: float,
        x: float,
        y: float,
        z: float,
        t: float,
    ) -> int:
        return self.add(Particle(
            pdg_code, status, mother1, mother2, daughter1, daughter2,
            px, py, pz, energy, x, y, z, t,
        ))

    # --- vertex ------------------------------------------------------------

    def shift_vertex(self, dx, dy: float = 0.0, dz: float = 0.0, dt: float = 0.0) -> None:
        """Translate every entry in space-time.

        Events generated at the origin are moved to an interaction point by
        this offset. Accepts a :class:`LorentzVector` or four components.
        """
        if isinstance(dx, LorentzVector):
            dx, dy, dz, dt = dx
        self._log.info(
            "Shifting vertex to: %s", LorentzVector(dx, dy, dz, dt).as_string()
        )
        for p in self._particles:
            p.set_vertex(p.x + dx, p.y + dy, p.z + dz, p.t + dt)

    # --- flags -------------------------------------------------------------

    def set_pauli_blocked(self, on_off: bool) -> None:
        self._log.info("Switching Pauli Block flag: %s", _on_off(on_off))
        self._pauli_blocked = bool(on_off)

    def set_below_threshold_nrf(self, on_off: bool) -> None:
        self._log.info(
            "Switching Below Threshold in nucleon rest frame flag: %s", _on_off(on_off)
        )
        self._below_threshold_nrf = bool(on_off)

    def set_generic_error(self, on_off: bool) -> None:
        self._log.info("Switching Generic Error Flag: %s", _on_off(on_off))
        self._generic_error = bool(on_off)

    @property
    def pauli_blocked(self) -> bool:
        return self._pauli_blocked

    @property
    def below_threshold_nrf(self) -> bool:
        return self._below_threshold_nrf

    @property
    def generic_error(self) -> bool:
        return self._generic_error

    def is_unphysical(self) -> bool:
        return self._pauli_blocked or self._below_threshold_nrf or self._generic_error

    # --- lifecycle ---------------------------------------------------------

    def reset(self) -> None:
        """Drop all entries and the summary and lower every flag."""
        self._log.debug("Resetting event record")
        self._particles.clear()
        self._compactor.reset()
        self._summary = None
        self._init_flags()

    def copy_from(self, other: EventRecord) -> None:
        """Make this record a deep copy of ``other``, cloning its summary."""
        if other is self:
            return
        self.reset()

        for p in other:
            self._particles.append(p)
        self._compactor.n_frozen = other._compactor.n_frozen

        self._summary = other._summary.clone() if other._summary is not None else None

        self._pauli_blocked = other._pauli_blocked
        self._below_threshold_nrf = other._below_threshold_nrf
        self._generic_error = other._generic_error

    def to_dict(self) -> dict:
        return {
            "particles": [p.to_dict() for p in self._particles],
            "flags": {
                "pauli_blocked": self._pauli_blocked,
                "below_threshold_nrf": self._below_threshold_nrf,
                "generic_error": self._generic_error,
                "unphysical": self.is_unphysical(),
            },
            "n_compactions": self.n_compactions,
        }
