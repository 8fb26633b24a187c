"""
Particle entry of the generated event record.

A record is a flat sequence of these entries. Genealogy is stored as
positions into the owning sequence rather than as references, so an entry
has no identity of its own beyond the slot that currently holds it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields

from . import pdg as pdg_module
from .status import Status, as_status
from .vector import LorentzVector


@dataclass
class Particle:
    """A single entry of the event record.

    Attributes:
        pdg_code: PDG Monte Carlo particle ID.
        status: Role of the entry, see :class:`heprecord.status.Status`.
        mother1, mother2: First/last mother positions (-1 = none). Only
            ``mother1`` takes part in genealogy bookkeeping.
        daughter1, daughter2: Inclusive, contiguous daughter range
            (-1, -1 when the entry has no daughters).
        px, py, pz, energy: Four-momentum components in GeV.
        x, y, z, t: Production vertex (fm, fm/c for nuclear-scale events).
    """

    pdg_code: int
    status: int = Status.UNDEFINED
    mother1: int = -1
    mother2: int = -1
    daughter1: int = -1
    daughter2: int = -1
    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    energy: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    t: float = 0.0

    def __post_init__(self) -> None:
        self.status = as_status(self.status)

    @classmethod
    def from_vectors(
        cls,
        pdg_code: int,
        status: int,
        mother1: int,
        mother2: int,
        daughter1: int,
        daughter2: int,
        p4: LorentzVector,
        x4: LorentzVector,
    ) -> Particle:
        return cls(
            pdg_code, status, mother1, mother2, daughter1, daughter2,
            p4.x, p4.y, p4.z, p4.t,
            x4.x, x4.y, x4.z, x4.t,
        )

    @property
    def p4(self) -> LorentzVector:
        return LorentzVector(self.px, self.py, self.pz, self.energy)

    @property
    def x4(self) -> LorentzVector:
        return LorentzVector(self.x, self.y, self.z, self.t)

    @property
    def computed_mass(self) -> float:
        """Mass computed from the four-momentum.

        m^2 can drift slightly negative for massless particles; small
        negative values are clamped to zero.
        """
        m2 = self.p4.m2
        if m2 < 0 and abs(m2) < 1e-8:
            m2 = 0.0
        return math.sqrt(m2) if m2 >= 0 else -math.sqrt(-m2)

    @property
    def mass(self) -> float:
        """PDG mass in GeV, falling back to the four-momentum mass."""
        m = pdg_module.mass_gev(self.pdg_code)
        return self.computed_mass if m is None else m

    def is_on_mass_shell(self, tolerance: float = 1e-3) -> bool:
        m = pdg_module.mass_gev(self.pdg_code)
        if m is None:
            return True
        return abs(self.computed_mass - m) < tolerance

    @property
    def name(self) -> str:
        return pdg_module.name(self.pdg_code)

    @property
    def is_fake(self) -> bool:
        return pdg_module.is_fake(self.pdg_code)

    @property
    def is_nucleus(self) -> bool:
        return pdg_module.is_nucleus(self.pdg_code)

    @property
    def is_particle(self) -> bool:
        return pdg_module.is_particle(self.pdg_code)

    @property
    def has_daughters(self) -> bool:
        return self.daughter1 != -1 and self.daughter2 != -1

    @property
    def n_daughters(self) -> int:
        if not self.has_daughters:
            return 0
        return self.daughter2 - self.daughter1 + 1

    def set_momentum(self, px: float, py: float, pz: float, energy: float) -> None:
        self.px, self.py, self.pz, self.energy = px, py, pz, energy

    def set_vertex(self, x: float, y: float, z: float, t: float) -> None:
        self.x, self.y, self.z, self.t = x, y, z, t

    def copy_from(self, other: Particle) -> None:
        """Overwrite every field with the content of ``other``."""
        for f in fields(self):
            setattr(self, f.name, getattr(other, f.name))

    def clone(self) -> Particle:
        p = Particle(self.pdg_code)
        p.copy_from(self)
        return p

    def compare(self, other: Particle) -> bool:
        """Content equality, used to locate an entry inside a record."""
        return self == other

    def to_dict(self) -> dict:
        """Convert to a flat dictionary for tabular output."""
        return {
            "pdg_code": self.pdg_code,
            "name": self.name,
            "status": int(self.status),
            "mother1": self.mother1,
            "mother2": self.mother2,
            "daughter1": self.daughter1,
            "daughter2": self.daughter2,
            "px": self.px,
            "py": self.py,
            "pz": self.pz,
            "energy": self.energy,
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "t": self.t,
        }
