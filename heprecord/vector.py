"""Four-component value type used for momenta and spacetime positions."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class LorentzVector:
    """A four-vector (x, y, z, t).

    Used both as a 4-momentum (px, py, pz, E) in GeV and as a 4-position
    (x, y, z, t). Components follow the ROOT ``TLorentzVector`` ordering.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    t: float = 0.0

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.t))

    def __add__(self, other: LorentzVector) -> LorentzVector:
        return LorentzVector(
            self.x + other.x, self.y + other.y, self.z + other.z, self.t + other.t
        )

    def __sub__(self, other: LorentzVector) -> LorentzVector:
        return LorentzVector(
            self.x - other.x, self.y - other.y, self.z - other.z, self.t - other.t
        )

    @property
    def m2(self) -> float:
        """Minkowski norm squared, t^2 - |r|^2."""
        return self.t**2 - self.x**2 - self.y**2 - self.z**2

    @property
    def m(self) -> float:
        """Invariant mass, negative for space-like vectors (ROOT convention)."""
        m2 = self.m2
        return math.sqrt(m2) if m2 >= 0 else -math.sqrt(-m2)

    def as_string(self, precision: int = 3) -> str:
        return "(" + ", ".join(f"{c:.{precision}f}" for c in self) + ")"
