"""Interaction summary attached to an event record.

The record never looks inside the summary; it only stores it and clones it
when the record itself is copied.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Summary(Protocol):
    def clone(self) -> "Summary": ...


@dataclass
class InteractionSummary:
    """Initial state and process information of a generated interaction.

    Attributes:
        probe_pdg: PDG ID of the probe (e.g. the neutrino).
        probe_energy: Probe energy in GeV.
        target_pdg: PDG ID of the target (nucleus or free nucleon).
        hit_nucleon_pdg: PDG ID of the struck nucleon (0 if none).
        process: Interaction type, e.g. "CC" or "NC".
        scattering: Scattering type, e.g. "QES", "RES", "DIS".
        kinematics: Free-form kinematic variables (x, y, Q2, W, ...).
        extra: Dictionary of additional metadata.
    """

    probe_pdg: int = 0
    probe_energy: float = 0.0
    target_pdg: int = 0
    hit_nucleon_pdg: int = 0
    process: str = ""
    scattering: str = ""
    kinematics: dict = field(default_factory=dict)
    extra: dict = field(default_factory=dict)

    def clone(self) -> InteractionSummary:
        return copy.deepcopy(self)

    def reset(self) -> None:
        self.copy_from(InteractionSummary())

    def copy_from(self, other: InteractionSummary) -> None:
        other = other.clone()
        self.__dict__.update(other.__dict__)

    def as_string(self) -> str:
        s = f"{self.probe_pdg} (E = {self.probe_energy:.3f} GeV) + {self.target_pdg}"
        if self.hit_nucleon_pdg:
            s += f" [hit nucleon: {self.hit_nucleon_pdg}]"
        if self.process or self.scattering:
            s += f" {self.process} {self.scattering}".rstrip()
        return s
