"""Text rendering of an event record."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .status import Status
from .vector import LorentzVector

if TYPE_CHECKING:
    from .record import EventRecord

_WIDTH = 109


def p4_balance(record: EventRecord) -> LorentzVector:
    """Final-state minus initial-state four-momentum.

    Real particles and generator pseudo-particles (rootino, bindino, ...)
    are counted; initial and final state ions are ignored. This is a
    diagnostic, the record never enforces it.
    """
    total = LorentzVector()
    for p in record:
        if not (p.is_particle or p.is_fake):
            continue
        if p.status == Status.STABLE_FINAL_STATE:
            total = total + p.p4
        elif p.status in (Status.INITIAL_STATE, Status.NUCLEON_TARGET):
            total = total - p.p4
    return total


def _rule() -> str:
    return " |" + "-" * (_WIDTH - 1) + "|"


def format_record(record: EventRecord) -> str:
    lines = ["", _rule()]
    lines.append(
        " | Idx |     Name | Ist |        PDG |   Mother  | Daughter  |"
        "      Px |      Py |      Pz |       E |       m |"
    )
    lines.append(_rule())

    for idx, p in enumerate(record):
        mass = f"{p.mass:7.3f}"
        if not p.is_on_mass_shell():
            # off-shell entries show the four-momentum mass next to the PDG one
            mass = f"{p.mass:*>7.3f} | {p.computed_mass:.3f}"
        lines.append(
            f" | {idx:3d} | {p.name[:8]:>8} | {int(p.status):3d} | {p.pdg_code:10d} "
            f"| {p.mother1:3d} | {p.mother2:3d} | {p.daughter1:3d} | {p.daughter2:3d} "
            f"| {p.px:7.3f} | {p.py:7.3f} | {p.pz:7.3f} | {p.energy:7.3f} | {mass} |"
        )

    lines.append(_rule())
    bal = p4_balance(record)
    lines.append(
        f" | {'Fin-Init:':<46}| {bal.x:7.3f} | {bal.y:7.3f} | {bal.z:7.3f} | {bal.t:7.3f} |"
    )
    lines.append(_rule())

    def flag(on: bool) -> str:
        return "ON " if on else "OFF"

    lines.append(
        f" | FLAGS:   | PauliBlock......{flag(record.pauli_blocked)} |"
        f" BelowThrNRF....{flag(record.below_threshold_nrf)} |"
        f" GenericErr.....{flag(record.generic_error)} |"
        f" UnPhysical.....{flag(record.is_unphysical())} |"
    )
    lines.append(_rule())
    return "\n".join(lines) + "\n"
