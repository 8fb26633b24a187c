"""
Consistency checks for a generated event record.

Provides checks for:
- Daughter-list genealogy (contiguous and complete ranges)
- Valid PDG particle IDs
- Energy positivity
- Mass-shell consistency of final-state entries
- Four-momentum balance between final and initial state
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from . import pdg as pdg_module
from .printing import p4_balance
from .record import EventRecord
from .status import Status


@dataclass
class ValidationIssue:
    """One problem found in a record; ``slot`` is None for the whole record."""

    level: str  # "error" or "warning"
    slot: Optional[int]
    message: str

    def __str__(self) -> str:
        where = "record" if self.slot is None else f"slot {self.slot}"
        return f"{self.level.upper():7} {where}: {self.message}"

    def to_dict(self) -> dict:
        return {"level": self.level, "slot": self.slot, "message": self.message}


@dataclass
class ValidationReport:
    issues: list[ValidationIssue] = field(default_factory=list)

    def _count(self, level: str) -> int:
        return sum(1 for i in self.issues if i.level == level)

    @property
    def n_errors(self) -> int:
        return self._count("error")

    @property
    def n_warnings(self) -> int:
        return self._count("warning")

    @property
    def is_valid(self) -> bool:
        """A record with warnings only is still valid."""
        return self.n_errors == 0

    def __str__(self) -> str:
        head = f"Validation: {self.n_errors} errors, {self.n_warnings} warnings"
        return "\n".join([head] + [f"  {issue}" for issue in self.issues])

    def to_dict(self) -> dict:
        return {
            "n_errors": self.n_errors,
            "n_warnings": self.n_warnings,
            "is_valid": self.is_valid,
            "issues": [i.to_dict() for i in self.issues],
        }


def validate_record(
    record: EventRecord,
    *,
    check_genealogy: bool = True,
    check_pdg: bool = True,
    check_energy: bool = True,
    check_mass: bool = True,
    check_momentum: bool = True,
    momentum_tolerance: float = 1e-4,
    mass_tolerance: float = 1e-3,
) -> list[ValidationIssue]:
    """Validate a single record.

    Args:
        record: The record to validate.
        check_genealogy: Check that daughter ranges are contiguous and match
            the mother fields of the entries they cover.
        check_pdg: Check PDG ID validity.
        check_energy: Check energy positivity.
        check_mass: Check that stable final-state entries are on mass shell.
        check_momentum: Check final minus initial four-momentum balance.
        momentum_tolerance: Relative tolerance for the momentum balance.
        mass_tolerance: Absolute tolerance (GeV) for the mass-shell check.

    Returns:
        List of validation issues found.
    """
    issues: list[ValidationIssue] = []

    if len(record) == 0:
        issues.append(ValidationIssue("warning", None, "Record has no particles"))
        return issues

    if record.is_unphysical():
        issues.append(ValidationIssue(
            "warning", None,
            f"Record flagged unphysical (pauli_blocked={record.pauli_blocked}, "
            f"below_threshold_nrf={record.below_threshold_nrf}, "
            f"generic_error={record.generic_error})"
        ))

    # --- Genealogy ---
    if check_genealogy:
        for i in record.compactor.inconsistent_daughter_lists():
            p = record[i]
            issues.append(ValidationIssue(
                "error", i,
                f"Daughter list [{p.daughter1}, {p.daughter2}] does not match daughters "
                f"{record.compactor.daughters_of(i)}"
            ))

    # --- PDG ID check ---
    if check_pdg:
        for i, p in enumerate(record):
            if not pdg_module.is_valid_pdg_id(p.pdg_code):
                issues.append(ValidationIssue(
                    "warning", i, f"Unknown/invalid PDG ID: {p.pdg_code}"
                ))

    # --- Energy positivity ---
    if check_energy:
        for i, p in enumerate(record):
            if p.energy < 0:
                issues.append(ValidationIssue(
                    "error", i, f"Negative energy: {p.energy:.6e} GeV"
                ))

    # --- Mass shell ---
    if check_mass:
        for i, p in enumerate(record):
            if p.status != Status.STABLE_FINAL_STATE:
                continue
            if not p.is_on_mass_shell(mass_tolerance):
                issues.append(ValidationIssue(
                    "warning", i,
                    f"Off mass shell: pdg mass={p.mass:.6e}, "
                    f"computed={p.computed_mass:.6e}"
                ))

    # --- Momentum balance ---
    if check_momentum:
        counted = [p for p in record if p.is_particle or p.is_fake]
        initial = [p for p in counted if p.status in (Status.INITIAL_STATE, Status.NUCLEON_TARGET)]
        final = [p for p in counted if p.status == Status.STABLE_FINAL_STATE]
        if initial and final:
            bal = p4_balance(record)
            total_energy = max(sum(abs(p.energy) for p in initial), 1e-10)
            for label, diff in zip(("px", "py", "pz", "E"), bal):
                if abs(diff) / total_energy > momentum_tolerance:
                    issues.append(ValidationIssue(
                        "warning", None,
                        f"Final-initial imbalance in {label}: {diff:.6e} "
                        f"({abs(diff) / total_energy:.4e} relative)"
                    ))

    return issues


def validate(record: EventRecord, **kwargs) -> ValidationReport:
    """Validate a record and collect the issues into a report.

    Keyword arguments are passed to :func:`validate_record`.
    """
    return ValidationReport(issues=validate_record(record, **kwargs))
