"""Shared fixtures.

Records are built from a list of first-mother positions; entries are
appended in list order so each test controls exactly which appends take the
cheap path and which force a compaction.
"""

from __future__ import annotations

import pytest

from heprecord import EventRecord, Particle, Status


def _build(mothers, statuses=None, pdg_code=211):
    record = EventRecord()
    for i, mom in enumerate(mothers):
        status = statuses[i] if statuses is not None else Status.STABLE_FINAL_STATE
        # px doubles as a unique tag so tests can follow entries around
        record.add(Particle(pdg_code, status, mother1=mom, px=float(i), energy=10.0))
    return record


def _check(record):
    """Every non-empty range holds exactly the entries pointing at its owner."""
    for i, p in enumerate(record):
        daughters = [k for k, d in enumerate(record) if d.mother1 == i]
        if not daughters:
            assert (p.daughter1, p.daughter2) == (-1, -1), f"entry {i}"
            continue
        assert daughters == list(range(daughters[0], daughters[-1] + 1)), f"entry {i}"
        assert (p.daughter1, p.daughter2) == (daughters[0], daughters[-1]), f"entry {i}"


@pytest.fixture
def build_record():
    return _build


@pytest.fixture
def check_genealogy():
    return _check
