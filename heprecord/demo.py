"""A small generated event used by the command line and the tests.

The entries are appended in the order a generator naturally produces
them, which is not genealogical: the nuclear remnant is added after the
resonance, so the target's daughter list breaks and gets compactified.
"""

from __future__ import annotations

import logging
from typing import Optional

from .record import EventRecord
from .status import Status
from .summary import InteractionSummary

NU_MU = 14
MU_MINUS = 13
NEUTRON = 2112
PROTON = 2212
PI0 = 111
DELTA_PLUS = 2214
FE56 = 1000260560
FE55 = 1000260550


def sample_record(logger: Optional[logging.Logger] = None) -> EventRecord:
    """nu_mu + Fe56 -> mu- + Delta+ (-> p pi0) on a bound neutron."""
    record = EventRecord(logger=logger)
    record.attach_summary(InteractionSummary(
        probe_pdg=NU_MU,
        probe_energy=2.0,
        target_pdg=FE56,
        hit_nucleon_pdg=NEUTRON,
        process="CC",
        scattering="RES",
        kinematics={"W": 1.456},
    ))

    add = record.add_particle_components
    add(NU_MU, Status.INITIAL_STATE, -1, -1, -1, -1, 0.0, 0.0, 2.0, 2.0, 0, 0, 0, 0)
    add(FE56, Status.INITIAL_STATE, -1, -1, -1, -1, 0.0, 0.0, 0.0, 52.0898, 0, 0, 0, 0)
    add(NEUTRON, Status.NUCLEON_TARGET, 1, -1, -1, -1, 0.1, 0.0, 0.05, 0.94619, 0, 0, 0, 0)
    add(MU_MINUS, Status.STABLE_FINAL_STATE, 0, -1, -1, -1, 0.3, 0.1, 1.2, 1.24546, 0, 0, 0, 0)
    add(DELTA_PLUS, Status.DECAYED_STATE, 2, -1, -1, -1, -0.2, -0.1, 0.85, 1.70073, 0, 0, 0, 0)
    add(FE55, Status.FINAL_STATE_NUCLEAR_REMNANT, 1, -1, -1, -1, -0.1, 0.0, -0.05, 51.1437, 0, 0, 0, 0)

    # the resonance moved during compaction; look it up again
    delta = record.particle_position(DELTA_PLUS, Status.DECAYED_STATE)
    add(PROTON, Status.STABLE_FINAL_STATE, delta, -1, -1, -1, -0.1, -0.05, 0.5, 1.06904, 0, 0, 0, 0)
    add(PI0, Status.STABLE_FINAL_STATE, delta, -1, -1, -1, -0.1, -0.05, 0.35, 0.63169, 0, 0, 0, 0)
    return record
