"""Status codes (particle roles) of event record entries."""

from __future__ import annotations

from enum import IntEnum


class Status(IntEnum):
    """Role of an entry in the generated event.

    The numeric values follow the generator convention, so they can be
    compared against plain integers read from other tools.
    """

    UNDEFINED = -1
    INITIAL_STATE = 0
    STABLE_FINAL_STATE = 1
    INTERMEDIATE_STATE = 2
    DECAYED_STATE = 3
    NUCLEON_TARGET = 11
    DIS_PRE_FRAGM_HADRONIC_STATE = 12
    PRE_DECAY_RESONANT_STATE = 13
    HADRON_IN_THE_NUCLEUS = 14
    FINAL_STATE_NUCLEAR_REMNANT = 15
    NUCLEON_CLUSTER_TARGET = 16

    @property
    def is_initial(self) -> bool:
        """Initial-state and target entries cannot hold packed daughters."""
        return self in (Status.INITIAL_STATE, Status.NUCLEON_TARGET)


def as_status(value: int) -> int:
    """Coerce a status code to a Status member; unknown codes stay plain ints."""
    try:
        return Status(int(value))
    except ValueError:
        return int(value)
