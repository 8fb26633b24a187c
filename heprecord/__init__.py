"""heprecord: generated event record with contiguous mother/daughter lists."""

from __future__ import annotations

__version__ = "0.1.0"

from .models import Particle
from .record import EventRecord
from .status import Status
from .summary import InteractionSummary
from .validation import validate
from .vector import LorentzVector

__all__ = [
    "__version__",
    "EventRecord",
    "InteractionSummary",
    "LorentzVector",
    "Particle",
    "Status",
    "validate",
]
