"""PDG helpers.

Names, masses and validity come from the scikit-hep "particle" tables.
Generator pseudo-particles and nuclear codes the tables do not carry get
names from a small built-in map.
"""

from __future__ import annotations

from typing import Optional

from particle import PDGID, InvalidParticle, Particle, ParticleNotFound

# Generator-internal pseudo-particles used to balance energy-momentum
# bookkeeping; they are not real particles but are not nuclei either.
ROOTINO = 0
BINDINO = 2000000101

_FAKE_NAMES = {
    ROOTINO: "rootino",
    BINDINO: "bindino",
}


def is_fake(pdg_id: int) -> bool:
    return pdg_id in _FAKE_NAMES


def is_nucleus(pdg_id: int) -> bool:
    """Nuclear codes have the form 10LZZZAAAI."""
    return abs(pdg_id) >= 1000000000 and not is_fake(pdg_id)


def is_particle(pdg_id: int) -> bool:
    return not is_fake(pdg_id) and not is_nucleus(pdg_id)


def is_valid_pdg_id(pdg_id: int) -> bool:
    if is_fake(pdg_id):
        return True
    return bool(PDGID(pdg_id).is_valid)


def _nucleus_name(pdg_id: int) -> str:
    z = (abs(pdg_id) // 10000) % 1000
    a = (abs(pdg_id) // 10) % 1000
    return f"A{a}Z{z}"


def name(pdg_id: int) -> str:
    if is_fake(pdg_id):
        return _FAKE_NAMES[pdg_id]
    try:
        return Particle.from_pdgid(pdg_id).name
    except (ParticleNotFound, InvalidParticle):
        pass
    if is_nucleus(pdg_id):
        return _nucleus_name(pdg_id)
    return str(pdg_id)


def mass_gev(pdg_id: int) -> Optional[float]:
    """PDG mass in GeV, or None for codes without a tabulated mass."""
    if is_fake(pdg_id):
        return None
    try:
        p = Particle.from_pdgid(pdg_id)
    except (ParticleNotFound, InvalidParticle):
        return None
    if p.mass is None:
        return None
    # the tables are in MeV
    return float(p.mass) / 1000.0
