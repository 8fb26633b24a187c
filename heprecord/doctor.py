from __future__ import annotations

from typing import Any, Dict, List


def doctor_report() -> Dict[str, Any]:
    checks: List[Dict[str, Any]] = []

    # Core import
    try:
        import heprecord  # noqa: F401
        checks.append({"name": "heprecord import", "ok": True, "detail": "import ok"})
    except Exception as e:
        checks.append({"name": "heprecord import", "ok": False, "detail": str(e)})

    # PDG tables
    try:
        from .pdg import mass_gev

        m = mass_gev(2212)
        ok = m is not None and abs(m - 0.938272) < 1e-3
        detail = f"proton mass {m} GeV" if m is not None else "no proton mass"
        checks.append({"name": "particle (pdg tables)", "ok": ok, "detail": detail})
    except Exception as e:
        checks.append({"name": "particle (pdg tables)", "ok": False, "detail": str(e)})

    ok_all = all(c["ok"] for c in checks)
    summary = "heprecord doctor: OK" if ok_all else "heprecord doctor: FAIL"

    return {"summary": summary, "checks": checks}
