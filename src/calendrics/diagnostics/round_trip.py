"""
calendrics.diagnostics.round_trip
---------------------------------
Random Julian Day round-trips through a calendar, plus a cross-check of the
Gregorian Meeus conversion against the integer Julian Day Number formula.

  python -m calendrics.diagnostics.round_trip --n 100000 --seed 42
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Tuple

import calendrics
from calendrics.core.time import from_jdn, to_jdn

logger = logging.getLogger(__name__)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calendrics[diagnostics]"') from e


def sample_jds(n: int, lo: float, hi: float, seed: int) -> List[float]:
    """``n`` civil-midnight Julian Days drawn uniformly from [lo, hi]."""
    np = _need_numpy()
    rng = np.random.default_rng(seed)
    days = rng.integers(int(lo), int(hi), size=n, endpoint=True)
    return [float(d) + 0.5 for d in days]


def roundtrip_test(name: str, jds: List[float], *, max_failures: int = 10) -> List[Tuple[float, float]]:
    """Pairs (jd, jd') where from_jd followed by to_jd did not return jd."""
    cal = calendrics.calendar(name)
    failures: List[Tuple[float, float]] = []
    for jd in jds:
        back = cal.from_jd(jd).to_jd()
        if back != jd:
            failures.append((jd, back))
            logger.warning("%s: jd %s came back as %s", name, jd, back)
            if len(failures) >= max_failures:
                break
    return failures


def jdn_cross_check(jds: List[float], *, max_failures: int = 10) -> List[Tuple[float, int]]:
    """
    Gregorian dates in the Common Era must agree with the integer JDN formula:
    to_jd(y, m, d) + 0.5 == to_jdn(y, m, d), and from_jdn maps that number
    back to the same date.
    """
    cal = calendrics.calendar("gregorian")
    failures: List[Tuple[float, int]] = []
    for jd in jds:
        d = cal.from_jd(jd)
        if d.year < 1:
            continue
        jdn = to_jdn(d.year, d.month, d.day)
        if jd + 0.5 != jdn or from_jdn(jdn) != (d.year, d.month, d.day):
            failures.append((jd, jdn))
            logger.warning("%s: jd %s but jdn %s", d, jd, jdn)
            if len(failures) >= max_failures:
                break
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Julian Day round-trip diagnostics.")
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--n", type=int, default=10000)
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--lo", type=float, default=0.0, help="lowest JD (default 0, 4713 BCE)")
    p.add_argument("--hi", type=float, default=5373484.0, help="highest JD (default 9999-12-31)")
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    jds = sample_jds(args.n, args.lo, args.hi, args.seed)

    failures = roundtrip_test(args.calendar, jds, max_failures=args.max_failures)
    print(f"{args.calendar}: {len(jds)} round-trips, {len(failures)} failures")

    mismatches: list = []
    if args.calendar.lower() == "gregorian":
        mismatches = jdn_cross_check(jds, max_failures=args.max_failures)
        print(f"gregorian: JDN cross-check, {len(mismatches)} mismatches")

    return 1 if failures or mismatches else 0


if __name__ == "__main__":
    raise SystemExit(main())
