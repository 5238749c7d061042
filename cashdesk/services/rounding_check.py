"""Self-check for the cash rounding rule.

Runs a fixed table of amount/expected pairs through ``apply_rounding``,
prints one PASS/FAIL line per case and a summary. ``main`` returns the
process exit code: 0 when every case passes, 1 otherwise.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

from cashdesk.services import money

logger = logging.getLogger("cashdesk.rounding_check")

TOLERANCE = 0.001


@dataclass(frozen=True)
class RoundingCase:
    amount: float
    expected: float
    description: str


@dataclass
class CheckReport:
    passed: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed

    @property
    def ok(self) -> bool:
        return self.failed == 0


REFERENCE_CASES: Sequence[RoundingCase] = (
    # fractional part above 0.05 rounds up to the next 0.10
    RoundingCase(10.66, 10.70, "10.66 (0.66 > 0.05) rounds up to 10.70"),
    RoundingCase(10.56, 10.60, "10.56 (0.56 > 0.05) rounds up to 10.60"),
    RoundingCase(150.07, 150.10, "150.07 (0.07 > 0.05) rounds up to 150.10"),
    RoundingCase(150.06, 150.10, "150.06 (0.06 > 0.05) rounds up to 150.10"),
    RoundingCase(150.51, 150.60, "150.51 (0.51 > 0.05) rounds up to 150.60"),
    RoundingCase(150.99, 151.00, "150.99 (0.99 > 0.05) rounds up to 151.00"),
    # 0.05 and below rounds down
    RoundingCase(10.04, 10.00, "10.04 (0.04 <= 0.05) rounds down to 10.00"),
    RoundingCase(10.05, 10.00, "10.05 (0.05 <= 0.05) rounds down to 10.00"),
    RoundingCase(150.04, 150.00, "150.04 (0.04 <= 0.05) rounds down to 150.00"),
    RoundingCase(150.05, 150.00, "150.05 (0.05 <= 0.05) rounds down to 150.00"),
    RoundingCase(150.01, 150.00, "150.01 (0.01 <= 0.05) rounds down to 150.00"),
    RoundingCase(100.03, 100.00, "100.03 (0.03 <= 0.05) rounds down to 100.00"),
    # already on the grid
    RoundingCase(150.00, 150.00, "150.00 unchanged"),
    RoundingCase(100.10, 100.10, "100.10 unchanged"),
    RoundingCase(200.20, 200.20, "200.20 unchanged"),
    RoundingCase(200.30, 200.30, "200.30 unchanged"),
)


def run_cases(
    cases: Optional[Iterable[RoundingCase]] = None,
    rounding: Optional[Callable[[float], float]] = None,
    out: Callable[[str], None] = print,
) -> CheckReport:
    cases = REFERENCE_CASES if cases is None else cases
    rounding = money.apply_rounding if rounding is None else rounding
    report = CheckReport()

    for index, case in enumerate(cases, start=1):
        try:
            result = float(rounding(case.amount))
            passed = abs(result - case.expected) < TOLERANCE
        except Exception as e:  # one broken case must not stop the run
            report.failed += 1
            out(f"FAIL case {index}: {case.description}")
            out(f"  input: {case.amount:.2f} -> error: {e!r} (expected: {case.expected:.2f})")
            continue
        if passed:
            report.passed += 1
        else:
            report.failed += 1
        out(f"{'PASS' if passed else 'FAIL'} case {index}: {case.description}")
        out(f"  input: {case.amount:.2f} -> result: {result:.2f} (expected: {case.expected:.2f})")

    out("")
    out("=== SUMMARY ===")
    out(f"passed: {report.passed}/{report.total}")
    out(f"failed: {report.failed}/{report.total}")
    if report.ok:
        out("All cases passed: amounts snap to multiples of 0.10 (> 0.05 up, <= 0.05 down).")
    else:
        out("Some cases failed; review the rounding implementation.")
    return report


def main() -> int:
    try:
        report = run_cases()
    except Exception:
        logger.exception("rounding self-check crashed")
        return 1
    return 0 if report.ok else 1
