"""Minimal assertion accumulator used by the built-in self-check.

Each check records whether it passed, a message and the caller's location.
Failed checks never stop the run; ``report()`` summarizes them afterwards and
``aggregate()`` rolls a finished group into a parent group.
"""

from __future__ import annotations

import inspect
import logging
import os
from dataclasses import dataclass, field
from typing import Any, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckOutcome:
    passed: bool
    message: str
    location: str


def _caller_location(depth: int = 2) -> str:
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return "<unknown>"
        return f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"
    finally:
        del frame


@dataclass
class CheckResults:
    name: str
    report_on_success: bool = False
    outcomes: List[CheckOutcome] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.outcomes)

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def ok(self) -> bool:
        return self.passed == self.attempted

    def record(self, passed: bool, message: str = "", location: str = "") -> bool:
        self.outcomes.append(CheckOutcome(bool(passed), message, location or _caller_location()))
        return bool(passed)

    def check(self, cond: Any, message: str = "") -> bool:
        return self.record(bool(cond), message, _caller_location())

    def check_eq(self, a: Any, b: Any, message: str = "") -> bool:
        passed = a == b
        detail = f"'{a}' != '{b}'" if not passed else ""
        if message and detail:
            detail = f"{detail} {message}"
        return self.record(passed, detail or message, _caller_location())

    def failures(self) -> List[CheckOutcome]:
        return [o for o in self.outcomes if not o.passed]

    def aggregate(self, child: "CheckResults", report: bool = True) -> bool:
        """Roll ``child`` into this group as one check that passes iff it fully passed.

        Args:
            child: Finished group of checks
            report: Emit the child's report first

        Returns:
            Whether the child passed
        """
        if report:
            child.report()
        return self.record(
            child.ok, f"{child.name}: {child.passed} / {child.attempted} checks passed", _caller_location()
        )

    def report(self) -> None:
        for outcome in self.failures():
            logger.error("Assertion failed: %s: %s", outcome.location, outcome.message)
        if not self.ok:
            logger.error("Check FAILED: %s: %d / %d checks passed.", self.name, self.passed, self.attempted)
        elif self.report_on_success:
            logger.info("Check PASSED: %s: all %d checks passed.", self.name, self.attempted)
