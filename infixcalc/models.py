"""Data models for infixcalc.

Outcome, DemoCase, CaseResult — the typed records that flow from
expression → demo runner → CLI.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from infixcalc.errors import ExpressionError


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating one notation: either a value or an error."""

    notation: str
    value: Optional[float] = None
    error: str = ""
    error_kind: str = ""

    @property
    def ok(self) -> bool:
        return not self.error_kind

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        if self.ok:
            return {"notation": self.notation, "value": self.value}
        return {"notation": self.notation, "error": self.error, "error_kind": self.error_kind}


@dataclass(frozen=True)
class DemoCase:
    """A canned input with the value or failure it should produce.

    Exactly one of `expected` and `expected_error` is set.
    """

    label: str
    notation: str
    expected: Optional[float] = None
    expected_error: Optional[type[ExpressionError]] = None


@dataclass
class CaseResult:
    """Outcome of running one DemoCase."""

    case: DemoCase
    outcome: Outcome

    @property
    def verdict(self) -> str:
        if self.case.expected_error is not None:
            expected_kind = self.case.expected_error.__name__
            return "pass" if self.outcome.error_kind == expected_kind else "fail"
        if not self.outcome.ok or self.outcome.value is None:
            return "fail"
        return "pass" if math.isclose(self.outcome.value, self.case.expected) else "fail"
