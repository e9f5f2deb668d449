"""Validation result types.

A fresh ReportBuilder collects failure reasons during one validation call
and is turned into an immutable ValidationReport at the end, so nothing is
carried over from one call to the next.
"""

from dataclasses import dataclass, field
from typing import NamedTuple

from business_id.validation.reasons import FailReason, ReasonCatalog


class ParsedBusinessId(NamedTuple):
    """Business ID split on the delimiter."""

    prefix: str
    verification_number: str


@dataclass(frozen=True)
class ValidationReport:
    """Immutable outcome of validating one business ID.

    `reasons` and `messages` are parallel and ordered by the check that
    reported them.
    """

    business_id: str | None
    satisfied: bool
    reasons: tuple[FailReason, ...] = ()
    messages: tuple[str, ...] = ()

    @property
    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.satisfied

    def format_reasons(self) -> str:
        """Format the reasons as a numbered list.

        Returns empty string if validation succeeded.
        """
        return "\n".join(
            f"  {number}: {message}"
            for number, message in enumerate(self.messages, start=1)
        )


@dataclass
class ReportBuilder:
    """Per-call accumulator of failure reasons."""

    business_id: str | None
    reasons: list[FailReason] = field(default_factory=list)

    def report(self, reason: FailReason) -> None:
        self.reasons.append(reason)

    def build(self, satisfied: bool, catalog: ReasonCatalog) -> ValidationReport:
        # A reported reason always means failure
        satisfied = satisfied and not self.reasons
        return ValidationReport(
            business_id=self.business_id,
            satisfied=satisfied,
            reasons=tuple(self.reasons),
            messages=catalog.describe(self.reasons),
        )
