"""Business ID validator orchestrating the individual checks."""

from business_id.utils.logging import get_logger
from business_id.validation.checks import (
    CharacterSetCheck,
    ChecksumCheck,
    DelimiterCheck,
    LengthCheck,
)
from business_id.validation.reasons import FailReason, ReasonCatalog
from business_id.validation.results import ReportBuilder, ValidationReport

logger = get_logger(__name__)


class BusinessIdValidator:
    """Validates Finnish Business IDs (Y-tunnus) and explains failures.

    The structural checks always all run so that every problem gets
    reported; the checksum is only verified once the structure is valid.
    The validator keeps no per-call state and can be shared between threads.

    Usage:
        validator = BusinessIdValidator()
        report = validator.validate("0357502-9")
        if report.failed:
            print(report.format_reasons())
    """

    def __init__(self, catalog: ReasonCatalog | None = None):
        """Initialize validator with a description catalog.

        Args:
            catalog: Descriptions used in reports. Defaults to the English texts.
        """
        self.catalog = catalog if catalog is not None else ReasonCatalog()
        self.structural_checks = [CharacterSetCheck(), DelimiterCheck(), LengthCheck()]
        self.checksum_check = ChecksumCheck()

    def validate(self, business_id: str | None) -> ValidationReport:
        """Validate a business ID.

        Args:
            business_id: Candidate ID, e.g. "0357502-9". None is allowed.

        Returns:
            ValidationReport with the result and the reasons for failure
        """
        builder = ReportBuilder(business_id)

        if not business_id:
            builder.report(FailReason.INPUT_TOO_SHORT)
            return self._finish(builder, satisfied=False)

        satisfied = True
        for structural_check in self.structural_checks:
            # Every structural check runs, even after a failure
            satisfied &= structural_check.check(business_id, builder)

        if satisfied:
            satisfied = self.checksum_check.check(business_id, builder)

        return self._finish(builder, satisfied)

    def is_satisfied_by(self, business_id: str | None) -> bool:
        """Check if a business ID is valid."""
        return self.validate(business_id).satisfied

    def _finish(self, builder: ReportBuilder, satisfied: bool) -> ValidationReport:
        report = builder.build(satisfied, self.catalog)
        logger.debug(
            "Validated business id",
            business_id=report.business_id,
            satisfied=report.satisfied,
            reasons=[reason.value for reason in report.reasons],
        )
        return report
