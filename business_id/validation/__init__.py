"""Validation of Finnish Business IDs.

The validator runs a fixed pipeline of checks and collects every violation
into an immutable report instead of raising.
"""

from business_id.validation.checks import compute_check_digit, disassemble
from business_id.validation.reasons import DEFAULT_DESCRIPTIONS, FailReason, ReasonCatalog
from business_id.validation.results import (
    ParsedBusinessId,
    ReportBuilder,
    ValidationReport,
)
from business_id.validation.service import BusinessIdValidator

__all__ = [
    "DEFAULT_DESCRIPTIONS",
    "BusinessIdValidator",
    "FailReason",
    "ParsedBusinessId",
    "ReasonCatalog",
    "ReportBuilder",
    "ValidationReport",
    "compute_check_digit",
    "disassemble",
]
