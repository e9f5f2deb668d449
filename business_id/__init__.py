"""Finnish Business ID (Y-tunnus) validation."""

from business_id.validation import (
    BusinessIdValidator,
    FailReason,
    ReasonCatalog,
    ValidationReport,
)

__all__ = [
    "BusinessIdValidator",
    "FailReason",
    "ReasonCatalog",
    "ValidationReport",
]
