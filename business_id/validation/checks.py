"""Checks making up the business ID validation pipeline.

Each check inspects the raw business ID, reports every violation it finds to
the ReportBuilder it is given and returns whether it passed. Checks keep no
state of their own, so a single instance can serve any number of calls.
"""

from business_id.const import (
    ALLOWED_CHARACTERS,
    BUSINESS_ID_LENGTH,
    CHECKSUM_MODULUS,
    CHECKSUM_WEIGHTS,
    DELIMITER,
    PREFIX_LENGTH,
    VERIFICATION_NUMBER_LENGTH,
)
from business_id.validation.reasons import FailReason
from business_id.validation.results import ParsedBusinessId, ReportBuilder

__all__ = [
    "CharacterSetCheck",
    "ChecksumCheck",
    "DelimiterCheck",
    "LengthCheck",
    "compute_check_digit",
    "disassemble",
]


def disassemble(business_id: str) -> ParsedBusinessId | None:
    """Split a business ID into prefix and verification number.

    Returns:
        ParsedBusinessId built from the first two parts, or None when the
        delimiter is missing
    """
    parts = business_id.split(DELIMITER)
    if len(parts) < 2:
        return None
    return ParsedBusinessId(prefix=parts[0], verification_number=parts[1])


def compute_check_digit(prefix: str) -> int | None:
    """Compute the expected verification digit for a numeric prefix.

    Args:
        prefix: Exactly PREFIX_LENGTH ASCII digits

    Returns:
        The expected digit, or None when no digit can be valid (remainder 1)
    """
    if len(prefix) != PREFIX_LENGTH or not prefix.isascii() or not prefix.isdigit():
        raise ValueError(f"Prefix must be {PREFIX_LENGTH} digits, got '{prefix}'")

    checksum = sum(
        weight * int(digit) for weight, digit in zip(CHECKSUM_WEIGHTS, prefix)
    )
    remainder = checksum % CHECKSUM_MODULUS
    if remainder == 1:
        return None
    if remainder == 0:
        return 0
    return CHECKSUM_MODULUS - remainder


class CharacterSetCheck:
    """Every character must be an ASCII digit or the delimiter."""

    name = "characters"

    def check(self, business_id: str, builder: ReportBuilder) -> bool:
        if all(char in ALLOWED_CHARACTERS for char in business_id):
            return True
        builder.report(FailReason.CONTAINS_INVALID_CHARACTERS)
        return False


class DelimiterCheck:
    """The verification number delimiter must be present."""

    name = "delimiter"

    def check(self, business_id: str, builder: ReportBuilder) -> bool:
        if DELIMITER in business_id:
            return True
        builder.report(FailReason.DELIMITER_MISSING)
        return False


class LengthCheck:
    """Overall, prefix and verification number lengths.

    All length violations are reported; the prefix and verification number
    are only measured when the ID can be split on the delimiter.
    """

    name = "lengths"

    def check(self, business_id: str, builder: ReportBuilder) -> bool:
        correct = True

        if len(business_id) > BUSINESS_ID_LENGTH:
            builder.report(FailReason.INPUT_TOO_LONG)
            correct = False

        if len(business_id) < BUSINESS_ID_LENGTH:
            builder.report(FailReason.INPUT_TOO_SHORT)
            correct = False

        parsed = disassemble(business_id)
        if parsed is None:
            return False

        if len(parsed.prefix) > PREFIX_LENGTH:
            builder.report(FailReason.PREFIX_TOO_LONG)
            correct = False

        if len(parsed.prefix) < PREFIX_LENGTH:
            builder.report(FailReason.PREFIX_TOO_SHORT)
            correct = False

        if len(parsed.verification_number) > VERIFICATION_NUMBER_LENGTH:
            builder.report(FailReason.VERIFICATION_NUMBER_TOO_LONG)
            correct = False

        if len(parsed.verification_number) < VERIFICATION_NUMBER_LENGTH:
            builder.report(FailReason.VERIFICATION_NUMBER_TOO_SHORT)
            correct = False

        return correct


class ChecksumCheck:
    """Verification digit must match the weighted mod 11 checksum of the prefix.

    Only meaningful once the structural checks have passed.
    """

    name = "checksum"

    def check(self, business_id: str, builder: ReportBuilder) -> bool:
        parsed = disassemble(business_id)
        if parsed is None:
            return False

        expected = compute_check_digit(parsed.prefix)
        if expected is not None and str(expected) == parsed.verification_number:
            return True

        builder.report(FailReason.VERIFICATION_NUMBER_CHECKSUM)
        return False
