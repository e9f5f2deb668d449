"""Constants describing the Finnish Business ID (Y-tunnus) format."""

# Full identifier, e.g. "0357502-9"
BUSINESS_ID_LENGTH = 9

# Digits before the delimiter
PREFIX_LENGTH = 7

# Digits after the delimiter
VERIFICATION_NUMBER_LENGTH = 1

DELIMITER = "-"

ALLOWED_CHARACTERS = frozenset("0123456789" + DELIMITER)

# Positional weights applied to the prefix digits
CHECKSUM_WEIGHTS = (7, 9, 10, 5, 8, 4, 2)

CHECKSUM_MODULUS = 11
