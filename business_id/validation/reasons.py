"""Failure reasons and their human-readable descriptions.

Reasons are a closed enum used by the validation pipeline. Descriptions live
in a separate catalog so the texts can be swapped (e.g. for localization)
without touching the checks.
"""

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType

import yaml

from business_id.const import (
    BUSINESS_ID_LENGTH,
    DELIMITER,
    PREFIX_LENGTH,
    VERIFICATION_NUMBER_LENGTH,
)
from business_id.utils.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    "DEFAULT_DESCRIPTIONS",
    "FailReason",
    "ReasonCatalog",
]


class FailReason(str, Enum):
    """Single structural or checksum violation of a business ID"""

    INPUT_TOO_LONG = "INPUT_TOO_LONG"
    INPUT_TOO_SHORT = "INPUT_TOO_SHORT"
    DELIMITER_MISSING = "DELIMITER_MISSING"
    CONTAINS_INVALID_CHARACTERS = "CONTAINS_INVALID_CHARACTERS"
    PREFIX_TOO_LONG = "PREFIX_TOO_LONG"
    PREFIX_TOO_SHORT = "PREFIX_TOO_SHORT"
    VERIFICATION_NUMBER_TOO_SHORT = "VERIFICATION_NUMBER_TOO_SHORT"
    VERIFICATION_NUMBER_TOO_LONG = "VERIFICATION_NUMBER_TOO_LONG"
    VERIFICATION_NUMBER_CHECKSUM = "VERIFICATION_NUMBER_CHECKSUM"


DEFAULT_DESCRIPTIONS: Mapping[FailReason, str] = MappingProxyType(
    {
        FailReason.CONTAINS_INVALID_CHARACTERS: "Contains incorrect character(s)",
        FailReason.DELIMITER_MISSING: (
            "Does not contain the required verification number delimiter: "
            f"'{DELIMITER}'"
        ),
        FailReason.INPUT_TOO_LONG: (
            f"Too long, the required length is {BUSINESS_ID_LENGTH}"
        ),
        FailReason.INPUT_TOO_SHORT: (
            f"Too short, the required length is {BUSINESS_ID_LENGTH}"
        ),
        FailReason.PREFIX_TOO_LONG: (
            f"Prefix is too long, the required length is {PREFIX_LENGTH}"
        ),
        FailReason.PREFIX_TOO_SHORT: (
            f"Prefix is too short, the required length is {PREFIX_LENGTH}"
        ),
        FailReason.VERIFICATION_NUMBER_TOO_LONG: (
            "Verification number is too long, the required length is "
            f"{VERIFICATION_NUMBER_LENGTH}"
        ),
        FailReason.VERIFICATION_NUMBER_TOO_SHORT: (
            "Verification number is too short, the required length is "
            f"{VERIFICATION_NUMBER_LENGTH}"
        ),
        FailReason.VERIFICATION_NUMBER_CHECKSUM: (
            "Verification number checksum failure, check business id and try again"
        ),
    }
)


def _parse_descriptions(descriptions: Mapping) -> dict[FailReason, str]:
    """Check description keys and texts, keyed by FailReason.

    Raises:
        ValueError: If a key is not a known reason or a text is not a string
    """
    parsed: dict[FailReason, str] = {}
    for key, text in descriptions.items():
        try:
            reason = FailReason(key)
        except ValueError:
            raise ValueError(
                f"Unknown failure reason '{key}' in descriptions. "
                f"Valid reasons: {', '.join(r.value for r in FailReason)}"
            ) from None
        if not isinstance(text, str):
            raise ValueError(
                f"Description for '{reason.value}' must be a string, "
                f"got {type(text).__name__}"
            )
        parsed[reason] = text
    return parsed


class ReasonCatalog(Mapping[FailReason, str]):
    """Read-only mapping of FailReason to description text.

    Every reason always has a description: overrides replace the default
    text for the reasons they name and leave the rest untouched.
    """

    def __init__(self, descriptions: Mapping[str, str] | None = None):
        """Initialize catalog with the default texts plus overrides.

        Args:
            descriptions: Mapping of reason name or FailReason member to text

        Raises:
            ValueError: If a key is not a known reason or a text is not a string
        """
        merged = dict(DEFAULT_DESCRIPTIONS)
        if descriptions:
            merged.update(_parse_descriptions(descriptions))
        self._descriptions: Mapping[FailReason, str] = MappingProxyType(merged)

    def __getitem__(self, reason: FailReason) -> str:
        return self._descriptions[reason]

    def __iter__(self) -> Iterator[FailReason]:
        return iter(self._descriptions)

    def __len__(self) -> int:
        return len(self._descriptions)

    def __repr__(self) -> str:
        return f"ReasonCatalog({dict(self._descriptions)!r})"

    def describe(self, reasons: Iterable[FailReason]) -> tuple[str, ...]:
        """Translate reasons into their descriptions, preserving order."""
        return tuple(self._descriptions[reason] for reason in reasons)

    def with_overrides(self, overrides: Mapping[str, str]) -> "ReasonCatalog":
        """Return a new catalog with some descriptions replaced.

        Args:
            overrides: Mapping of reason name (e.g. "INPUT_TOO_LONG") or
                FailReason member to replacement text

        Returns:
            New ReasonCatalog; this one is left unchanged

        Raises:
            ValueError: If a key is not a known reason or a text is not a string
        """
        merged = dict(self._descriptions)
        merged.update(_parse_descriptions(overrides))
        return ReasonCatalog(merged)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ReasonCatalog":
        """Load description overrides from a YAML mapping file.

        The file maps reason names to texts, e.g.::

            INPUT_TOO_LONG: Liian pitkä, vaadittu pituus on 9

        Raises:
            FileNotFoundError: If the file does not exist
            yaml.YAMLError: If the file is not valid YAML
            ValueError: If the document is not a mapping or names unknown reasons
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Descriptions file not found: {path}")

        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Descriptions file {path} must contain a mapping of reason to text"
            )

        catalog = cls().with_overrides(data)
        logger.info("Loaded reason descriptions", path=str(path), overrides=len(data))
        return catalog
