"""
Field types for the EPC QR payload.

Each enum member's value is the exact code written to the payload, so
serialization is just str(member).
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union
import string


class _CodeEnum(Enum):
    """Enum whose string form is its wire code."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str):
        """
        Look up a member by name ("V1") or by wire code ("001").

        Raises:
            ValueError: If raw matches neither a name nor a code
        """
        if isinstance(raw, cls):
            return raw
        key = str(raw).strip()
        for member in cls:
            if key.upper() == member.name or key == member.value:
                return member
        valid = ", ".join(f"{m.name}/{m.value}" for m in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{raw}'. Must be one of: {valid}")


class ServiceTag(_CodeEnum):
    BCD = "BCD"


class Version(_CodeEnum):
    # EEA and non-EEA, BIC mandatory
    V1 = "001"
    # EEA only, BIC optional
    V2 = "002"


class CharacterSet(_CodeEnum):
    # Codes 2-8 are ISO-8859-1/2/4/5/7/10/15
    UTF8 = "1"

    @property
    def codec(self) -> str:
        """Python codec name used to turn the payload into bytes."""
        return "utf-8"


class Identification(_CodeEnum):
    # SEPA Credit Transfer
    SCT = "SCT"
    # SEPA Instant Credit Transfer
    INST = "INST"


@dataclass(frozen=True)
class Purpose:
    """
    Purpose of the credit transfer.

    Either the predefined Purpose.BENE or a custom four letter code
    created with Purpose.custom().
    """

    code: str

    BENE: ClassVar["Purpose"]

    @classmethod
    def custom(cls, code: str) -> "Purpose":
        return cls(code)

    @property
    def is_custom(self) -> bool:
        return self != Purpose.BENE

    @property
    def is_well_formed(self) -> bool:
        """BENE, or exactly four uppercase ASCII letters."""
        if not self.is_custom:
            return True
        return (
            isinstance(self.code, str)
            and len(self.code) == 4
            and all(ch in string.ascii_uppercase for ch in self.code)
        )

    def __str__(self) -> str:
        return self.code


Purpose.BENE = Purpose("BENE")


@dataclass(frozen=True)
class RemittanceReference:
    """Structured remittance information: an ISO 11649 RF reference."""

    reference: str

    def __str__(self) -> str:
        return self.reference


@dataclass(frozen=True)
class RemittanceText:
    """Unstructured remittance information, at most 140 characters."""

    text: str

    def __str__(self) -> str:
        return self.text


# A payload carries either a structured reference or free text, never both
Remittance = Union[RemittanceReference, RemittanceText]

REMITTANCE_TEXT_MAX_LENGTH = 140
