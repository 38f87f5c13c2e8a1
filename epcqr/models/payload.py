"""
The validated EPC QR payload.

A Payload is immutable and always valid: __post_init__ runs the same
rules as PayloadBuilder.build(), so even direct construction cannot
produce a payload that breaks them. Use Payload.builder() for the
non-raising path.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Optional

from .fields import (
    CharacterSet,
    Identification,
    Purpose,
    Remittance,
    RemittanceReference,
    RemittanceText,
    ServiceTag,
    Version,
)
from ..errors import PayloadValidationError
from ..validation import first_violation

if TYPE_CHECKING:
    from ..builder import PayloadBuilder


@dataclass(frozen=True)
class Payload:
    """
    Metadata of one SEPA credit transfer.

    Attributes:
        version: V1 (BIC required) or V2
        character_set: Encoding of the serialized payload
        identification: SCT or INST
        bic: BIC of the beneficiary's bank, None if not given
        beneficiary: Name of the beneficiary
        iban: Beneficiary IBAN without whitespace
        amount: Amount in EUR as entered, e.g. "10.00"
        purpose: Purpose code
        remittance: Structured reference or unstructured text
        information: Beneficiary to originator information
        service_tag: Always BCD

    Example:
        >>> payload = Payload(
        ...     version=Version.V2,
        ...     character_set=CharacterSet.UTF8,
        ...     identification=Identification.SCT,
        ...     bic=None,
        ...     beneficiary="Codeberg e.V.",
        ...     iban="DE90830654080004104242",
        ... )
        >>> payload.to_string().splitlines()[6]
        'DE90830654080004104242'
    """

    version: Version
    character_set: CharacterSet
    identification: Identification
    bic: Optional[str]
    beneficiary: str
    iban: str
    amount: Optional[str] = None
    purpose: Optional[Purpose] = None
    remittance: Optional[Remittance] = None
    information: Optional[str] = None
    service_tag: ServiceTag = field(default=ServiceTag.BCD)

    def __post_init__(self):
        if isinstance(self.iban, str):
            object.__setattr__(self, 'iban', "".join(self.iban.split()))

        if self.service_tag != ServiceTag.BCD:
            raise ValueError(f"Invalid service tag: '{self.service_tag}'. Must be BCD")

        error = first_violation(
            version=self.version,
            character_set=self.character_set,
            identification=self.identification,
            bic=self.bic,
            beneficiary=self.beneficiary,
            iban=self.iban,
            amount=self.amount,
            purpose=self.purpose,
            remittance=self.remittance,
        )
        if error is not None:
            raise PayloadValidationError(error)

    @classmethod
    def builder(cls) -> "PayloadBuilder":
        """Return a fresh PayloadBuilder."""
        from ..builder import PayloadBuilder
        return PayloadBuilder()

    # ============================================================
    # Computed Properties
    # ============================================================

    @property
    def remittance_reference(self) -> Optional[str]:
        if isinstance(self.remittance, RemittanceReference):
            return self.remittance.reference
        return None

    @property
    def remittance_text(self) -> Optional[str]:
        if isinstance(self.remittance, RemittanceText):
            return self.remittance.text
        return None

    # ============================================================
    # Conversion Methods
    # ============================================================

    def to_string(self) -> str:
        """Serialize to the newline separated text encoded in the QR code."""
        from ..formatter import format_payload
        return format_payload(self)

    def __str__(self) -> str:
        return self.to_string()

    def to_bytes(self) -> bytes:
        """
        Serialize and encode with the payload's character set.

        This is what a QR encoder should receive in byte mode.
        """
        return self.to_string().encode(self.character_set.codec)

    def to_dict(self) -> Dict[str, Optional[str]]:
        """
        Convert to a dictionary of wire values.

        Absent fields map to None, enums to their codes.
        """
        return {
            "service_tag": str(self.service_tag),
            "version": str(self.version),
            "character_set": str(self.character_set),
            "identification": str(self.identification),
            "bic": self.bic,
            "beneficiary": self.beneficiary,
            "iban": self.iban,
            "amount": self.amount,
            "purpose": str(self.purpose) if self.purpose is not None else None,
            "remittance_reference": self.remittance_reference,
            "remittance_text": self.remittance_text,
            "information": self.information,
        }
