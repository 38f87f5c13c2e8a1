"""
Builder for EPC QR payloads.

Fields are collected with chainable setters in any order and validated
all at once by build(). Validation failures are returned as a
BuildResult instead of being raised.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .errors import PayloadBuildError, PayloadError
from .models.fields import (
    CharacterSet,
    Identification,
    Purpose,
    Remittance,
    RemittanceReference,
    RemittanceText,
    ServiceTag,
    Version,
)
from .models.payload import Payload
from .validation import first_violation

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """
    Outcome of PayloadBuilder.build().

    Attributes:
        success: True if every rule passed
        payload: The built payload if successful, None otherwise
        error: The first rule that failed, None if successful

    Example:
        >>> result = builder.build()
        >>> if result.success:
        ...     print(result.payload.to_string())
        ... else:
        ...     print(f"Rejected: {result.error.message}")
    """
    success: bool
    payload: Optional[Payload] = None
    error: Optional[PayloadError] = None

    def unwrap(self) -> Payload:
        """
        Return the payload or raise.

        Raises:
            PayloadBuildError: If the build failed
        """
        if not self.success:
            raise PayloadBuildError(self.error)
        return self.payload


class PayloadBuilder:
    """
    Mutable collector for payload fields.

    Setting a field twice keeps the latest value. The builder is not
    consumed by build(): after a failure the offending field can be
    corrected and build() called again.

    Example:
        >>> result = (
        ...     PayloadBuilder()
        ...     .version(Version.V1)
        ...     .character_set(CharacterSet.UTF8)
        ...     .identification(Identification.SCT)
        ...     .bic("GENODEF1SLR")
        ...     .beneficiary("Codeberg e.V.")
        ...     .iban("DE90 8306 5408 0004 1042 42")
        ...     .amount("10.00")
        ...     .remittance(RemittanceText("for the good cause"))
        ...     .build()
        ... )
        >>> result.success
        True
    """

    def __init__(self):
        self._service_tag = ServiceTag.BCD
        self._version: Optional[Version] = None
        self._character_set: Optional[CharacterSet] = None
        self._identification: Optional[Identification] = None
        self._bic: Optional[str] = None
        self._beneficiary: Optional[str] = None
        self._iban: Optional[str] = None
        self._amount: Optional[str] = None
        self._purpose: Optional[Purpose] = None
        self._remittance: Optional[Remittance] = None
        self._information: Optional[str] = None

    # ============================================================
    # Setters
    # ============================================================

    def version(self, version: Version) -> "PayloadBuilder":
        self._version = version
        return self

    def character_set(self, character_set: CharacterSet) -> "PayloadBuilder":
        self._character_set = character_set
        return self

    def identification(self, identification: Identification) -> "PayloadBuilder":
        self._identification = identification
        return self

    def bic(self, bic: str) -> "PayloadBuilder":
        # An empty BIC is the same as no BIC
        self._bic = bic or None
        return self

    def beneficiary(self, beneficiary: str) -> "PayloadBuilder":
        self._beneficiary = beneficiary
        return self

    def iban(self, iban: str) -> "PayloadBuilder":
        """Store the IBAN with all whitespace removed."""
        self._iban = "".join(iban.split()) if isinstance(iban, str) else iban
        return self

    def amount(self, amount: str) -> "PayloadBuilder":
        """Amount in EUR as a decimal string with two fractional digits, e.g. "10.00"."""
        self._amount = amount
        return self

    def purpose(self, purpose: Purpose) -> "PayloadBuilder":
        self._purpose = purpose
        return self

    def remittance(self, remittance: Remittance) -> "PayloadBuilder":
        self._remittance = remittance
        return self

    def information(self, information: str) -> "PayloadBuilder":
        self._information = information
        return self

    # ============================================================
    # Finalization
    # ============================================================

    def build(self) -> BuildResult:
        """
        Validate all fields and create the payload.

        Rules are checked in this order and the first failure is
        reported: version, character set, identification, BIC for V1,
        beneficiary, IBAN, amount, purpose, remittance.

        Returns:
            BuildResult with either the payload or the PayloadError
        """
        error = first_violation(
            version=self._version,
            character_set=self._character_set,
            identification=self._identification,
            bic=self._bic,
            beneficiary=self._beneficiary,
            iban=self._iban,
            amount=self._amount,
            purpose=self._purpose,
            remittance=self._remittance,
        )

        if error is not None:
            logger.warning(f"Payload rejected: {error.message}")
            return BuildResult(success=False, error=error)

        payload = Payload(
            service_tag=self._service_tag,
            version=self._version,
            character_set=self._character_set,
            identification=self._identification,
            bic=self._bic,
            beneficiary=self._beneficiary,
            iban=self._iban,
            amount=self._amount,
            purpose=self._purpose,
            remittance=self._remittance,
            information=self._information,
        )
        logger.debug(f"Built payload for beneficiary: {payload.beneficiary}")
        return BuildResult(success=True, payload=payload)

    # ============================================================
    # Conversion Methods
    # ============================================================

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PayloadBuilder":
        """
        Create a builder from a plain mapping, e.g. a loaded YAML file.

        Enum fields accept the member name or the wire code
        ("V1" or "001"). Remittance is given as either
        remittance_reference or remittance_text.

        Args:
            data: Mapping with payload field names as keys

        Returns:
            PayloadBuilder with every given field set (not yet validated)

        Raises:
            ValueError: If a key is unknown, an enum value cannot be
                parsed, or both remittance keys are given
        """
        unknown = sorted(set(data) - _DICT_KEYS)
        if unknown:
            raise ValueError(f"Unknown payload fields: {unknown}")

        if data.get('remittance_reference') and data.get('remittance_text'):
            raise ValueError("Use either remittance_reference or remittance_text, not both")

        builder = cls()

        if data.get('version') is not None:
            builder.version(Version.parse(data['version']))
        if data.get('character_set') is not None:
            builder.character_set(CharacterSet.parse(data['character_set']))
        if data.get('identification') is not None:
            builder.identification(Identification.parse(data['identification']))
        if data.get('bic') is not None:
            builder.bic(str(data['bic']))
        if data.get('beneficiary') is not None:
            builder.beneficiary(str(data['beneficiary']))
        if data.get('iban') is not None:
            builder.iban(str(data['iban']))
        if data.get('amount') is not None:
            builder.amount(str(data['amount']))
        if data.get('purpose') is not None:
            purpose = str(data['purpose']).strip()
            if purpose.upper() == Purpose.BENE.code:
                builder.purpose(Purpose.BENE)
            else:
                builder.purpose(Purpose.custom(purpose))
        if data.get('remittance_reference'):
            builder.remittance(RemittanceReference(str(data['remittance_reference'])))
        elif data.get('remittance_text'):
            builder.remittance(RemittanceText(str(data['remittance_text'])))
        if data.get('information') is not None:
            builder.information(str(data['information']))

        return builder


_DICT_KEYS = frozenset({
    'version',
    'character_set',
    'identification',
    'bic',
    'beneficiary',
    'iban',
    'amount',
    'purpose',
    'remittance_reference',
    'remittance_text',
    'information',
})
