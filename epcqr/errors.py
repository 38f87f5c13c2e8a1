"""
Error types for payload construction.

Validation failures are plain values (PayloadError) returned by the
builder. The exception classes are only raised where a caller asks for
an exception: constructing a Payload directly or unwrapping a failed
BuildResult.
"""

from enum import Enum


class PayloadError(Enum):
    """One member per validation rule, in the order the rules are checked."""

    MISSING_VERSION = "Version missing"
    MISSING_CHARACTER_SET = "CharacterSet missing"
    MISSING_IDENTIFICATION = "Identification missing"
    BIC_REQUIRED_FOR_VERSION = "BIC is missing but Version is not V2"
    MISSING_BENEFICIARY = "Beneficiary missing"
    MISSING_IBAN = "IBAN missing"
    INVALID_IBAN = "Invalid IBAN"
    INVALID_AMOUNT = "Invalid amount"
    INVALID_PURPOSE = "Invalid Purpose"
    INVALID_REMITTANCE_REFERENCE = "Invalid Remittance::Reference"
    REMITTANCE_TEXT_TOO_LONG = "Remittance::Text max len of 140 exceeded"

    @property
    def message(self) -> str:
        return self.value


class PayloadValidationError(ValueError):
    """Raised when a Payload is constructed with fields that break a rule."""

    def __init__(self, error: PayloadError):
        super().__init__(error.message)
        self.error = error


class PayloadBuildError(Exception):
    """Raised by BuildResult.unwrap() when the build failed."""

    def __init__(self, error: PayloadError):
        super().__init__(error.message)
        self.error = error
