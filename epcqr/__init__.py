"""
EPC QR payload generation for SEPA credit transfers.

Builds the text payload of an EPC QR code ("GiroCode") and validates
IBANs and RF creditor references.
"""

from .checksum import is_valid_iban, is_valid_rf_reference
from .errors import PayloadError, PayloadValidationError, PayloadBuildError
from .models import (
    ServiceTag,
    Version,
    CharacterSet,
    Identification,
    Purpose,
    Remittance,
    RemittanceReference,
    RemittanceText,
    Payload,
)
from .builder import PayloadBuilder, BuildResult
from .formatter import format_payload

__all__ = [
    'is_valid_iban',
    'is_valid_rf_reference',
    'PayloadError',
    'PayloadValidationError',
    'PayloadBuildError',
    'ServiceTag',
    'Version',
    'CharacterSet',
    'Identification',
    'Purpose',
    'Remittance',
    'RemittanceReference',
    'RemittanceText',
    'Payload',
    'PayloadBuilder',
    'BuildResult',
    'format_payload',
]
