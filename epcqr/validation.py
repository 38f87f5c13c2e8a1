"""
Validation rules shared by PayloadBuilder.build() and Payload itself.

The rules run in a fixed order and stop at the first violation, so a
given set of fields always maps to exactly one PayloadError.
"""

import string
from decimal import Decimal, InvalidOperation
from typing import Optional

from .checksum import is_valid_iban, is_valid_rf_reference
from .errors import PayloadError
from .models.fields import (
    CharacterSet,
    Identification,
    Purpose,
    Remittance,
    RemittanceReference,
    RemittanceText,
    Version,
    REMITTANCE_TEXT_MAX_LENGTH,
)

AMOUNT_MAX_INTEGER_DIGITS = 9
AMOUNT_FRACTION_DIGITS = 2
_AMOUNT_CHARS = frozenset(string.digits + ".")


def is_valid_amount(amount: str) -> bool:
    """
    Check an amount string such as "10.00".

    Rules:
    - Only digits and a single "."
    - Integer part of 1-9 digits, no leading zero except "0" itself
    - Exactly 2 fractional digits
    - Not zero (0.01 - 999999999.99)

    Examples:
        >>> is_valid_amount("999999999.99")
        True
        >>> is_valid_amount("0.00")
        False
        >>> is_valid_amount("1.000")
        False
    """
    if not isinstance(amount, str) or not amount:
        return False
    if any(ch not in _AMOUNT_CHARS for ch in amount):
        return False
    if amount.count('.') != 1:
        return False

    integer_part, fraction_part = amount.split('.')

    if not 1 <= len(integer_part) <= AMOUNT_MAX_INTEGER_DIGITS:
        return False
    if len(integer_part) > 1 and integer_part.startswith('0'):
        return False
    if len(fraction_part) != AMOUNT_FRACTION_DIGITS:
        return False

    try:
        value = Decimal(amount)
    except InvalidOperation:
        return False

    return value != 0


def is_valid_purpose(purpose: Purpose) -> bool:
    return isinstance(purpose, Purpose) and purpose.is_well_formed


def remittance_error(remittance: Remittance) -> Optional[PayloadError]:
    """Return the rule a remittance value breaks, or None if it is fine."""
    if isinstance(remittance, RemittanceReference):
        if not is_valid_rf_reference(remittance.reference):
            return PayloadError.INVALID_REMITTANCE_REFERENCE
        return None

    if isinstance(remittance, RemittanceText):
        if not isinstance(remittance.text, str) or len(remittance.text) > REMITTANCE_TEXT_MAX_LENGTH:
            return PayloadError.REMITTANCE_TEXT_TOO_LONG
        return None

    # Neither variant: there is no text to measure, so the reference rule applies
    return PayloadError.INVALID_REMITTANCE_REFERENCE


def first_violation(
    version: Optional[Version],
    character_set: Optional[CharacterSet],
    identification: Optional[Identification],
    bic: Optional[str],
    beneficiary: Optional[str],
    iban: Optional[str],
    amount: Optional[str] = None,
    purpose: Optional[Purpose] = None,
    remittance: Optional[Remittance] = None,
) -> Optional[PayloadError]:
    """
    Run every payload rule in order.

    Args:
        version .. remittance: Field values, None meaning "not set"

    Returns:
        The first PayloadError encountered, or None if all rules pass
    """
    if not isinstance(version, Version):
        return PayloadError.MISSING_VERSION
    if not isinstance(character_set, CharacterSet):
        return PayloadError.MISSING_CHARACTER_SET
    if not isinstance(identification, Identification):
        return PayloadError.MISSING_IDENTIFICATION
    if not bic and version != Version.V2:
        return PayloadError.BIC_REQUIRED_FOR_VERSION
    if not beneficiary:
        return PayloadError.MISSING_BENEFICIARY
    if not iban:
        return PayloadError.MISSING_IBAN
    if not is_valid_iban(iban):
        return PayloadError.INVALID_IBAN
    if amount is not None and not is_valid_amount(amount):
        return PayloadError.INVALID_AMOUNT
    if purpose is not None and not is_valid_purpose(purpose):
        return PayloadError.INVALID_PURPOSE
    if remittance is not None:
        return remittance_error(remittance)

    return None
