"""
Check-digit validation for IBANs and RF creditor references.

Both identifiers use the ISO 7064 MOD 97-10 scheme:
1. Move the first four characters to the end
2. Replace every letter with a two-digit number (A=10 ... Z=35)
3. Interpret the result as an integer
4. The identifier is valid if that integer mod 97 equals 1

The integer for a 34 character IBAN does not fit in 64 bits, so the
remainder is computed digit by digit instead of building the number.
"""

import string

UPPERCASE = frozenset(string.ascii_uppercase)
DIGITS = frozenset(string.digits)
ALPHANUMERIC = UPPERCASE | DIGITS

IBAN_MIN_LENGTH = 5
IBAN_MAX_LENGTH = 34
RF_MIN_LENGTH = 5
RF_MAX_LENGTH = 25
RF_PREFIX = "RF"


def rearranged_digits(identifier: str) -> str:
    """
    Build the numeric string used by the mod-97 check.

    Args:
        identifier: Uppercase alphanumeric identifier, at least 5 characters

    Returns:
        Digit string, e.g. "RF45G72UUR" -> "1672303027271545"
    """
    rearranged = identifier[4:] + identifier[:4]
    return "".join(
        ch if ch in DIGITS else str(ord(ch) - ord('A') + 10)
        for ch in rearranged
    )


def mod97(digits: str) -> int:
    """Return int(digits) % 97 without building the full integer."""
    remainder = 0
    for ch in digits:
        remainder = (remainder * 10 + ord(ch) - ord('0')) % 97
    return remainder


def _passes_mod97(identifier: str) -> bool:
    return mod97(rearranged_digits(identifier)) == 1


def is_valid_iban(identifier: str) -> bool:
    """
    Check an IBAN against ISO 13616.

    Whitespace anywhere in the input is ignored, so the usual printed
    form "DE90 8306 5408 0004 1042 42" is accepted.

    Args:
        identifier: IBAN as entered by the user

    Returns:
        True if the IBAN is well-formed and its check digits match

    Example:
        >>> is_valid_iban("DE90 8306 5408 0004 1042 42")
        True
        >>> is_valid_iban("DE90 8306 5408 0004 1042 43")
        False
    """
    if not isinstance(identifier, str):
        return False

    iban = "".join(identifier.split())

    if not IBAN_MIN_LENGTH <= len(iban) <= IBAN_MAX_LENGTH:
        return False
    if not all(ch in UPPERCASE for ch in iban[:2]):
        return False
    if not all(ch in ALPHANUMERIC for ch in iban[2:]):
        return False

    return _passes_mod97(iban)


def is_valid_rf_reference(identifier: str) -> bool:
    """
    Check a structured creditor reference against ISO 11649.

    Unlike is_valid_iban, whitespace is not removed: the reference must
    already be in its compact electronic form.

    Example:
        >>> is_valid_rf_reference("RF45G72UUR")
        True
        >>> is_valid_rf_reference("RF55G72UUR")
        False
    """
    if not isinstance(identifier, str):
        return False

    if not RF_MIN_LENGTH <= len(identifier) <= RF_MAX_LENGTH:
        return False
    if not identifier.startswith(RF_PREFIX):
        return False
    if not all(ch in ALPHANUMERIC for ch in identifier[2:]):
        return False

    return _passes_mod97(identifier)
