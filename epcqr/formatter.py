"""
Serialization of a Payload into the EPC QR text format.

The format is line based and positional: every field has a fixed line,
absent optional fields are written as empty lines, and the last line
(information) has no trailing newline.
"""

import re
from typing import List, Optional

from .models.payload import Payload

LINE_SEPARATOR = "\n"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Field order, one line each
PAYLOAD_LINES = (
    "service_tag",
    "version",
    "character_set",
    "identification",
    "bic",
    "beneficiary",
    "iban",
    "amount",
    "purpose",
    "remittance_reference",
    "remittance_text",
    "information",
)


def _line(value: Optional[object]) -> str:
    """
    Render a field value, None becomes an empty line.

    Line breaks inside a value become a single space so every field
    stays on its own line.
    """
    if value is None:
        return ""
    return _LINE_BREAK.sub(" ", str(value))


def payload_lines(payload: Payload) -> List[str]:
    """
    Return the payload fields as lines in wire order.

    Args:
        payload: A validated payload

    Returns:
        List with one string per line in PAYLOAD_LINES order
    """
    return [
        _line(payload.service_tag),
        _line(payload.version),
        _line(payload.character_set),
        _line(payload.identification),
        _line(payload.bic),
        _line(payload.beneficiary),
        _line(payload.iban),
        _line(payload.amount),
        _line(payload.purpose),
        _line(payload.remittance_reference),
        _line(payload.remittance_text),
        _line(payload.information),
    ]


def format_payload(payload: Payload) -> str:
    """
    Serialize a payload for embedding in a QR code.

    Example:
        >>> print(format_payload(payload))
        BCD
        001
        1
        SCT
        GENODEF1SLR
        Codeberg e.V.
        DE90830654080004104242
        10.00
        <BLANKLINE>
        <BLANKLINE>
        for the good cause
        <BLANKLINE>
    """
    return LINE_SEPARATOR.join(payload_lines(payload))
