"""
Data models for EPC QR payloads.

This module exports the field types and the validated Payload.
"""

from .fields import (
    ServiceTag,
    Version,
    CharacterSet,
    Identification,
    Purpose,
    Remittance,
    RemittanceReference,
    RemittanceText,
)
from .payload import Payload

__all__ = [
    'ServiceTag',
    'Version',
    'CharacterSet',
    'Identification',
    'Purpose',
    'Remittance',
    'RemittanceReference',
    'RemittanceText',
    'Payload',
]
