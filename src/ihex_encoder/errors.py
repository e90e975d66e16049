"""
Intel HEX Encoder Error Hierarchy
=================================

This module defines the exception hierarchy for the encoder package.
All exceptions inherit from IntelHexError, allowing callers to catch all
encoder-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
IntelHexError (base)
├── EncoderConfigError - invalid row size, base address or input values
└── HexFormatError - rendered text cannot be reinterpreted as bytes

Address overflow (records running past 0xFFFF) is deliberately not an
error: the encoder has no extended-address records to fall back on, so it
logs a warning and keeps formatting the wider address.
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class IntelHexError(Exception):
    """
    Base exception for all encoder errors.

    Example:
        try:
            encoder = HexEncoder(data, byte_count=0)
        except IntelHexError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Encoder Exceptions
# =============================================================================

class EncoderConfigError(IntelHexError):
    """
    Invalid encoder configuration.

    Raised when a HexEncoder is constructed with:
    - a row size (byte_count) smaller than 1
    - a negative start address
    - input values that do not fit in an unsigned byte

    Attributes:
        parameter: Name of the offending parameter (optional)
        value: The rejected value (optional)
    """

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        value: object = None,
    ):
        self.parameter = parameter
        self.value = value
        super().__init__(message)


class HexFormatError(IntelHexError):
    """
    Rendered record text does not split into whole record bytes.

    This only happens when an address has outgrown its 4-digit field,
    so a record is longer than its count field says.
    """
    pass
