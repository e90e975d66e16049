"""
Intel HEX Checksum Calculations
===============================

This module provides the checksum and number formatting helpers used to
render Intel HEX records.

Record Checksum
---------------
Every record ends with a one-byte checksum chosen so that the unsigned sum
of all record bytes (count, address high, address low, type, payload and
the checksum itself) is zero modulo 256:

    checksum = (256 - (sum mod 256)) mod 256

This is the 8-bit two's complement of the sum. A sum that is an exact
multiple of 256 gives a checksum of 0, never 256.

The end-of-file record has count 0, address 0 and type 1, so its checksum
is always 0xFF.

Reference
---------
- Intel Hexadecimal Object File Format Specification, Rev A (1988)
"""

from typing import Iterable


# Width masks for the fixed-size fields of a record
BYTE_MASK = 0xFF
WORD_MASK = 0xFFFF


def twos_complement(value: int) -> int:
    """
    Return the 8-bit two's complement of a value.

    Only the low 8 bits of the value take part, so any running sum can be
    passed in directly.

    Args:
        value: Non-negative integer (typically a byte sum)

    Returns:
        Checksum byte (0x00 - 0xFF)

    Example:
        >>> twos_complement(0x01)
        255
        >>> twos_complement(0x100)
        0
    """
    return (~(value & BYTE_MASK) + 1) & BYTE_MASK


def calculate_record_checksum(
    byte_count: int,
    address: int,
    record_type: int,
    payload: Iterable[int] = b"",
) -> int:
    """
    Calculate the checksum byte for a record.

    The address contributes its low and high bytes separately. Bits above
    the 16-bit address field are ignored, matching what a loader sees.

    Args:
        byte_count: Number of payload bytes in the record
        address: Load address of the first payload byte
        record_type: Record type byte (0x00 data, 0x01 end of file)
        payload: The payload bytes

    Returns:
        Checksum byte (0x00 - 0xFF)

    Example:
        >>> calculate_record_checksum(0, 0x0000, 0x01)
        255
    """
    total = byte_count & BYTE_MASK
    total += address & BYTE_MASK
    total += (address >> 8) & BYTE_MASK
    total += record_type & BYTE_MASK
    for byte in payload:
        total += byte
    return twos_complement(total)


def verify_record_bytes(record_bytes: Iterable[int]) -> bool:
    """
    Check that a record's bytes, checksum included, sum to zero mod 256.

    Args:
        record_bytes: Count, address, type, payload and checksum bytes

    Returns:
        True if the checksum is consistent
    """
    return sum(record_bytes) & BYTE_MASK == 0


def dec2hex(value: int, padding: int = 2) -> str:
    """
    Format an integer as uppercase hex with leading zeros.

    The field is padded to at least `padding` digits but never truncated,
    so a value wider than the field makes the field wider.

    Args:
        value: Non-negative integer
        padding: Minimum number of hex digits (default: 2)

    Returns:
        Uppercase hex string

    Example:
        >>> dec2hex(10)
        '0A'
        >>> dec2hex(0xC000, 4)
        'C000'
    """
    return f"{value:0{padding}X}"


def hex2dec(text: str) -> int:
    """
    Convert a string of hex digits to an integer.

    Raises:
        ValueError: If the text is not valid hex
    """
    return int(text, 16)
