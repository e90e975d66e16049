"""
Intel HEX Record Definitions
============================

This module defines the record types and the immutable record structure
used by the encoder.

Record Format
-------------
Each record is one line of text:

    [:]BBAAAATTDD...DDCC

    :        Optional record header (start code)
    BB       Payload byte count (2 hex digits)
    AAAA     Load address of the first payload byte (4 hex digits, big-endian)
    TT       Record type (2 hex digits)
    DD...DD  Payload bytes (2 hex digits each, absent for end of file)
    CC       Checksum (2 hex digits)

All digits are uppercase and there are no separators between fields.

Record Types
------------
- $00: Data
- $01: End of file (always rendered as 00000001FF)

Extended segment/linear address and start address records ($02-$05) are
not produced, so addresses are limited to 16 bits.
"""

from dataclasses import dataclass
from enum import IntEnum

from ihex_encoder.ihex.checksum import (
    BYTE_MASK,
    calculate_record_checksum,
    dec2hex,
)


# Start code placed in front of each record when headers are enabled
RECORD_HEADER = ":"

# The end-of-file record never varies: count 0, address 0, type 1, checksum FF
EOF_RECORD_TEXT = "00000001FF"


# =============================================================================
# Enumeration Types
# =============================================================================

class RecordType(IntEnum):
    """Record type identifiers produced by the encoder."""
    DATA = 0x00
    END_OF_FILE = 0x01

    def get_name(self) -> str:
        """Get a human-readable name for the record type."""
        names = {
            RecordType.DATA: "Data",
            RecordType.END_OF_FILE: "End Of File",
        }
        return names[self]


# =============================================================================
# Record Structure
# =============================================================================

@dataclass(frozen=True)
class HexRecord:
    """
    A single Intel HEX record.

    Records are immutable once created. The encoder keeps only their
    rendered text, but the structured form is useful for inspection
    and tests.

    Attributes:
        record_type: Type of the record (data or end of file)
        address: Load address of the first payload byte
        payload: Payload bytes (empty for end of file)
    """
    record_type: RecordType
    address: int = 0
    payload: bytes = b""

    @classmethod
    def data(cls, address: int, payload: bytes) -> "HexRecord":
        """Create a data record for `payload` loaded at `address`."""
        return cls(RecordType.DATA, address, bytes(payload))

    @classmethod
    def end_of_file(cls) -> "HexRecord":
        """Create the end-of-file record."""
        return cls(RecordType.END_OF_FILE)

    @property
    def byte_count(self) -> int:
        """Number of payload bytes."""
        return len(self.payload)

    @property
    def checksum(self) -> int:
        """Two's-complement checksum over count, address, type and payload."""
        return calculate_record_checksum(
            self.byte_count, self.address, self.record_type, self.payload
        )

    def to_text(self, use_record_header: bool = True) -> str:
        """
        Render the record as a line of text (without line separator).

        Args:
            use_record_header: Prefix the record with ':'

        Returns:
            The uppercase record string

        Example:
            >>> HexRecord.end_of_file().to_text()
            ':00000001FF'
        """
        header = RECORD_HEADER if use_record_header else ""
        return (
            header
            + dec2hex(self.byte_count)
            + dec2hex(self.address, 4)
            + dec2hex(self.record_type)
            + self.payload.hex().upper()
            + dec2hex(self.checksum)
        )

    def to_bytes(self) -> bytes:
        """
        Get the bytes a loader reads for this record.

        Returns:
            count, address high, address low, type, payload, checksum
        """
        return (
            bytes([
                self.byte_count & BYTE_MASK,
                (self.address >> 8) & BYTE_MASK,
                self.address & BYTE_MASK,
                self.record_type,
            ])
            + self.payload
            + bytes([self.checksum])
        )
