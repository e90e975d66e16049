"""
Intel HEX Encoder
=================

This module provides the HexEncoder class, which turns a flat byte
sequence into Intel HEX records.

Usage
-----
Encode a firmware image loaded at $C000:

    >>> from ihex_encoder.ihex import HexEncoder
    >>> encoder = HexEncoder(b"Wow! Did you rea", byte_count=16, start_address=0xC000)
    >>> encoder.build_records()
    [':10C00000576F77212044696420796F7520726561CC', ':00000001FF']
    >>> Path("image.hex").write_text(encoder.render_text())

Or in one call:

    >>> from ihex_encoder.ihex import encode
    >>> text = encode(firmware, byte_count=32, start_address=0x8000)

Derived Views
-------------
Besides the text form, the encoder can expose the record stream as raw
bytes (`to_byte_array`) or as a string of ones and zeros
(`to_binary_string`). Both views describe the transmitted records
(counts, addresses, types, payload and checksums), not the original input.

Limitations
-----------
Only data and end-of-file records are produced. Images that run past
address $FFFF are still encoded, but the address field outgrows its four
digits and no extended-address records are emitted; a warning is logged.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Union
import logging

from ihex_encoder.errors import EncoderConfigError, HexFormatError
from ihex_encoder.ihex.checksum import BYTE_MASK, WORD_MASK, hex2dec
from ihex_encoder.ihex.records import (
    EOF_RECORD_TEXT,
    RECORD_HEADER,
    HexRecord,
)

# Logger for this module
logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def _as_buffer(data: BytesLike) -> bytes:
    """
    Get an immutable byte buffer for the input.

    bytes objects are used as-is; anything else is copied once so the
    caller keeps ownership of mutable buffers.

    Raises:
        EncoderConfigError: If the input is not a sequence of byte values
    """
    if isinstance(data, bytes):
        return data
    # bytes(n) would silently create n zero bytes
    if isinstance(data, (int, str)):
        raise EncoderConfigError(
            f"Input must be a byte sequence, got {type(data).__name__}",
            parameter="data",
            value=data,
        )
    try:
        return bytes(data)
    except (TypeError, ValueError) as e:
        raise EncoderConfigError(
            f"Input must contain only byte values (0-255): {e}",
            parameter="data",
        ) from e


# =============================================================================
# Hex Encoder
# =============================================================================

@dataclass
class HexEncoder:
    """
    Builds Intel HEX records from a byte sequence.

    The input is read through a sliding window and never modified, so the
    same encoder can rebuild its records any number of times.

    Attributes:
        data: The bytes to encode
        byte_count: Maximum payload bytes per record (usually 16 or 32)
        start_address: Load address of the first byte
        use_record_header: Prefix every record with ':'
        records: Rendered record strings, filled by build_records()

    Example:
        >>> encoder = HexEncoder(bytes(range(20)), byte_count=16)
        >>> len(encoder.build_records())
        3
    """
    data: BytesLike = field(repr=False)

    # Payload bytes per record
    byte_count: int = 16

    # Address of the first input byte
    start_address: int = 0

    # Whether records start with ':'
    use_record_header: bool = True

    records: list[str] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        if isinstance(self.byte_count, bool) or not isinstance(self.byte_count, int):
            raise EncoderConfigError(
                f"Invalid record size: {self.byte_count!r} (must be an integer)",
                parameter="byte_count",
                value=self.byte_count,
            )
        # The count field is two hex digits
        if not 1 <= self.byte_count <= BYTE_MASK:
            raise EncoderConfigError(
                f"Invalid record size: {self.byte_count} (must be 1-255)",
                parameter="byte_count",
                value=self.byte_count,
            )
        if isinstance(self.start_address, bool) or not isinstance(self.start_address, int):
            raise EncoderConfigError(
                f"Invalid start address: {self.start_address!r} (must be an integer)",
                parameter="start_address",
                value=self.start_address,
            )
        if self.start_address < 0:
            raise EncoderConfigError(
                f"Invalid start address: {self.start_address} (must not be negative)",
                parameter="start_address",
                value=self.start_address,
            )
        self.data = _as_buffer(self.data)

    # =========================================================================
    # Record Construction
    # =========================================================================

    def build_records(self) -> list[str]:
        """
        Build the record list from the input.

        The input is split into rows of `byte_count` bytes (the last row may
        be shorter). Each row becomes a data record whose address is the
        start address plus the bytes already encoded. The end-of-file record
        is always appended, so empty input yields just that record.

        Any previously built records are discarded first.

        Returns:
            The rendered records, in transmission order
        """
        data = self.data
        records: list[str] = []

        offset = 0
        while offset < len(data):
            payload = data[offset:offset + self.byte_count]
            record = HexRecord.data(self.start_address + offset, payload)
            records.append(record.to_text(self.use_record_header))
            offset += len(payload)

        header = RECORD_HEADER if self.use_record_header else ""
        records.append(header + EOF_RECORD_TEXT)

        self._check_address_range()
        self.records = records

        logger.debug(
            f"Built {len(records) - 1} data records for {len(data)} bytes "
            f"at ${self.start_address:04X}"
        )
        return self.records

    def _check_address_range(self) -> None:
        """Warn when the image runs past the 16-bit address space."""
        if not self.data:
            return
        last_address = self.start_address + len(self.data) - 1
        if last_address > WORD_MASK:
            logger.warning(
                f"Image ends at ${last_address:X}, beyond the 16-bit address "
                f"space; no extended address records are emitted"
            )

    @property
    def data_record_count(self) -> int:
        """Number of data records in the built list (end of file excluded)."""
        return max(len(self.records) - 1, 0)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[str]:
        return iter(self.records)

    # =========================================================================
    # Derived Views
    # =========================================================================

    def render_text(self, line_separator: str = "\n") -> str:
        """
        Join the built records into a HEX file body.

        Every record, the last one included, is followed by
        `line_separator`. Returns an empty string if no records have
        been built.

        Example:
            :10C00000576F77212044696420796F7520726561CC
            :10C010006C6C7920676F207468726F756768206137
            :00000001FF
        """
        return "".join(record + line_separator for record in self.records)

    def __str__(self) -> str:
        return self.render_text()

    def to_byte_array(self) -> bytes:
        """
        Get the record stream as raw bytes.

        Record headers are dropped and every pair of hex digits becomes one
        byte, so the result holds each record's count, address, type,
        payload and checksum bytes back to back.

        Returns:
            The transmitted record bytes

        Raises:
            HexFormatError: If a record's fields no longer line up with byte
                boundaries (an address that outgrew its four digits)
        """
        raw = bytearray()
        for index, record in enumerate(self.records):
            digits = record.removeprefix(RECORD_HEADER)
            # count, address (2), type, checksum plus the payload
            expected = 2 * (hex2dec(digits[:2]) + 5)
            if len(digits) != expected:
                raise HexFormatError(
                    f"Record {index} has {len(digits)} hex digits, expected "
                    f"{expected}; check that every address fits in 16 bits"
                )
            raw += bytes.fromhex(digits)
        return bytes(raw)

    def to_binary_string(self, pretty: bool = False) -> str:
        """
        Get the record stream as a string of '1' and '0' characters.

        Bits are written most significant first. With `pretty`, a space
        separates the two nibbles of each byte and two spaces follow
        every byte.

        Example:
            >>> encoder = HexEncoder(b"")
            >>> _ = encoder.build_records()
            >>> encoder.to_binary_string(pretty=True)[:11]
            '0000 0000  '
        """
        parts = []
        for byte in self.to_byte_array():
            bits = f"{byte:08b}"
            if pretty:
                parts.append(f"{bits[:4]} {bits[4:]}  ")
            else:
                parts.append(bits)
        return "".join(parts)


# =============================================================================
# Convenience Function
# =============================================================================

def encode(
    data: BytesLike,
    byte_count: int = 16,
    start_address: int = 0,
    use_record_header: bool = True,
    line_separator: str = "\n",
) -> str:
    """
    Encode bytes to Intel HEX text in one call.

    Args:
        data: The bytes to encode
        byte_count: Maximum payload bytes per record
        start_address: Load address of the first byte
        use_record_header: Prefix every record with ':'
        line_separator: Text placed after every record

    Returns:
        The HEX file body

    Example:
        >>> encode(b"", start_address=0x8000)
        ':00000001FF\\n'
    """
    encoder = HexEncoder(
        data,
        byte_count=byte_count,
        start_address=start_address,
        use_record_header=use_record_header,
    )
    encoder.build_records()
    return encoder.render_text(line_separator)
