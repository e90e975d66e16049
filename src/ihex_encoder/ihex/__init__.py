"""
Intel HEX Encoding
==================

This module turns flat byte images into Intel HEX text, the
line-oriented, checksum-protected format accepted by EPROM programmers,
emulators and bootloaders.

This module provides:
- **HexEncoder**: Build records from a byte image and render them
- **encode**: One-call helper returning the HEX file body
- **HexRecord / RecordType**: The record structure and type identifiers
- **Checksum utilities**: Two's-complement record checksums and hex helpers

Quick Start
-----------
    >>> from ihex_encoder.ihex import HexEncoder
    >>> encoder = HexEncoder(firmware, byte_count=16, start_address=0xC000)
    >>> encoder.build_records()
    >>> Path("firmware.hex").write_text(encoder.render_text())

Only data ($00) and end-of-file ($01) records are produced.
"""

# =============================================================================
# Public API Exports
# =============================================================================

from ihex_encoder.ihex.records import (
    RecordType,
    HexRecord,
    RECORD_HEADER,
    EOF_RECORD_TEXT,
)

from ihex_encoder.ihex.checksum import (
    twos_complement,
    calculate_record_checksum,
    verify_record_bytes,
    dec2hex,
    hex2dec,
)

from ihex_encoder.ihex.encoder import (
    HexEncoder,
    encode,
)

__all__ = [
    # Records
    "RecordType",
    "HexRecord",
    "RECORD_HEADER",
    "EOF_RECORD_TEXT",
    # Checksum utilities
    "twos_complement",
    "calculate_record_checksum",
    "verify_record_bytes",
    "dec2hex",
    "hex2dec",
    # Encoder
    "HexEncoder",
    "encode",
]
