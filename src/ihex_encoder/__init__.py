"""
Intel HEX Encoder - Binary Images to Intel HEX Text
===================================================

This package converts flat binary images (ROMs, firmware, memory dumps)
into the Intel HEX format: a line-oriented, checksum-protected text
representation accepted by EPROM programmers, emulators and bootloaders.

Main Components
---------------
- **ihex**: Record construction and rendering
    HexEncoder splits an image into checksummed data records and appends
    the end-of-file record

- **config**: Encoder defaults and environment overrides

- **cli**: The `ihexenc` command-line tool

Quick Start
-----------
Encode an image:
    >>> from ihex_encoder import HexEncoder
    >>> encoder = HexEncoder(Path("rom.bin").read_bytes(), start_address=0xC000)
    >>> encoder.build_records()
    >>> Path("rom.hex").write_text(encoder.render_text())

Or use the command-line tool:
    $ ihexenc encode rom.bin -o rom.hex -a 0xC000

Reference Documentation
-----------------------
- Intel Hexadecimal Object File Format Specification, Rev A (1988)

Version History
---------------
1.0.0 - Initial release with data/end-of-file records and byte/bit views
"""

__version__ = "1.0.0"
__author__ = "Intel HEX Encoder Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from ihex_encoder.errors import (
    IntelHexError,
    EncoderConfigError,
    HexFormatError,
)

from ihex_encoder.ihex import (
    HexEncoder,
    HexRecord,
    RecordType,
    encode,
    twos_complement,
    calculate_record_checksum,
)

from ihex_encoder.config import (
    EncoderConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Encoder
    "HexEncoder",
    "HexRecord",
    "RecordType",
    "encode",
    "twos_complement",
    "calculate_record_checksum",
    # Configuration
    "EncoderConfig",
    "get_default_config",
    "set_default_config",
    # Exception hierarchy
    "IntelHexError",
    "EncoderConfigError",
    "HexFormatError",
]
