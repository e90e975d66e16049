"""
Encoder Configuration
=====================

Default encoding settings. Configuration can come from:
- Default values (defined here)
- Environment variables
- Explicit arguments (command-line options override both)

Environment variables (all optional):
    IHEX_BYTE_COUNT: Payload bytes per record (integer)
    IHEX_START_ADDRESS: Load address ($C000, 0xC000 or 49152), 16 bits
    IHEX_RECORD_HEADER: Prefix records with ':' (1/0, true/false, yes/no)
"""

from dataclasses import dataclass
from typing import Optional
import os

from ihex_encoder.ihex.encoder import BytesLike, HexEncoder


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def parse_address(text: str) -> int:
    """
    Parse an address written as hex ($C000 or 0xC000) or decimal.

    Raises:
        ValueError: If the text is not a valid number
    """
    text = text.strip()
    if text.lower().startswith("0x"):
        return int(text, 16)
    if text.startswith("$"):
        return int(text[1:], 16)
    return int(text)


@dataclass
class EncoderConfig:
    """
    Settings used to create HexEncoder instances.

    Attributes:
        byte_count: Payload bytes per record (default: 16)
        start_address: Load address of the first byte (default: 0)
        use_record_header: Prefix records with ':' (default: True)
        line_separator: Text placed after each record (default: newline)
    """
    byte_count: int = 16
    start_address: int = 0
    use_record_header: bool = True
    line_separator: str = "\n"

    @classmethod
    def from_env(cls) -> "EncoderConfig":
        """
        Create an EncoderConfig from environment variables.

        Unparsable values, and addresses outside $0000-$FFFF, are ignored
        and the default is kept.
        """
        config = cls()

        if byte_count := os.environ.get("IHEX_BYTE_COUNT"):
            try:
                config.byte_count = int(byte_count)
            except ValueError:
                pass

        if start_address := os.environ.get("IHEX_START_ADDRESS"):
            try:
                address = parse_address(start_address)
            except ValueError:
                address = None
            if address is not None and 0 <= address <= 0xFFFF:
                config.start_address = address

        if header := os.environ.get("IHEX_RECORD_HEADER"):
            if header.lower() in _TRUE_VALUES:
                config.use_record_header = True
            elif header.lower() in _FALSE_VALUES:
                config.use_record_header = False

        return config

    def create_encoder(self, data: BytesLike) -> HexEncoder:
        """Create a HexEncoder for `data` using these settings."""
        return HexEncoder(
            data,
            byte_count=self.byte_count,
            start_address=self.start_address,
            use_record_header=self.use_record_header,
        )


# =============================================================================
# Default Configuration Instance
# =============================================================================

_default_config: Optional[EncoderConfig] = None


def get_default_config() -> EncoderConfig:
    """
    Get the default encoder configuration.

    Created from environment variables on first access.
    """
    global _default_config
    if _default_config is None:
        _default_config = EncoderConfig.from_env()
    return _default_config


def set_default_config(config: Optional[EncoderConfig]) -> None:
    """
    Set the default encoder configuration.

    Pass None to re-read the environment on next access.
    """
    global _default_config
    _default_config = config
