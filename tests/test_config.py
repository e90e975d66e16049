"""
Tests for Encoder Configuration
===============================

These tests verify default settings, environment overrides and the
shared address parser.
"""

import pytest

from ihex_encoder.config import (
    EncoderConfig,
    get_default_config,
    parse_address,
    set_default_config,
)
from ihex_encoder.ihex import HexEncoder


ENV_VARS = ("IHEX_BYTE_COUNT", "IHEX_START_ADDRESS", "IHEX_RECORD_HEADER")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without encoder environment overrides."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


# =============================================================================
# Address Parsing
# =============================================================================

class TestParseAddress:
    """Tests for parse_address()."""

    def test_hex_prefix(self):
        """Should accept 0x-prefixed hex."""
        assert parse_address("0xC000") == 0xC000
        assert parse_address("0XFF") == 0xFF

    def test_dollar_prefix(self):
        """Should accept $-prefixed hex."""
        assert parse_address("$8000") == 0x8000

    def test_decimal(self):
        """Should accept plain decimal."""
        assert parse_address("49152") == 0xC000
        assert parse_address(" 16 ") == 16

    def test_invalid(self):
        """Should raise ValueError for garbage."""
        with pytest.raises(ValueError):
            parse_address("C000")
        with pytest.raises(ValueError):
            parse_address("$G000")


# =============================================================================
# EncoderConfig
# =============================================================================

class TestEncoderConfig:
    """Tests for EncoderConfig defaults and factories."""

    def test_defaults(self):
        """Test default settings."""
        config = EncoderConfig()
        assert config.byte_count == 16
        assert config.start_address == 0
        assert config.use_record_header is True
        assert config.line_separator == "\n"

    def test_from_env_without_overrides(self):
        """No environment variables gives the defaults."""
        assert EncoderConfig.from_env() == EncoderConfig()

    def test_from_env_overrides(self, monkeypatch):
        """Environment variables override the defaults."""
        monkeypatch.setenv("IHEX_BYTE_COUNT", "32")
        monkeypatch.setenv("IHEX_START_ADDRESS", "$C000")
        monkeypatch.setenv("IHEX_RECORD_HEADER", "no")

        config = EncoderConfig.from_env()
        assert config.byte_count == 32
        assert config.start_address == 0xC000
        assert config.use_record_header is False

    def test_from_env_ignores_invalid(self, monkeypatch):
        """Unparsable values keep the defaults."""
        monkeypatch.setenv("IHEX_BYTE_COUNT", "lots")
        monkeypatch.setenv("IHEX_START_ADDRESS", "somewhere")
        monkeypatch.setenv("IHEX_RECORD_HEADER", "maybe")

        assert EncoderConfig.from_env() == EncoderConfig()

    @pytest.mark.parametrize("address", ["0x10000", "$1FFFF", "70000", "-1"])
    def test_from_env_ignores_out_of_range_address(self, monkeypatch, address):
        """Addresses outside 16 bits keep the default."""
        monkeypatch.setenv("IHEX_START_ADDRESS", address)
        assert EncoderConfig.from_env().start_address == 0

    def test_from_env_accepts_top_of_memory(self, monkeypatch):
        """$FFFF is the highest accepted address."""
        monkeypatch.setenv("IHEX_START_ADDRESS", "0xFFFF")
        assert EncoderConfig.from_env().start_address == 0xFFFF

    def test_create_encoder(self):
        """create_encoder passes the settings through."""
        config = EncoderConfig(byte_count=8, start_address=0x100, use_record_header=False)
        encoder = config.create_encoder(b"\x01\x02")

        assert isinstance(encoder, HexEncoder)
        assert encoder.byte_count == 8
        assert encoder.start_address == 0x100
        assert encoder.use_record_header is False


class TestDefaultConfig:
    """Tests for the process-wide default configuration."""

    def test_created_from_env(self, monkeypatch):
        """First access reads the environment."""
        monkeypatch.setenv("IHEX_BYTE_COUNT", "24")
        assert get_default_config().byte_count == 24

    def test_cached(self):
        """The same instance is returned on later calls."""
        assert get_default_config() is get_default_config()

    def test_override(self):
        """set_default_config replaces the default."""
        config = EncoderConfig(byte_count=4)
        set_default_config(config)
        assert get_default_config() is config
