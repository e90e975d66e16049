#!/usr/bin/env python3
"""
Intel HEX Encoder Demo
======================

This script demonstrates how to use the encoder to:
1. Build records from a byte image
2. Render them as HEX file text
3. Inspect the record stream as bytes and bits

Usage:
    source .venv/bin/activate
    python examples/encode_demo.py
"""

from ihex_encoder import HexEncoder


def main():
    # ==========================================================================
    # 1. Build records for a small image loaded at $C000
    # ==========================================================================
    message = b"Wow! Did you really go through all this trouble to read this string"
    encoder = HexEncoder(message, byte_count=16, start_address=0xC000)
    encoder.build_records()

    # ==========================================================================
    # 2. Render as a HEX file body
    # ==========================================================================
    print("HEX file:")
    print(encoder.render_text(), end="")

    # ==========================================================================
    # 3. Derived views of the record stream
    # ==========================================================================
    raw = encoder.to_byte_array()
    print(f"\nRecord stream: {len(raw)} bytes")
    print(raw[:16].hex(" ").upper(), "...")

    print("\nFirst record as bits:")
    print(encoder.to_binary_string(pretty=True)[:11 * 21])


if __name__ == "__main__":
    main()
