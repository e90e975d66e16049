"""
Intel HEX Encoder Command-Line Interface
========================================

This package provides the command-line tool for the encoder:

- **ihexenc**: Encode binary files as Intel HEX and inspect the result

The tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["ihexenc"]
