"""
ihexenc - Intel HEX Encoder Command-Line Interface
==================================================

This module implements the command-line interface for the encoder. It
reads binary images and writes them as Intel HEX text, or shows the
encoded record stream in byte or bit form.

Commands
--------
- **encode**: Convert a binary file to Intel HEX
- **dump**: Show the encoded records as hex bytes or a binary string

Usage Examples
--------------
Encode a ROM image loaded at $C000:
    $ ihexenc encode rom.bin -o rom.hex -a 0xC000

Use 32-byte records and DOS line endings:
    $ ihexenc encode rom.bin -o rom.hex -r 32 --crlf

Write to stdout without ':' headers:
    $ ihexenc encode rom.bin --no-header

Show the record stream as bits:
    $ ihexenc dump rom.bin -f binary --pretty

Defaults for record size, address and header can also be set with the
IHEX_BYTE_COUNT, IHEX_START_ADDRESS and IHEX_RECORD_HEADER environment
variables.
"""

from pathlib import Path
from typing import Optional

import click

from ihex_encoder import __version__
from ihex_encoder.config import EncoderConfig, get_default_config, parse_address
from ihex_encoder.cli.errors import handle_cli_exception


# =============================================================================
# Address Parameter Type
# =============================================================================

class AddressType(click.ParamType):
    """
    Click parameter type for 16-bit load addresses.

    Accepts: 0xC000, $C000 or decimal (49152)
    """
    name = "address"

    def convert(self, value, param: Optional[click.Parameter],
                ctx: Optional[click.Context]) -> int:
        """Convert string to an address."""
        if isinstance(value, int):
            return value

        try:
            address = parse_address(value)
        except ValueError:
            self.fail(f"Invalid address '{value}'", param, ctx)

        if not 0 <= address <= 0xFFFF:
            self.fail(
                f"Address '{value}' out of range (must be $0000-$FFFF)",
                param, ctx
            )
        return address


ADDRESS = AddressType()


def _resolve_config(
    record_size: Optional[int],
    address: Optional[int],
    header: Optional[bool],
) -> EncoderConfig:
    """Overlay command-line options on the default configuration."""
    defaults = get_default_config()
    return EncoderConfig(
        byte_count=record_size if record_size is not None else defaults.byte_count,
        start_address=address if address is not None else defaults.start_address,
        use_record_header=header if header is not None else defaults.use_record_header,
        line_separator=defaults.line_separator,
    )


# Options shared by every command that encodes
def encoding_options(func):
    func = click.option(
        "--header/--no-header",
        default=None,
        help="Prefix each record with ':' (default: on)",
    )(func)
    func = click.option(
        "-a", "--address",
        type=ADDRESS,
        default=None,
        help="Load address of the first byte (hex with 0x or $ prefix, or decimal). Default: 0",
    )(func)
    func = click.option(
        "-r", "--record-size",
        type=click.IntRange(min=1, max=255),
        default=None,
        help="Payload bytes per record (default: 16)",
    )(func)
    return func


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.version_option(__version__, "--version", "-V", prog_name="ihexenc")
def main() -> None:
    """
    Intel HEX encoder for binary images.

    \b
    Commands:
      encode    Convert a binary file to Intel HEX
      dump      Show encoded records as bytes or bits

    \b
    Examples:
      ihexenc encode rom.bin -o rom.hex -a 0xC000
      ihexenc dump rom.bin -f binary --pretty
    """
    pass


# =============================================================================
# Encode Command
# =============================================================================

@main.command("encode")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output HEX file path (default: stdout)",
)
@encoding_options
@click.option(
    "--crlf",
    is_flag=True,
    help="End records with CR LF instead of LF",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
def cmd_encode(
    input_file: Path,
    output: Optional[Path],
    record_size: Optional[int],
    address: Optional[int],
    header: Optional[bool],
    crlf: bool,
    verbose: bool,
) -> None:
    """
    Convert a binary file to Intel HEX.

    INPUT_FILE is read as raw bytes and encoded as data records followed
    by an end-of-file record.

    \b
    Examples:
      ihexenc encode rom.bin -o rom.hex
      ihexenc encode rom.bin -o rom.hex -r 32 -a 0x8000
    """
    try:
        config = _resolve_config(record_size, address, header)
        data = input_file.read_bytes()

        encoder = config.create_encoder(data)
        encoder.build_records()

        line_separator = "\r\n" if crlf else config.line_separator
        text = encoder.render_text(line_separator)

        if output is None:
            click.echo(text, nl=False)
        else:
            output.write_bytes(text.encode("ascii"))

        summary = (
            f"{len(data)} bytes at ${config.start_address:04X} -> "
            f"{encoder.data_record_count} data records"
        )
        if output is not None:
            click.echo(f"Created {output} ({summary})")
        elif verbose:
            click.echo(summary, err=True)

        if verbose:
            end_address = config.start_address + max(len(data) - 1, 0)
            click.echo(f"  Record size: {config.byte_count} bytes", err=True)
            click.echo(f"  Address range: ${config.start_address:04X}-${end_address:04X}", err=True)
            click.echo(f"  Record header: {'on' if config.use_record_header else 'off'}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose, error_type="Encoding")


# =============================================================================
# Dump Command
# =============================================================================

@main.command("dump")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-f", "--format",
    "output_format",
    type=click.Choice(["bytes", "binary"]),
    default="bytes",
    help="bytes: space-separated hex bytes; binary: string of 1s and 0s (default: bytes)",
)
@click.option(
    "--pretty",
    is_flag=True,
    help="Space out nibbles and bytes in binary output",
)
@encoding_options
def cmd_dump(
    input_file: Path,
    output_format: str,
    pretty: bool,
    record_size: Optional[int],
    address: Optional[int],
    header: Optional[bool],
) -> None:
    """
    Show the encoded record stream of a binary file.

    The output describes the records as transmitted (count, address,
    type, payload and checksum bytes), not the original file contents.

    \b
    Examples:
      ihexenc dump rom.bin
      ihexenc dump rom.bin -f binary --pretty
    """
    try:
        config = _resolve_config(record_size, address, header)
        encoder = config.create_encoder(input_file.read_bytes())
        encoder.build_records()

        if output_format == "binary":
            click.echo(encoder.to_binary_string(pretty=pretty))
        else:
            click.echo(encoder.to_byte_array().hex(" ").upper())

    except Exception as e:
        handle_cli_exception(e, error_type="Encoding")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
