"""
Command-line interface for transpace.

Encodes a namespace into Minecraft translation placeholders, or decodes
placeholders back into the namespace text:

    $ transpace ael-in-image
    %1$s%39220526$s%982942949$s
    $ transpace '%1$s%39220526$s%982942949$s'
    ael-in-image
"""
from __future__ import annotations

import argparse
import sys

from ..config import Settings, load_settings
from ..errors import InvalidCharacter, InvalidEncoding
from ..logging import get_logger, setup_logging

VERSION = "0.2.0"

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_INTERNAL_ERROR = 3

log = get_logger("cli")


def cmd_encode(args: argparse.Namespace, settings: Settings) -> int:
    """Encode text into placeholder tokens."""
    from ..engine.sequence import encode_all

    sequence = encode_all(args.string)
    print(f"{settings.sentinel}{sequence}")
    return EXIT_OK


def cmd_decode(args: argparse.Namespace, settings: Settings) -> int:
    """Decode placeholder tokens back into text."""
    from ..engine.sequence import decode_all_lossy, render_text

    sequence = decode_all_lossy(args.string)
    print(render_text(sequence, strict=False))
    return EXIT_OK


COMMANDS = {
    "encode": cmd_encode,
    "decode": cmd_decode,
}

ERROR_HINTS = {
    InvalidCharacter: "namespace contains characters outside of [A-Za-z0-9 _.-]",
    InvalidEncoding: "translation string is malformed or holds too large an integer",
}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="transpace",
        description="transpace - Minecraft Translate Namespace Encoder",
        epilog="Without --encode/--decode, strings starting with '%' are decoded.",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=VERSION,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    behavior = parser.add_mutually_exclusive_group()
    behavior.add_argument(
        "--encode",
        dest="mode", action="store_const", const="encode",
        help="Encode namespace into translation string",
    )
    behavior.add_argument(
        "--decode",
        dest="mode", action="store_const", const="decode",
        help="Decode translation string into namespace",
    )

    parser.add_argument("string", nargs="?", help="Namespace text or translation string")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    setup_logging(
        "DEBUG" if args.verbose else settings.log_level,
        log_file=settings.log_file,
        json_format=settings.log_json,
    )

    if args.string is None:
        parser.print_help()
        return EXIT_INVALID_INPUT
    if not args.string:
        return EXIT_OK

    mode = args.mode or ("decode" if args.string.startswith("%") else "encode")
    log.debug("running %s on %d chars", mode, len(args.string))

    try:
        return COMMANDS[mode](args, settings)
    except (InvalidCharacter, InvalidEncoding) as exc:
        print(f"error: {ERROR_HINTS[type(exc)]}: {exc}", file=sys.stderr)
        print(f"See `{parser.prog} --help` for detailed usage information", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except Exception:
        log.exception("%s failed unexpectedly", mode)
        print(f"error: internal failure during {mode}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
