"""
Command-line interface.

Usage:
    srbtr [--no-legacy-dj] [--encoding ENC] [-v] PATH

Prints two lines: the text as read, then its Cyrillic transliteration.
Nothing is printed unless the whole file was read successfully.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from srbtr import __version__
from srbtr.cyrillic import Transcoder, collect

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1


def _detach_stdout() -> None:
    """Point stdout at devnull so the flush at interpreter exit cannot fail."""
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        # stdout without a file descriptor; nothing to redirect
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="srbtr",
        description="Tool for transliterating Serbian Latin to Serbian Cyrillic text",
    )
    parser.add_argument("path", help="path to source file")
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="encoding of the source file (default: %(default)s)",
    )
    parser.add_argument(
        "--no-legacy-dj",
        dest="legacy_dj",
        action="store_false",
        help='do not read "dj" as "đ"',
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        with open(args.path, "rb") as f:
            transcoder = Transcoder.from_stream(
                f, encoding=args.encoding, legacy_dj=args.legacy_dj
            )
            result = collect(transcoder)
    except (OSError, LookupError) as err:
        # SourceError, open() failures and unknown --encoding values
        logger.error("%s: %s", args.path, err)
        return EXIT_IO_ERROR

    logger.debug("%s: %d letters", args.path, len(result.letters))
    try:
        sys.stdout.write(f"{result.original}\n{result.cyrillic}\n")
        sys.stdout.flush()
    except (OSError, UnicodeEncodeError) as err:
        # closed pipe or a stdout encoding without Cyrillic
        logger.error("cannot write output: %s", err)
        if isinstance(err, BrokenPipeError):
            _detach_stdout()
        return EXIT_IO_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
