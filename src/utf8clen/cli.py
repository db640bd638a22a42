"""Command-line interface for utf8clen."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import utf8clen
from utf8clen._utils import DEFAULT_MAX_BYTES, _validate_max_bytes
from utf8clen.outcome import Invalid, ParameterError, Valid

logger = logging.getLogger(__name__)


def _report(name: str, data: bytes, args: argparse.Namespace) -> bool:
    """Print the outcome for *data*; return False on a parameter error."""
    outcome = utf8clen.classify(data, args.offset)
    if isinstance(outcome, ParameterError):
        print(f"utf8clen: {name}: {outcome.reason}", file=sys.stderr)
        return False
    if args.json:
        print(json.dumps({"file": name, "offset": args.offset, **outcome.to_dict()}))
    elif args.minimal:
        print(f"{outcome.kind.value} {outcome.advance}")
    elif isinstance(outcome, Valid):
        print(
            f"{name}: valid {outcome.length}-byte character at offset {args.offset}"
        )
    elif isinstance(outcome, Invalid):
        print(
            f"{name}: illegal sequence of {outcome.length} byte(s) "
            f"at offset {args.offset}"
        )
    return True


def main(argv: list[str] | None = None) -> None:
    """Run the ``utf8clen`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Classify the UTF-8 character at a byte offset of files."
    )
    parser.add_argument("files", nargs="*", help="Files to examine")
    parser.add_argument(
        "-o",
        "--offset",
        type=int,
        default=0,
        help="Byte offset of the character to classify (default: 0)",
    )
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=DEFAULT_MAX_BYTES,
        help=f"Maximum number of bytes to read per input (default: {DEFAULT_MAX_BYTES})",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--minimal", action="store_true", help="Output only the kind and length"
    )
    output.add_argument("--json", action="store_true", help="Output one JSON object per input")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug messages to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"utf8clen {utf8clen.__version__}"
    )

    args = parser.parse_args(argv)

    try:
        _validate_max_bytes(args.max_bytes)
    except ValueError as e:
        parser.error(str(e))

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    failed = False
    if args.files:
        for filepath in args.files:
            try:
                with Path(filepath).open("rb") as f:
                    data = f.read(args.max_bytes)
            except OSError as e:
                print(f"utf8clen: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            logger.debug("read %d bytes from %s", len(data), filepath)
            if not _report(filepath, data, args):
                failed = True
    else:
        data = sys.stdin.buffer.read(args.max_bytes)
        logger.debug("read %d bytes from stdin", len(data))
        if not _report("stdin", data, args):
            failed = True

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
