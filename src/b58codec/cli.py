"""Command line interface for encoding and decoding Base58 data.

The whole file or standard input is read before it is processed, so this
does not work on infinite (or very large) streams.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import codec
from . import errors


def _logger() -> logging.Logger:
    log = logging.getLogger("b58codec")
    if not log.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        log.addHandler(console_handler)
    return log


def _parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog, description="Encode or decode Base58 data."
    )
    parser.add_argument(
        "-d",
        "--decode",
        action="store_true",
        help="Treat the given input as base58-encoded and decode it.",
    )
    parser.add_argument(
        "files", nargs="*", metavar="FILE", help="Read from FILE instead of stdin."
    )
    return parser


def read_input(files: List[str], stdin) -> bytes:
    """Read the complete input from a single file or from ``stdin``.

    :param files: The positional arguments, at most one file name
    :param stdin: Binary stream used when no file is given
    """
    if len(files) > 1:
        raise errors.UsageError(len(files))

    if not files:
        try:
            return stdin.read()
        except OSError as e:
            raise errors.InputError("stdin", e) from e

    try:
        with open(files[0], "rb") as f:
            return f.read()
    except OSError as e:
        raise errors.InputError(files[0], e) from e


def run(args: argparse.Namespace, stdin, stdout, log: logging.Logger) -> None:
    src = read_input(args.files, stdin)
    log.debug(f"read {len(src)} bytes, decode={args.decode}")

    if args.decode:
        text = src.decode("ascii", errors="replace")
        data, ok = codec.decode(text)
        if not ok:
            raise errors.InvalidCharacterError(text)
        stdout.write(data)
    else:
        stdout.write(codec.encode(src).encode("ascii"))
    stdout.flush()


def main(argv: Optional[List[str]] = None, stdin=None, stdout=None) -> int:
    """Entry point of the ``b58codec`` command.

    :param argv: Arguments without the program name, defaults to ``sys.argv[1:]``
    :param stdin: Binary input stream, defaults to ``sys.stdin.buffer``
    :param stdout: Binary output stream, defaults to ``sys.stdout.buffer``
    :return: The process exit status
    """
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    log = _logger()
    args = _parser("b58codec").parse_args(argv)

    try:
        run(args, stdin=stdin, stdout=stdout, log=log)
    except errors.B58CodecError as e:
        log.error(str(e))
        return 1
    return 0
