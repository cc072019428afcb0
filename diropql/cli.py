"""Command line demonstration of the diropql and DIROPQLZ encodings."""

from __future__ import annotations

import argparse
import sys

from .container import read_diropqlz, write_diropqlz
from .interpreter import read_diropql, write_diropql

DEFAULT_MESSAGE = (
    "Kuromi is such a cute character. She is so me! "
    "Kuromi is such a cute character. She is so me! "
    "Kuromi is such a cute character. She is so me! "
    "Kuromi is such a cute character. She is so me! "
    "Kuromi is such a cute character."
)


def main(argv: list[str] | None = None) -> int:
    """Encode a message both ways, decode it again and print every stage."""
    parser = argparse.ArgumentParser(
        prog="diropql",
        description="Encode a message as a diropql program and a DIROPQLZ container.",
    )
    parser.add_argument("message", nargs="?", default=DEFAULT_MESSAGE)
    args = parser.parse_args(argv)

    program = write_diropql(args.message)
    print(f"Encoded Diropql program: {program}")
    print(f"Decoded Diropql program: {read_diropql(program)}")

    container = write_diropqlz(args.message)
    print(f"Encoded Diropqlz program: {container}")
    try:
        decoded = read_diropqlz(container)
    except ValueError as error:
        print(f"diropql: cannot decode container: {error}", file=sys.stderr)
        return 1
    print(f"Decoded Diropqlz program: {decoded}")
    return 0