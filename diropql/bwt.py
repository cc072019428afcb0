"""Burrows-Wheeler transform over text terminated by a NUL sentinel."""

from __future__ import annotations

SENTINEL = "\0"


def bwt_encode(text: str) -> tuple[str, int]:
    """Transform ``text`` and return the last column and the original row index.

    A NUL sentinel is appended before the rotations are sorted.
    """
    message = text + SENTINEL
    rotations = sorted(message[i:] + message[:i] for i in range(len(message)))
    transformed = "".join(rotation[-1] for rotation in rotations)
    index = rotations.index(message)
    return transformed, index


def bwt_decode(text: str, index: int) -> str:
    """Invert :func:`bwt_encode`.

    The result includes the trailing sentinel that the encoder appended.
    """
    table = sorted((char, position) for position, char in enumerate(text))
    if text and not 0 <= index < len(table):
        raise ValueError(f"index {index} is outside 0..{len(table) - 1}")

    decoded = []
    row = index
    for _ in text:
        char, row = table[row]
        decoded.append(char)
    return "".join(decoded)