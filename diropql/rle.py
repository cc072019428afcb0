"""Zero-run length coding with bijective base-2 run counts.

Runs of zeros become bits (0 and 1, least significant first); every other
value is shifted up by two so it cannot collide with the run bits.
"""

from __future__ import annotations

from collections.abc import Iterable


def _run_bits(count: int) -> list[int]:
    """Bits of ``count + 1`` without the leading one, least significant first."""
    binary = bin(count + 1)[3:]
    return [int(bit) for bit in reversed(binary)]


def _run_count(bits: list[int]) -> int:
    value = 1
    for bit in reversed(bits):
        value = (value << 1) | bit
    return value - 1


def rle_encode(data: Iterable[int]) -> list[int]:
    """Encode runs of zeros in ``data``; other values are stored plus two."""
    output: list[int] = []
    zeros = 0
    for value in data:
        if value == 0:
            zeros += 1
            continue
        output.extend(_run_bits(zeros))
        zeros = 0
        output.append((value + 2) & 0xFF)
    output.extend(_run_bits(zeros))
    return output


def rle_decode(data: Iterable[int]) -> list[int]:
    """Invert :func:`rle_encode`."""
    output: list[int] = []
    bits: list[int] = []
    for value in data:
        if value in (0, 1):
            bits.append(value)
            continue
        output.extend([0] * _run_count(bits))
        bits.clear()
        output.append((value - 2) & 0xFF)
    output.extend([0] * _run_count(bits))
    return output