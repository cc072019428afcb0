"""The DIROPQLZ container: a compressed, base85-armoured diropql program.

Layout after base85 decoding: the payload length, the length modulo 8 and
the Burrows-Wheeler index as decimal text, then the payload bytes. Readers
take the first 8 bytes as a fixed header of 3, 1 and 4 digits.
"""

from __future__ import annotations

import base64
import re
from dataclasses import dataclass

from .bwt import SENTINEL, bwt_encode
from .interpreter import read_diropql, write_diropql
from .mtf import mtf_decode, mtf_encode
from .rle import rle_decode, rle_encode

MAGIC = "DIROPQLZ"
ALPHABET = "diropql"
HEADER_SIZE = 8

_DIGITS = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class DpqlzMeta:
    """Metadata stored in front of a compressed program."""

    mlen: int
    moffset: int
    bwt_idx: int


def _bwt_index(program: str) -> int:
    """Row of ``program`` among the sorted rotations of ``program + NUL``."""
    if SENTINEL in program:
        return bwt_encode(program)[1]
    # With a unique smallest sentinel, rotation order equals suffix order.
    message = program + SENTINEL
    return sum(1 for start in range(1, len(message)) if message[start:] < message)


def _compress(program: str) -> tuple[list[int], int]:
    index = _bwt_index(program)
    return rle_encode(mtf_encode(program, ALPHABET)), index


def _decompress(data: list[int]) -> str:
    return mtf_decode(rle_decode(data), ALPHABET)


def write_diropqlz(text: str) -> str:
    """Encode ``text`` as a diropql program and pack it into a container."""
    compressed, index = _compress(write_diropql(text))
    meta = DpqlzMeta(
        mlen=len(compressed),
        moffset=len(compressed) % 8,
        bwt_idx=index,
    )
    return write_meta(meta, compressed)


def write_meta(meta: DpqlzMeta, program: list[int]) -> str:
    """Prefix ``program`` with its metadata, base85-encode it and add the magic."""
    payload = bytes(program)
    body = payload.decode("utf-8")
    header = f"{len(payload)}{meta.moffset}{meta.bwt_idx}"
    armoured = base64.b85encode((header + body).encode("utf-8"))
    return MAGIC + armoured.decode("ascii")


def _parse_unsigned(field: bytes, name: str) -> int:
    text = field.decode("ascii")
    if not _DIGITS.fullmatch(text):
        raise ValueError(f"invalid {name} field {text!r}")
    return int(text)


def read_meta(program: str) -> tuple[DpqlzMeta, list[int]]:
    """Split a base85 container body into its metadata and payload bytes."""
    raw = base64.b85decode(program)
    raw.decode("utf-8")
    if len(raw) < HEADER_SIZE:
        raise ValueError(f"container holds {len(raw)} bytes, fewer than the header")

    meta = DpqlzMeta(
        mlen=_parse_unsigned(raw[:3], "length"),
        moffset=_parse_unsigned(raw[3:4], "offset"),
        bwt_idx=_parse_unsigned(raw[4:8], "index"),
    )
    return meta, list(raw[HEADER_SIZE:])


def read_diropqlz(program: str) -> str:
    """Unpack a container, run the diropql program inside and return its output."""
    if len(program) < len(MAGIC):
        raise ValueError("container is shorter than its magic string")
    _meta, data = read_meta(program[len(MAGIC):])
    return read_diropql(_decompress(data))