"""Huffman trees, codebooks and canonical Huffman codes over byte symbols."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum


class HNodeType(Enum):
    """Kind of a node in a Huffman tree."""

    PARENT = "parent"
    LEAF = "leaf"


@dataclass
class HNode:
    """A node of a Huffman tree."""

    value: int
    kind: HNodeType
    freq: int
    left: HNode | None = None
    right: HNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.kind is HNodeType.LEAF


def _rank(node: HNode) -> tuple[int, bool]:
    # Lower frequency ranks higher; at equal frequency a parent ranks higher.
    return (-node.freq, node.kind is HNodeType.PARENT)


def _queue_key(node: HNode, serial: int) -> tuple[int, int, int]:
    return (node.freq, 0 if node.kind is HNodeType.PARENT else 1, serial)


def build_huffman_tree(text: Iterable[int]) -> HNode:
    """Build a Huffman tree from the byte frequencies of ``text``."""
    counts = Counter(text)
    if not counts:
        raise ValueError("cannot build a Huffman tree from empty input")
    bad = [value for value in counts if not 0 <= value <= 255]
    if bad:
        raise ValueError(f"symbols must be bytes, got {bad[0]}")

    serial = itertools.count()
    leaves = sorted(counts.items(), key=lambda item: (item[1], item[0]))
    queue = []
    for value, freq in leaves:
        node = HNode(value, HNodeType.LEAF, freq)
        queue.append((*_queue_key(node, next(serial)), node))
    heapq.heapify(queue)

    while len(queue) > 1:
        first = heapq.heappop(queue)[-1]
        second = heapq.heappop(queue)[-1]
        left, right = (first, second) if _rank(first) < _rank(second) else (second, first)
        parent = HNode(0, HNodeType.PARENT, first.freq + second.freq, left, right)
        heapq.heappush(queue, (*_queue_key(parent, next(serial)), parent))

    return queue[0][-1]


def build_codebook(tree: HNode) -> dict[int, str]:
    """Map each leaf symbol to its codeword: '1' for left, '0' for right."""
    codebook: dict[int, str] = {}

    def walk(node: HNode, prefix: str) -> None:
        if node.is_leaf:
            codebook[node.value] = prefix
            return
        if node.left is not None:
            walk(node.left, prefix + "1")
        if node.right is not None:
            walk(node.right, prefix + "0")

    walk(tree, "")
    return codebook


def encode_huffman(numbers: Iterable[int], codebook: Mapping[int, str]) -> list[int]:
    """Encode symbols into a list of bits; unknown symbols raise KeyError."""
    bits: list[int] = []
    for number in numbers:
        for char in codebook[number]:
            if char not in "01":
                raise ValueError(f"invalid codeword {codebook[number]!r}")
            bits.append(int(char))
    return bits


def decode_huffman(bits: Iterable[int], codebook: Mapping[int, str]) -> list[int]:
    """Decode bits with ``codebook``; any bit other than 1 counts as 0."""
    by_codeword: dict[str, int] = {}
    for value, codeword in codebook.items():
        by_codeword.setdefault(codeword, value)

    decoded: list[int] = []
    current = ""
    for bit in bits:
        current += "1" if bit == 1 else "0"
        if current in by_codeword:
            decoded.append(by_codeword[current])
            current = ""
    return decoded


def build_canonical_codebook(codebook: Mapping[int, str]) -> list[tuple[int, str]]:
    """Derive canonical codewords, ordered by length then original codeword."""
    if not codebook:
        raise ValueError("codebook must not be empty")
    ordered = sorted(codebook.items(), key=lambda item: (len(item[1]), item[1]))

    first_value, first_codeword = ordered[0]
    length = len(first_codeword)
    canonical = [(first_value, "0" * length)]
    code = 0
    for value, codeword in ordered[1:]:
        code += 1
        current = len(codeword)
        if current > length:
            code <<= current - length
            length = current
        else:
            code &= (1 << length) - 1
        canonical.append((value, format(code, f"0{current}b")))
    return canonical


def _first_codewords(canonical_codebook: Sequence[tuple[int, str]]) -> dict[int, str]:
    table: dict[int, str] = {}
    for value, codeword in canonical_codebook:
        table.setdefault(value, codeword)
    return table


def canonical_encode_bits(
    message: Iterable[int], canonical_codebook: Sequence[tuple[int, str]]
) -> list[int]:
    """Encode with a canonical codebook; symbols not in it are skipped."""
    table = _first_codewords(canonical_codebook)
    bits: list[int] = []
    for number in message:
        codeword = table.get(number)
        if codeword is not None:
            bits.extend(0 if char == "0" else 1 for char in codeword)
    return bits


def canon_length(canonical_codebook: Sequence[tuple[int, str]]) -> list[int]:
    """Codeword length for each of the symbols 0 to 9."""
    lengths = [0] * 10
    for value, codeword in canonical_codebook:
        if not 0 <= value < len(lengths):
            raise IndexError(f"symbol {value} is outside 0..{len(lengths) - 1}")
        lengths[value] = len(codeword)
    return lengths


def canonical_decode_bits(
    data: Iterable[int], canonical_codebook: Sequence[tuple[int, str]]
) -> list[int]:
    """Decode bits produced by :func:`canonical_encode_bits`."""
    by_codeword: dict[str, int] = {}
    for value, codeword in canonical_codebook:
        by_codeword.setdefault(codeword, value)

    decoded: list[int] = []
    current = ""
    for bit in data:
        current += str(bit)
        if current in by_codeword:
            decoded.append(by_codeword[current])
            current = ""
    return decoded