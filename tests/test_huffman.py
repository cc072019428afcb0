from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from diropql.huffman import (
    HNodeType,
    build_canonical_codebook,
    build_codebook,
    build_huffman_tree,
    canon_length,
    canonical_decode_bits,
    canonical_encode_bits,
    decode_huffman,
    encode_huffman,
)

MESSAGE = [5, 5, 6, 3, 3, 3, 1, 6, 6]

messages = st.lists(st.integers(min_value=0, max_value=9), min_size=1, max_size=80)


def _is_prefix_free(codewords):
    return not any(
        a != b and b.startswith(a) for a in codewords for b in codewords
    )


def test_tree_root_counts_all_symbols():
    tree = build_huffman_tree(MESSAGE)
    assert tree.freq == len(MESSAGE)
    assert tree.kind is HNodeType.PARENT


def test_codebook_covers_symbols():
    codebook = build_codebook(build_huffman_tree(MESSAGE))
    assert set(codebook) == set(MESSAGE)
    assert _is_prefix_free(list(codebook.values()))


def test_codebook_kraft_equality():
    codebook = build_codebook(build_huffman_tree(MESSAGE))
    assert sum(Fraction(1, 2 ** len(c)) for c in codebook.values()) == 1


def test_single_symbol_tree():
    tree = build_huffman_tree([4, 4, 4])
    assert tree.is_leaf
    assert build_codebook(tree) == {4: ""}


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        build_huffman_tree([])


def test_non_byte_symbol_rejected():
    with pytest.raises(ValueError):
        build_huffman_tree([300])


def test_source_example_round_trips():
    codebook = build_codebook(build_huffman_tree(MESSAGE))
    canonical = build_canonical_codebook(codebook)
    assert decode_huffman(encode_huffman(MESSAGE, codebook), codebook) == MESSAGE
    bits = canonical_encode_bits(MESSAGE, canonical)
    assert canonical_decode_bits(bits, canonical) == MESSAGE


def test_canonical_worked_example():
    codebook = {1: "1", 2: "01", 3: "00"}
    assert build_canonical_codebook(codebook) == [(1, "0"), (3, "10"), (2, "11")]


def test_canonical_empty_rejected():
    with pytest.raises(ValueError):
        build_canonical_codebook({})


def test_canon_length():
    lengths = canon_length([(1, "0"), (2, "10")])
    assert lengths[1] == 1
    assert lengths[2] == 2
    assert len(lengths) == 10
    assert sum(lengths) == 3


def test_canon_length_symbol_out_of_range():
    with pytest.raises(IndexError):
        canon_length([(10, "0")])


def test_encode_unknown_symbol_raises():
    with pytest.raises(KeyError):
        encode_huffman([7], {1: "0"})


def test_canonical_encode_skips_unknown_symbol():
    canonical = [(1, "0"), (2, "1")]
    assert canonical_encode_bits([7, 2], canonical) == canonical_encode_bits([2], canonical)


@given(messages)
def test_huffman_round_trip(message):
    codebook = build_codebook(build_huffman_tree(message))
    if len(codebook) > 1:
        assert decode_huffman(encode_huffman(message, codebook), codebook) == message
    else:
        assert encode_huffman(message, codebook) == []


@given(messages)
def test_canonical_preserves_lengths(message):
    codebook = build_codebook(build_huffman_tree(message))
    canonical = build_canonical_codebook(codebook)
    assert {value: len(code) for value, code in canonical} == {
        value: len(code) for value, code in codebook.items()
    }
    assert _is_prefix_free([code for _, code in canonical])


@given(messages)
def test_canonical_codes_ascending(message):
    canonical = build_canonical_codebook(build_codebook(build_huffman_tree(message)))
    keys = [(len(code), code) for _, code in canonical]
    assert keys == sorted(keys)


@given(st.lists(st.integers(min_value=0, max_value=9), min_size=2, max_size=80).filter(
    lambda m: len(set(m)) > 1
))
def test_canonical_round_trip(message):
    canonical = build_canonical_codebook(build_codebook(build_huffman_tree(message)))
    bits = canonical_encode_bits(message, canonical)
    assert canonical_decode_bits(bits, canonical) == message
    assert sum(canon_length(canonical)[v] for v in message) == len(bits)