# diropql

Tools for the diropql esoteric language and its compressed container
format, DIROPQLZ, together with the compression stages they are built
from: Burrows–Wheeler transform, move-to-front coding, zero-run length
coding and (canonical) Huffman coding.

The package has no dependencies outside the standard library.

## The language

A diropql program runs on a ring of 10,000 byte-sized memory cells
(`diropql.interpreter.MEMORY_SIZE`):

| Command | Effect                                                          |
|---------|-----------------------------------------------------------------|
| `l`     | move the memory pointer one cell left (wrapping)                |
| `r`     | move the memory pointer one cell right (wrapping)               |
| `i`     | increment the current cell (wrapping at 256)                    |
| `d`     | decrement the current cell (wrapping at 0)                      |
| `o`     | output the current cell as a character                          |
| `p`     | if the current cell is zero, jump past the matching `q`         |
| `q`     | if the current cell is non-zero, jump back to the matching `p`  |

Any other character is ignored. A jump that has no matching bracket
raises `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
diropql [MESSAGE]
```

Turns the message into a diropql program, runs it, packs the message
into a DIROPQLZ container and unpacks it again, printing each stage.
Without a message a built-in sample text is used. If the container
cannot be read back, an error is printed to standard error and the exit
status is 1.

## Library

### Programs

```python
from diropql.interpreter import write_diropql, read_diropql

program = write_diropql("Hi")
assert read_diropql(program) == "Hi"
```

`write_diropql(text)` produces `r` followed, for each character, by as
many `i` as its code, then `or`. Only the low byte of each character is
kept, so characters above code point 255 do not survive.
`read_diropql(program)` runs a program and returns what it printed.

### Containers

`diropql.container` packs a message into a DIROPQLZ container:

- `write_diropqlz(text)` writes the message as a diropql program,
  move-to-front codes it over the alphabet `"diropql"`, run-length codes
  the result and hands it to `write_meta`.
- `write_meta(meta, program)` writes the payload length, `meta.moffset`
  and `meta.bwt_idx` as decimal text, appends the payload, Base85-encodes
  the whole and prefixes the magic string `DIROPQLZ`.
- `read_meta(body)` Base85-decodes a container body (without the magic)
  and returns a `DpqlzMeta(mlen, moffset, bwt_idx)` and the payload bytes
  as a list of ints.
- `read_diropqlz(container)` strips the magic, reads the metadata,
  undoes the run-length and move-to-front coding and runs the resulting
  program, returning its output.

`read_meta` always reads the header as 3 digits of length, 1 digit of
offset and 4 digits of index, and the payload from byte 8 on. A container
therefore reads back correctly only when the payload is 100 to 999 bytes
long and the recorded index has exactly four digits; otherwise reading
either raises `ValueError` or returns the output of a misaligned payload.

```python
from diropql.container import read_diropqlz, write_diropqlz

message = "Kuromi is such a cute character. She is so me! " * 4
packed = write_diropqlz(message)
assert packed.startswith("DIROPQLZ")
print(read_diropqlz(packed))
```

### Compression stages

The building blocks are usable on their own:

- `diropql.bwt`: `bwt_encode(text)` appends a NUL sentinel and returns
  the last column of the sorted rotations and the row of the original;
  `bwt_decode(text, index)` inverts it, returning the text with its
  trailing sentinel.
- `diropql.mtf`: `mtf_encode(text, alphabet)` and
  `mtf_decode(data, alphabet)`. Characters missing from the alphabet are
  coded as index 0; decoding an index outside the alphabet raises
  `ValueError`.
- `diropql.rle`: `rle_encode(data)` and `rle_decode(data)`. Runs of
  zeros become bits (0 and 1) of the run length, other values are stored
  plus two, wrapping at 256.
- `diropql.huffman`: `HNode`, `HNodeType`, `build_huffman_tree`,
  `build_codebook` (`'1'` for a left branch, `'0'` for a right one),
  `encode_huffman`, `decode_huffman`, `build_canonical_codebook`,
  `canonical_encode_bits`, `canonical_decode_bits` and `canon_length`
  (codeword lengths for the symbols 0 to 9 only).

```python
from diropql.mtf import mtf_decode, mtf_encode
from diropql.rle import rle_decode, rle_encode

codes = mtf_encode("riiior", "diropql")
packed = rle_encode(codes)
assert mtf_decode(rle_decode(packed), "diropql") == "riiior"
```

## What it does not do

- The container records a Burrows–Wheeler index, but the payload itself
  is not Burrows–Wheeler transformed, and the index is not used when
  reading.
- Huffman coding is available as a separate module but is not applied
  to container payloads.
- The `mlen` and `moffset` header fields are read but not checked
  against the payload.