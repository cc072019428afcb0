"""Move-to-front coding over a fixed alphabet."""

from __future__ import annotations

from collections.abc import Iterable


def mtf_encode(text: str, alphabet: str) -> list[int]:
    """Encode ``text`` as move-to-front indices into ``alphabet``.

    A character missing from the alphabet is coded as index 0.
    Indices are stored as bytes, so they wrap above 255.
    """
    symbols = list(alphabet)
    if text and not symbols:
        raise ValueError("alphabet must not be empty")

    output = []
    for char in text:
        index = symbols.index(char) if char in symbols else 0
        output.append(index & 0xFF)
        symbols.insert(0, symbols.pop(index))
    return output


def mtf_decode(data: Iterable[int], alphabet: str) -> str:
    """Decode move-to-front indices back into text over ``alphabet``."""
    symbols = list(alphabet)
    output = []
    for index in data:
        if not 0 <= index < len(symbols):
            raise ValueError(f"index {index} is outside an alphabet of {len(symbols)} symbols")
        char = symbols.pop(index)
        output.append(char)
        symbols.insert(0, char)
    return "".join(output)