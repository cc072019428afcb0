"""Write, run and compress programs in the diropql esoteric language.

Modules: interpreter, container, bwt, mtf, rle, huffman and cli.
"""

__version__ = "0.1.0"