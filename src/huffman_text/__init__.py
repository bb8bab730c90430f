"""huffman-text: lossless text compression with Huffman prefix codes."""

from huffman_text.compressor import compress, decompress, inspect
from huffman_text.errors import CompressionError, ErrorKind

__all__ = ["CompressionError", "ErrorKind", "compress", "decompress", "inspect"]

__version__ = "0.1.0"
