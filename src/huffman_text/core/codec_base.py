from __future__ import annotations

from abc import ABC, abstractmethod

from huffman_text.core.serializer import HuffmanEncoding


class Codec(ABC):
    """
    Minimal interface for text codecs.

    encode/decode work on the in-memory encoding (tree + unpadded bits); the
    wire text is produced separately by ``WireFormat``.
    """

    @abstractmethod
    def encode(self, text: str) -> HuffmanEncoding:
        raise NotImplementedError

    @abstractmethod
    def decode(self, encoding: HuffmanEncoding) -> str:
        raise NotImplementedError
