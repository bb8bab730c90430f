from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from huffman_text.errors import DeserializationError

# 7 keeps every packed character in the ASCII range (bit-compatible wire).
# 8 is the widened layout; both are plain code points, so any str storage works.
SUPPORTED_CHUNK_BITS: tuple[int, ...] = (7, 8)
DEFAULT_CHUNK_BITS = 7


@dataclass(frozen=True, slots=True)
class BitStreamCodec:
    """Packs a bit sequence into characters, ``chunk_bits`` bits per character, MSB-first.

    Padding always happens: a payload that is already aligned still gets a full
    chunk of zero bits, so the padding count is in ``1..chunk_bits``.
    """

    chunk_bits: int = DEFAULT_CHUNK_BITS

    def __post_init__(self) -> None:
        if self.chunk_bits not in SUPPORTED_CHUNK_BITS:
            raise ValueError(
                f"unsupported chunk_bits: {self.chunk_bits} (expected one of {SUPPORTED_CHUNK_BITS})"
            )

    def pad(self, bits: Sequence[int]) -> tuple[list[int], int]:
        padding = self.chunk_bits - (len(bits) % self.chunk_bits)
        return list(bits) + [0] * padding, padding

    def pack(self, bits: Sequence[int]) -> tuple[str, int]:
        """bits -> (packed text, padding)"""
        padded, padding = self.pad(bits)
        out: list[str] = []
        value = 0
        count = 0
        for bit in padded:
            value = (value << 1) | (1 if bit else 0)
            count += 1
            if count == self.chunk_bits:
                out.append(chr(value))
                value = 0
                count = 0
        return "".join(out), padding

    def unpack(self, packed: str, padding: int) -> list[int]:
        """(packed text, padding) -> bits, padding removed"""
        if not 1 <= padding <= self.chunk_bits:
            raise DeserializationError(
                f"padding {padding} outside 1..{self.chunk_bits}"
            )

        limit = 1 << self.chunk_bits
        bits: list[int] = []
        for i, ch in enumerate(packed):
            value = ord(ch)
            if value >= limit:
                raise DeserializationError(
                    f"payload char {i} (U+{value:04X}) does not fit {self.chunk_bits} bits"
                )
            for shift in range(self.chunk_bits - 1, -1, -1):
                bits.append((value >> shift) & 1)

        if len(bits) < padding:
            raise DeserializationError(
                f"payload has {len(bits)} bits, fewer than padding {padding}"
            )
        if any(bits[-padding:]):
            raise DeserializationError("padding bits are not zero")
        del bits[-padding:]
        return bits
