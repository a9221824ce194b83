from dataclasses import dataclass
from typing import Self

from pngchunk.png.exceptions import (
    InvalidCharacterException,
    InvalidChunkTypeException,
    InvalidLengthException,
)

CHUNK_TYPE_SIZE = 4

## Chunk naming conventions
# Every property is bit 5 (the ASCII case bit) of one of the four bytes:
# 0 - Ancillary bit: 0 (uppercase) = critical, 1 (lowercase) = ancillary
# 1 - Private bit: 0 (uppercase) = public, 1 (lowercase) = private
# 2 - Reserved bit: must be 0 (uppercase) in this version of PNG
# 3 - Safe-to-copy bit: 0 (uppercase) = unsafe to copy, 1 (lowercase) = safe
PROPERTY_BIT = 0b0010_0000


def _is_ascii_letter(byte: int) -> bool:
    return 65 <= byte <= 90 or 97 <= byte <= 122


@dataclass(frozen=True)
class ChunkType:
    ctype: bytes

    def __post_init__(self):
        # Only the shape is checked here, letters and the reserved bit are up to the constructors
        if not isinstance(self.ctype, (bytes, bytearray, memoryview)):
            raise InvalidChunkTypeException(
                f"Chunk type must be bytes, got {type(self.ctype).__name__}"
            )

        object.__setattr__(self, "ctype", bytes(self.ctype))
        if len(self.ctype) != CHUNK_TYPE_SIZE:
            raise InvalidChunkTypeException(
                f"Chunk type must be {CHUNK_TYPE_SIZE} bytes long, got {len(self.ctype)}"
            )

    @classmethod
    def from_bytes(cls, value: bytes) -> Self:
        """
        Strict constructor used when decoding chunks: the code must consist of
        4 ASCII letters and have its reserved bit unset.
        """

        chunk_type = cls(bytes(value))
        if not chunk_type.is_valid():
            raise InvalidChunkTypeException(f"Invalid chunk type: {value!r}")

        return chunk_type

    @classmethod
    def from_str(cls, value: str) -> Self:
        """
        Builds a chunk type from its textual code.

        Only the length and the letters are checked here, so a code with the
        reserved bit set (e.g. "Rust") is accepted and reports `is_valid()` as False.
        """

        if len(value) != CHUNK_TYPE_SIZE:
            raise InvalidLengthException(
                f"Chunk type must be {CHUNK_TYPE_SIZE} characters long, got {len(value)}"
            )

        if not all(char.isascii() and char.isalpha() for char in value):
            raise InvalidCharacterException(
                f"Chunk type must consist of ASCII letters only: {value!r}"
            )

        return cls(value.encode("ascii"))

    def __bytes__(self) -> bytes:
        return self.ctype

    def __str__(self) -> str:
        return self.ctype.decode("utf-8")

    def __repr__(self) -> str:
        try:
            return f"ChunkType({str(self)!r})"
        except UnicodeDecodeError:
            return f"ChunkType({self.ctype!r})"

    def is_valid(self) -> bool:
        return all(_is_ascii_letter(byte) for byte in self.ctype) and self.is_reserved_bit_valid()

    def is_critical(self) -> bool:
        return not self._property_bit(0)

    def is_public(self) -> bool:
        return not self._property_bit(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._property_bit(2)

    def is_safe_to_copy(self) -> bool:
        return self._property_bit(3)

    def _property_bit(self, index: int) -> bool:
        return bool(self.ctype[index] & PROPERTY_BIT)
