from dataclasses import dataclass
from enum import IntEnum
from typing import Self

from pngchunk.png.chunk import Chunk
from pngchunk.png.chunk_type import ChunkType
from pngchunk.png.exceptions import InvalidImageHeaderException
from pngchunk.streams import ByteReader, ByteWriter

IHDR_CHUNK_TYPE = ChunkType(b"IHDR")
IHDR_DATA_SIZE = 13

MAX_DIMENSION = 2**31 - 1


class ColorType(IntEnum):
    GRAYSCALE = 0
    RGB = 2
    PALETTE = 3
    GRAYSCALE_ALPHA = 4
    RGBA = 6

    def uses_palette(self) -> bool:
        return bool(self & 0b001)

    def uses_color(self) -> bool:
        return bool(self & 0b010)

    def uses_alpha(self) -> bool:
        return bool(self & 0b100)

    def allowed_bit_depths(self) -> tuple[int, ...]:
        return {
            ColorType.GRAYSCALE: (1, 2, 4, 8, 16),
            ColorType.RGB: (8, 16),
            ColorType.PALETTE: (1, 2, 4, 8),
            ColorType.GRAYSCALE_ALPHA: (8, 16),
            ColorType.RGBA: (8, 16),
        }[self]

    def channels(self) -> int:
        return {
            ColorType.GRAYSCALE: 1,
            ColorType.RGB: 3,
            ColorType.PALETTE: 1,
            ColorType.GRAYSCALE_ALPHA: 2,
            ColorType.RGBA: 4,
        }[self]


class InterlaceMethod(IntEnum):
    NONE = 0
    ADAM7 = 1


@dataclass(frozen=True)
class ImageHeader:
    width: int
    height: int
    bit_depth: int
    color_type: ColorType
    compression_method: int = 0
    filter_method: int = 0
    interlace_method: InterlaceMethod = InterlaceMethod.NONE

    def __post_init__(self):
        try:
            object.__setattr__(self, "color_type", ColorType(self.color_type))
        except ValueError:
            raise InvalidImageHeaderException(
                f"Unknown color type: {self.color_type}"
            ) from None

        try:
            object.__setattr__(
                self, "interlace_method", InterlaceMethod(self.interlace_method)
            )
        except ValueError:
            raise InvalidImageHeaderException(
                f"Unknown interlace method: {self.interlace_method}"
            ) from None

    @classmethod
    def from_chunk(cls, chunk: Chunk) -> Self:
        """
        Interprets the payload of an IHDR chunk.

        :param chunk: A decoded chunk of type IHDR
        :raises InvalidImageHeaderException: the chunk is not an IHDR chunk or carries invalid values
        """

        if chunk.chunk_type != IHDR_CHUNK_TYPE:
            raise InvalidImageHeaderException(
                f"Expected an IHDR chunk, got {chunk.chunk_type!r}"
            )

        if chunk.length != IHDR_DATA_SIZE:
            raise InvalidImageHeaderException(
                f"IHDR data must be {IHDR_DATA_SIZE} bytes long, got {chunk.length}"
            )

        reader = ByteReader(chunk.data)
        width = reader.read_u_int32()
        height = reader.read_u_int32()
        bit_depth = reader.read_u_int8()
        color_type = reader.read_u_int8()
        compression_method = reader.read_u_int8()
        filter_method = reader.read_u_int8()
        interlace_method = reader.read_u_int8()

        header = cls(
            width,
            height,
            bit_depth,
            color_type,
            compression_method,
            filter_method,
            interlace_method,
        )
        header._validate()

        return header

    def to_chunk(self) -> Chunk:
        self._validate()

        writer = ByteWriter()
        writer.write_u_int32(self.width)
        writer.write_u_int32(self.height)
        writer.write_u_int8(self.bit_depth)
        writer.write_u_int8(self.color_type)
        writer.write_u_int8(self.compression_method)
        writer.write_u_int8(self.filter_method)
        writer.write_u_int8(self.interlace_method)

        return Chunk(IHDR_CHUNK_TYPE, writer.buffer)

    def sample_depth(self) -> int:
        if self.color_type is ColorType.PALETTE:
            return 8

        return self.bit_depth

    def _validate(self) -> None:
        for name, value in (("width", self.width), ("height", self.height)):
            if not (0 < value <= MAX_DIMENSION):
                raise InvalidImageHeaderException(
                    f"Image {name} must be in range 1..{MAX_DIMENSION}, got {value}"
                )

        if self.bit_depth not in self.color_type.allowed_bit_depths():
            raise InvalidImageHeaderException(
                f"Bit depth {self.bit_depth} is not allowed "
                f"for color type {self.color_type.name}"
            )

        # Deflate and adaptive filtering are the only methods defined by PNG
        if self.compression_method != 0:
            raise InvalidImageHeaderException(
                f"Unknown compression method: {self.compression_method}"
            )
        if self.filter_method != 0:
            raise InvalidImageHeaderException(
                f"Unknown filter method: {self.filter_method}"
            )
