import zlib
from typing import Self

import structlog

from pngchunk.png.chunk_type import CHUNK_TYPE_SIZE, ChunkType
from pngchunk.png.exceptions import (
    ChecksumMismatchException,
    InvalidUtf8Exception,
    SizeMismatchException,
    TruncatedHeaderException,
)
from pngchunk.streams import ByteReader, ByteWriter

LENGTH_FIELD_SIZE = 4
CRC_FIELD_SIZE = 4
CHUNK_OVERHEAD = LENGTH_FIELD_SIZE + CHUNK_TYPE_SIZE + CRC_FIELD_SIZE

MAX_CHUNK_LENGTH = 0xFFFFFFFF

logger = structlog.get_logger(__name__)


def calculate_crc(chunk_type: ChunkType, data: bytes) -> int:
    """CRC-32/ISO-HDLC (the zlib/PNG checksum) over the type code followed by the data."""
    return zlib.crc32(data, zlib.crc32(bytes(chunk_type)))


class Chunk:
    __slots__ = ("_length", "_chunk_type", "_data", "_crc")

    def __init__(self, chunk_type: ChunkType, data: bytes):
        data = bytes(data)
        if len(data) > MAX_CHUNK_LENGTH:
            raise ValueError(
                f"Chunk data is too long: {len(data)} > {MAX_CHUNK_LENGTH} bytes"
            )

        self._length = len(data)
        self._chunk_type = chunk_type
        self._data = data
        self._crc = calculate_crc(chunk_type, data)

    @classmethod
    def from_bytes(cls, value: bytes) -> Self:
        """
        Decodes a single chunk that occupies the whole of `value`:
        length (BE u32), type (4 bytes), data, CRC (BE u32).

        :raises TruncatedHeaderException: less than 4 bytes were given
        :raises SizeMismatchException: the declared length doesn't match the buffer size
        :raises InvalidChunkTypeException: the type code is not a valid PNG chunk type
        :raises ChecksumMismatchException: the stored CRC doesn't match the computed one
        """

        reader = ByteReader(value)
        if reader.remaining < LENGTH_FIELD_SIZE:
            raise TruncatedHeaderException(
                f"Chunk needs at least {LENGTH_FIELD_SIZE} bytes to read its length, "
                f"got {reader.remaining}"
            )

        length = reader.read_u_int32()
        total_size = reader.remaining + LENGTH_FIELD_SIZE
        if total_size != length + CHUNK_OVERHEAD:
            raise SizeMismatchException(length, total_size)

        chunk_type = ChunkType.from_bytes(reader.read(CHUNK_TYPE_SIZE))
        data = reader.read(length)
        declared_crc = reader.read_u_int32()

        chunk = cls(chunk_type, data)
        if chunk.crc != declared_crc:
            raise ChecksumMismatchException(declared_crc, chunk.crc)

        logger.debug("chunk_decoded", chunk_type=repr(chunk_type), length=length)
        return chunk

    @classmethod
    def read_from(cls, reader: ByteReader) -> Self:
        """Decodes the chunk starting at the current position of a big-endian reader."""

        if reader.remaining < LENGTH_FIELD_SIZE:
            raise TruncatedHeaderException(
                f"Chunk needs at least {LENGTH_FIELD_SIZE} bytes to read its length, "
                f"got {reader.remaining} at offset {reader.tell()}"
            )

        length = int.from_bytes(reader.peek(LENGTH_FIELD_SIZE), "big")
        total_size = length + CHUNK_OVERHEAD
        if total_size > reader.remaining:
            raise SizeMismatchException(length, reader.remaining)

        return cls.from_bytes(reader.read(total_size))

    @property
    def length(self) -> int:
        return self._length

    @property
    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def crc(self) -> int:
        return self._crc

    def data_as_string(self) -> str:
        try:
            return self._data.decode("utf-8")
        except UnicodeDecodeError as exception:
            raise InvalidUtf8Exception(
                f"{self._chunk_type!r} chunk data is not valid UTF-8"
            ) from exception

    def as_bytes(self) -> bytes:
        writer = ByteWriter()
        writer.write_u_int32(self._length)
        writer.write(bytes(self._chunk_type))
        writer.write(self._data)
        writer.write_u_int32(self._crc)
        return writer.buffer

    def summary(self) -> dict:
        return {
            "type": str(self._chunk_type),
            "length": self._length,
            "crc": self._crc,
            "critical": self._chunk_type.is_critical(),
            "public": self._chunk_type.is_public(),
            "safe_to_copy": self._chunk_type.is_safe_to_copy(),
        }

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def __len__(self) -> int:
        return self._length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented

        return (
            self._length == other._length
            and self._chunk_type == other._chunk_type
            and self._data == other._data
            and self._crc == other._crc
        )

    def __hash__(self) -> int:
        return hash((self._chunk_type, self._data))

    def __repr__(self) -> str:
        return f"Chunk(type={self._chunk_type!r}, length={self._length}, crc={self._crc})"
