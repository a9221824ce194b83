import os
from typing import Self

import structlog

from pngchunk.png.chunk import Chunk
from pngchunk.png.chunk_type import ChunkType
from pngchunk.png.exceptions import ChunkNotFoundException, WrongFileException
from pngchunk.png.image_header import IHDR_CHUNK_TYPE, ImageHeader
from pngchunk.streams import ByteReader, ByteWriter

STANDARD_HEADER = b"\x89PNG\r\n\x1a\n"

logger = structlog.get_logger(__name__)


def get_file_data(filepath: os.PathLike | str) -> bytes:
    with open(filepath, "rb") as file:
        return file.read()


def write_file_data(filepath: os.PathLike | str, data: bytes) -> None:
    with open(filepath, "wb") as file:
        file.write(data)


def _as_chunk_type(chunk_type: ChunkType | bytes | str) -> ChunkType:
    if isinstance(chunk_type, ChunkType):
        return chunk_type
    if isinstance(chunk_type, str):
        return ChunkType.from_str(chunk_type)

    return ChunkType(bytes(chunk_type))


class Png:
    """
    An ordered sequence of chunks behind the PNG signature.

    Chunks are kept exactly in the order they were read or added;
    no ordering rules (IHDR first, IEND last, ...) are enforced.
    """

    def __init__(self, *chunks: Chunk):
        self._chunks: list[Chunk] = list(chunks)

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        reader = ByteReader(data)

        signature = reader.peek(len(STANDARD_HEADER))
        if signature != STANDARD_HEADER:
            raise WrongFileException(f"Not a PNG file, bad signature: {signature!r}")
        reader.seek(len(STANDARD_HEADER))

        chunks = []
        while not reader.is_at_end():
            chunks.append(Chunk.read_from(reader))

        logger.debug("png_decoded", chunk_count=len(chunks), size=len(data))
        return cls(*chunks)

    @classmethod
    def parse(cls, filepath: os.PathLike | str) -> Self:
        logger.debug("png_reading", filepath=str(filepath))
        return cls.from_bytes(get_file_data(filepath))

    def write(self, filepath: os.PathLike | str) -> Self:
        data = self.as_bytes()
        write_file_data(filepath, data)

        logger.debug("png_written", filepath=str(filepath), size=len(data))
        return self

    @property
    def chunks(self) -> tuple[Chunk, ...]:
        return tuple(self._chunks)

    def chunk_types(self) -> list[ChunkType]:
        return [chunk.chunk_type for chunk in self._chunks]

    def get_chunk_by_type(self, chunk_type: ChunkType | bytes | str) -> Chunk | None:
        chunk_type = _as_chunk_type(chunk_type)

        for chunk in self._chunks:
            if chunk.chunk_type == chunk_type:
                return chunk

        return None

    def append_chunk(self, chunk: Chunk) -> Chunk:
        self._chunks.append(chunk)
        return chunk

    def remove_first_chunk(self, chunk_type: ChunkType | bytes | str) -> Chunk:
        chunk = self.get_chunk_by_type(chunk_type)
        if chunk is None:
            raise ChunkNotFoundException(f"No {_as_chunk_type(chunk_type)!r} chunk found")

        self._chunks.remove(chunk)
        return chunk

    def header(self) -> ImageHeader:
        chunk = self.get_chunk_by_type(IHDR_CHUNK_TYPE)
        if chunk is None:
            raise ChunkNotFoundException("PNG has no IHDR chunk")

        return ImageHeader.from_chunk(chunk)

    def as_bytes(self) -> bytes:
        writer = ByteWriter()
        writer.write(STANDARD_HEADER)

        for chunk in self._chunks:
            writer.write(chunk.as_bytes())

        return writer.buffer

    def summary(self) -> list[dict]:
        return [chunk.summary() for chunk in self._chunks]

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def __len__(self) -> int:
        return len(self._chunks)

    def __repr__(self) -> str:
        return f"Png(chunks={self.chunk_types()!r})"
