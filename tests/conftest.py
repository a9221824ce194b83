import logging
import struct

import pytest
import structlog

from pngchunk.png import (
    IDAT_CHUNK_TYPE,
    IEND_CHUNK_TYPE,
    Chunk,
    ChunkType,
    ColorType,
    ImageHeader,
    Png,
)

MESSAGE = b"This is where your secret message will be!"
MESSAGE_CRC = 2882656334


@pytest.fixture(autouse=True)
def quiet_logging():
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


def encode_chunk(length: int, chunk_type: bytes, data: bytes, crc: int) -> bytes:
    return struct.pack(">I", length) + chunk_type + data + struct.pack(">I", crc)


@pytest.fixture
def rust_chunk_bytes() -> bytes:
    return encode_chunk(len(MESSAGE), b"RuSt", MESSAGE, MESSAGE_CRC)


@pytest.fixture
def rust_chunk() -> Chunk:
    return Chunk(ChunkType.from_str("RuSt"), MESSAGE)


@pytest.fixture
def image_header() -> ImageHeader:
    return ImageHeader(width=3, height=2, bit_depth=8, color_type=ColorType.RGBA)


@pytest.fixture
def png(image_header: ImageHeader) -> Png:
    return Png(
        image_header.to_chunk(),
        Chunk(IDAT_CHUNK_TYPE, b"\x78\x9c\x63\x00\x00\x00\x01\x00\x01"),
        Chunk(IEND_CHUNK_TYPE, b""),
    )
