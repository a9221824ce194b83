from .chunk import Chunk
from .chunk_type import ChunkType
from .image_header import IHDR_CHUNK_TYPE, ColorType, ImageHeader, InterlaceMethod
from .png import STANDARD_HEADER, Png

__all__ = [
    "Png",
    "Chunk",
    "ChunkType",
    "ImageHeader",
    "ColorType",
    "InterlaceMethod",
    "STANDARD_HEADER",
    "IHDR_CHUNK_TYPE",
    "PLTE_CHUNK_TYPE",
    "IDAT_CHUNK_TYPE",
    "IEND_CHUNK_TYPE",
    "TEXT_CHUNK_TYPE",
]

PLTE_CHUNK_TYPE = ChunkType(b"PLTE")
IDAT_CHUNK_TYPE = ChunkType(b"IDAT")
IEND_CHUNK_TYPE = ChunkType(b"IEND")
TEXT_CHUNK_TYPE = ChunkType(b"tEXt")
