from pngchunk.png import STANDARD_HEADER, Chunk, ChunkType, ImageHeader, Png
from pngchunk.png.exceptions import ChunkException

__all__ = [
    "Png",
    "Chunk",
    "ChunkType",
    "ImageHeader",
    "ChunkException",
    "STANDARD_HEADER",
]
