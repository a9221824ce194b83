__all__ = [
    "ChunkException",
    "TruncatedHeaderException",
    "SizeMismatchException",
    "InvalidChunkTypeException",
    "InvalidLengthException",
    "InvalidCharacterException",
    "ChecksumMismatchException",
    "InvalidUtf8Exception",
    "WrongFileException",
    "ChunkNotFoundException",
    "InvalidImageHeaderException",
]

from pngchunk.png.exceptions.checksum_mismatch_exception import (
    ChecksumMismatchException,
)
from pngchunk.png.exceptions.chunk_exception import ChunkException
from pngchunk.png.exceptions.chunk_not_found_exception import ChunkNotFoundException
from pngchunk.png.exceptions.invalid_character_exception import (
    InvalidCharacterException,
)
from pngchunk.png.exceptions.invalid_chunk_type_exception import (
    InvalidChunkTypeException,
)
from pngchunk.png.exceptions.invalid_image_header_exception import (
    InvalidImageHeaderException,
)
from pngchunk.png.exceptions.invalid_length_exception import InvalidLengthException
from pngchunk.png.exceptions.invalid_utf8_exception import InvalidUtf8Exception
from pngchunk.png.exceptions.size_mismatch_exception import SizeMismatchException
from pngchunk.png.exceptions.truncated_header_exception import (
    TruncatedHeaderException,
)
from pngchunk.png.exceptions.wrong_file_exception import WrongFileException
