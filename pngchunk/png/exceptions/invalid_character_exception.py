from pngchunk.png.exceptions.chunk_exception import ChunkException


class InvalidCharacterException(ChunkException):
    pass
