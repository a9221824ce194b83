from pngchunk.png.exceptions.chunk_exception import ChunkException


class InvalidUtf8Exception(ChunkException):
    pass
