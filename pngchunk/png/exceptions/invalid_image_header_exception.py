from pngchunk.png.exceptions.chunk_exception import ChunkException


class InvalidImageHeaderException(ChunkException):
    pass
