from pngchunk.png.exceptions.chunk_exception import ChunkException


class InvalidLengthException(ChunkException):
    pass
