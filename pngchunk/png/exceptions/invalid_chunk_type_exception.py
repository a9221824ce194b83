from pngchunk.png.exceptions.chunk_exception import ChunkException


class InvalidChunkTypeException(ChunkException):
    pass
