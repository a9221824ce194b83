from pngchunk.png.exceptions.chunk_exception import ChunkException


class TruncatedHeaderException(ChunkException):
    pass
