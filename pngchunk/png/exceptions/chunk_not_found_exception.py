from pngchunk.png.exceptions.chunk_exception import ChunkException


class ChunkNotFoundException(ChunkException):
    pass
