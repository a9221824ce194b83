from pngchunk.png.exceptions.chunk_exception import ChunkException


class WrongFileException(ChunkException):
    pass
