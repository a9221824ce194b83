from pngchunk.png.exceptions.chunk_exception import ChunkException


class SizeMismatchException(ChunkException):
    def __init__(self, declared_length: int, actual_size: int):
        super().__init__(
            f"Chunk declares {declared_length} data bytes "
            f"({declared_length + 12} total), but {actual_size} bytes were given"
        )
        self.declared_length = declared_length
        self.actual_size = actual_size
