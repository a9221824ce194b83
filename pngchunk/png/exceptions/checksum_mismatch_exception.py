from pngchunk.png.exceptions.chunk_exception import ChunkException


class ChecksumMismatchException(ChunkException):
    def __init__(self, declared: int, actual: int):
        super().__init__(
            f"Chunk CRC mismatch: declared {declared:#010x}, computed {actual:#010x}"
        )
        self.declared = declared
        self.actual = actual
