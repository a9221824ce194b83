from struct import unpack


class ByteReader:
    """
    Sequential big-endian (network order) reader over an in-memory buffer.

    Unlike a file object, a read never returns fewer bytes than requested:
    running past the end raises `EOFError` and leaves the position untouched.
    """

    def __init__(self, initial_bytes: bytes):
        self._buffer = memoryview(bytes(initial_bytes))
        self._position = 0

    def seek(self, position: int) -> None:
        if not 0 <= position <= len(self._buffer):
            raise ValueError(f"Position {position} is outside of the buffer")
        self._position = position

    def tell(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._buffer) - self._position

    def is_at_end(self) -> bool:
        return self.remaining <= 0

    def peek(self, size: int) -> bytes:
        return bytes(self._buffer[self._position : self._position + size])

    def read(self, size: int) -> bytes:
        if size > self.remaining:
            raise EOFError(
                f"Cannot read {size} bytes, only {self.remaining} left"
            )

        data = bytes(self._buffer[self._position : self._position + size])
        self._position += size
        return data

    def read_u_int32(self) -> int:
        return unpack(">I", self.read(4))[0]

    def read_u_int8(self) -> int:
        return unpack(">B", self.read(1))[0]
