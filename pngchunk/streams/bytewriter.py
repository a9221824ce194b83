from struct import pack


class ByteWriter:
    """Append-only big-endian writer."""

    def __init__(self):
        self._buffer = bytearray()

    def write(self, value: bytes) -> None:
        self._buffer += value

    def write_u_int32(self, integer: int) -> None:
        self.write(pack(">I", integer))

    def write_u_int8(self, integer: int) -> None:
        self.write(pack(">B", integer))

    @property
    def buffer(self) -> bytes:
        return bytes(self._buffer)

    @property
    def position(self) -> int:
        return len(self._buffer)
