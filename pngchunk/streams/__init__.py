__all__ = ["ByteReader", "ByteWriter"]

from pngchunk.streams.bytereader import ByteReader
from pngchunk.streams.bytewriter import ByteWriter
