"""Tests for the PNG chunk container."""

import pytest

from pngchunk.png import (
    IDAT_CHUNK_TYPE,
    IEND_CHUNK_TYPE,
    IHDR_CHUNK_TYPE,
    STANDARD_HEADER,
    TEXT_CHUNK_TYPE,
    Chunk,
    ChunkType,
    Png,
)
from pngchunk.png.exceptions import (
    ChecksumMismatchException,
    ChunkNotFoundException,
    SizeMismatchException,
    TruncatedHeaderException,
    WrongFileException,
)


class TestPngDecoding:
    def test_round_trip(self, png):
        data = png.as_bytes()
        decoded = Png.from_bytes(data)

        assert data.startswith(STANDARD_HEADER)
        assert decoded.chunks == png.chunks
        assert bytes(decoded) == data

    def test_chunk_types(self, png):
        assert png.chunk_types() == [IHDR_CHUNK_TYPE, IDAT_CHUNK_TYPE, IEND_CHUNK_TYPE]

    def test_signature_only(self):
        assert len(Png.from_bytes(STANDARD_HEADER)) == 0

    def test_wrong_signature(self, png):
        data = bytearray(png.as_bytes())
        data[1:4] = b"JPG"

        with pytest.raises(WrongFileException):
            Png.from_bytes(bytes(data))

    def test_too_short_for_signature(self):
        with pytest.raises(WrongFileException):
            Png.from_bytes(b"\x89PN")

    def test_trailing_garbage_too_short_for_length(self, png):
        with pytest.raises(TruncatedHeaderException):
            Png.from_bytes(png.as_bytes() + b"\x00\x00")

    def test_trailing_incomplete_chunk(self, png):
        with pytest.raises(SizeMismatchException):
            Png.from_bytes(png.as_bytes() + b"\x00\x00\x00\x00\x00")

    def test_corrupted_chunk(self, png):
        data = bytearray(png.as_bytes())
        # First byte of the IHDR width
        data[len(STANDARD_HEADER) + 8] ^= 0x01

        with pytest.raises(ChecksumMismatchException):
            Png.from_bytes(bytes(data))

    def test_chunk_order_is_preserved(self):
        # No ordering rules are enforced
        png = Png(Chunk(IEND_CHUNK_TYPE, b""), Chunk(IDAT_CHUNK_TYPE, b"\x00"))
        decoded = Png.from_bytes(png.as_bytes())

        assert decoded.chunk_types() == [IEND_CHUNK_TYPE, IDAT_CHUNK_TYPE]


class TestPngChunks:
    def test_get_chunk_by_type(self, png):
        assert png.get_chunk_by_type(IDAT_CHUNK_TYPE) is png.chunks[1]
        assert png.get_chunk_by_type("IEND") is png.chunks[2]
        assert png.get_chunk_by_type(b"IHDR") is png.chunks[0]
        assert png.get_chunk_by_type(TEXT_CHUNK_TYPE) is None

    def test_append_chunk(self, png):
        text = Chunk(TEXT_CHUNK_TYPE, b"Comment\x00hello")
        png.append_chunk(text)

        assert png.chunks[-1] is text
        assert Png.from_bytes(png.as_bytes()).get_chunk_by_type("tEXt") == text

    def test_remove_first_chunk(self, png):
        first = Chunk(TEXT_CHUNK_TYPE, b"first")
        second = Chunk(TEXT_CHUNK_TYPE, b"second")
        png.append_chunk(first)
        png.append_chunk(second)

        assert png.remove_first_chunk("tEXt") is first
        assert png.get_chunk_by_type(TEXT_CHUNK_TYPE) is second
        assert len(png) == 4

    def test_remove_missing_chunk(self, png):
        with pytest.raises(ChunkNotFoundException):
            png.remove_first_chunk(ChunkType.from_str("RuSt"))

    def test_chunks_view_is_immutable(self, png):
        chunks = png.chunks
        assert isinstance(chunks, tuple)

    def test_summary(self, png):
        assert [entry["type"] for entry in png.summary()] == ["IHDR", "IDAT", "IEND"]

    def test_header(self, png, image_header):
        assert png.header() == image_header

    def test_header_missing(self):
        with pytest.raises(ChunkNotFoundException):
            Png(Chunk(IEND_CHUNK_TYPE, b"")).header()


class TestPngFiles:
    def test_write_and_parse(self, png, tmp_path):
        filepath = tmp_path / "image.png"
        png.write(filepath)

        assert filepath.read_bytes() == png.as_bytes()
        assert Png.parse(filepath).chunks == png.chunks

    def test_parse_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Png.parse(tmp_path / "missing.png")
