class ChunkException(Exception):
    """Base class for every error raised while decoding or building PNG data."""
