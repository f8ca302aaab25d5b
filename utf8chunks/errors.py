"""Failures raised while decoding and chunking text"""

__all__ = ['ChunkError', 'InvalidEncoding', 'CharacterTooWide']


class ChunkError(ValueError):
    """Base class for failures raised while chunking text"""


class InvalidEncoding(ChunkError):
    def __init__(self, offset, reason="malformed UTF-8"):
        ChunkError.__init__(self, "{} at byte {}".format(reason, offset))
        self.offset = offset
        self.reason = reason


class CharacterTooWide(ChunkError):
    def __init__(self, offset, value, width, limit):
        ChunkError.__init__(self, "U+{:04X} at byte {} is {} columns wide, "
                                  "limit is {}".format(value, offset,
                                                       width, limit))
        self.offset = offset
        self.value = value
        self.width = width
        self.limit = limit
