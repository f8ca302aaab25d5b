"""Split UTF-8 text into pieces that fit a terminal column width"""

from .chunks import Chunk, Chunks, chunks
from .decode import decode_one, iter_decode
from .errors import ChunkError, InvalidEncoding, CharacterTooWide
from .utf8wrap import Utf8Wrapper
from .width import char_width, text_width

__all__ = [
    'Chunk', 'Chunks', 'chunks', 'decode_one', 'iter_decode', 'ChunkError',
    'InvalidEncoding', 'CharacterTooWide', 'Utf8Wrapper', 'char_width',
    'text_width',
]
