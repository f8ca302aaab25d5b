"""Width bounded chunking of UTF-8 text

Chunks walks a UTF-8 buffer one character at a time and cuts it into
pieces that each fit within a number of terminal columns.  Cuts only
ever happen on character boundaries, and joining the pieces back
together in order gives back the original text.

A character wider than the limit on its own can't fit anywhere.  By
default it is emitted as a chunk of its own, with overflow='error'
CharacterTooWide is raised instead.  Either way a chunk is never empty
while there is still text left.
"""

import logging

from .decode import decode_one
from .errors import CharacterTooWide
from .width import char_width

__all__ = ['Chunk', 'Chunks', 'chunks']

log = logging.getLogger(__name__)

OVERFLOW_POLICIES = ('emit', 'error')


class Chunk:
    """A view of a byte range in the source buffer, not a copy"""
    __slots__ = ('_source', '_start', '_end', '_width')

    def __init__(self, source, start, end, width):
        self._source = source
        self._start = start
        self._end = end
        self._width = width

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    @property
    def width(self):
        return self._width

    @property
    def data(self):
        return memoryview(self._source)[self._start:self._end]

    @property
    def text(self):
        return self._source[self._start:self._end].decode('UTF-8')

    def __len__(self):
        return self._end - self._start

    def __str__(self):
        return self.text

    def __repr__(self):
        return 'Chunk({!r}, {}:{}, width={})'.format(self.text, self._start,
                                                     self._end, self._width)

    def __eq__(self, other):
        if isinstance(other, Chunk):
            return (self._source[self._start:self._end]
                    == other._source[other._start:other._end])
        elif isinstance(other, str):
            return self.text == other
        else:
            return NotImplemented

    def __hash__(self):
        return hash(self.text)


class Chunks:
    def __init__(self, source, width, overflow='emit', ambiguous_width=1):
        if isinstance(source, str):
            source = source.encode('UTF-8')
        elif isinstance(source, (bytes, bytearray, memoryview)):
            source = bytes(source)
        else:
            raise TypeError("expected str or bytes-like source, got {}"
                            "".format(type(source).__name__))

        if not isinstance(width, int) or isinstance(width, bool):
            raise TypeError("width must be an int, got {}"
                            "".format(type(width).__name__))

        if width < 0:
            raise ValueError("width must not be negative")

        if overflow not in OVERFLOW_POLICIES:
            raise ValueError("unknown overflow policy '{}'".format(overflow))

        if ambiguous_width not in (1, 2):
            raise ValueError("ambiguous_width must be 1 or 2, got {!r}"
                             "".format(ambiguous_width))

        self._source = source
        self._pos = 0
        self._width = width
        self._overflow = overflow
        self._ambiguous_width = ambiguous_width

    @property
    def position(self):
        return self._pos

    @property
    def width(self):
        return self._width

    @property
    def done(self):
        return self._pos == len(self._source)

    def _scan(self):
        total = 0
        pos = self._pos

        while pos < len(self._source):
            value, length = decode_one(self._source, pos)
            w = char_width(value, self._ambiguous_width)

            if total + w > self._width:
                if pos != self._pos:
                    break

                if self._overflow == 'error':
                    raise CharacterTooWide(pos, value, w, self._width)

                log.debug("U+%04X at byte %d exceeds width %d, emitting "
                          "it on its own", value, pos, self._width)

            total += w
            pos += length

        return pos, total

    def next_chunk(self):
        """Return the next chunk, or None once the text is exhausted"""
        if self.done:
            return None

        end, total = self._scan()
        chunk = Chunk(self._source, self._pos, end, total)
        self._pos = end
        return chunk

    def __iter__(self):
        return self

    def __next__(self):
        chunk = self.next_chunk()
        if chunk is None:
            raise StopIteration

        return chunk


def chunks(text, width, **options):
    """Split text into chunks at most width columns wide

    text may be a str or a bytes-like object holding UTF-8.  Returns a
    lazy Chunks iterator, options are passed on to it.

    """

    return Chunks(text, width, **options)
