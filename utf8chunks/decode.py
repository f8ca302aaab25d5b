"""UTF-8 scalar value decoding

Reads single characters out of a UTF-8 byte buffer starting at a known
character boundary.  Malformed input is reported with InvalidEncoding
pointing at the offending sequence, decoding never steps past it.
"""

from .errors import InvalidEncoding

__all__ = ['decode_one', 'iter_decode']


# (first, last, length, mask) for each class of leading byte
_LEADING = (
    (0x00, 0x7F, 1, 0x7F),
    (0xC2, 0xDF, 2, 0x1F),
    (0xE0, 0xEF, 3, 0x0F),
    (0xF0, 0xF4, 4, 0x0F),
)

# Narrowed ranges for the second byte after some leading bytes, these
# rule out overlong forms, surrogates and values above U+10FFFF.
_SECOND = {
    0xE0: (0xA0, 0xBF),
    0xED: (0x80, 0x9F),
    0xF0: (0x90, 0xBF),
    0xF4: (0x80, 0x8F),
}


def _classify(lead):
    for first, last, length, mask in _LEADING:
        if first <= lead <= last:
            return length, mask

    return 0, 0

def decode_one(data, offset=0):
    """Decode the character starting at offset

    Returns a tuple of the scalar value and the number of bytes it
    occupies, which is between 1 and 4.  Raises InvalidEncoding if
    offset is not inside data or if the bytes there do not form a
    complete and valid UTF-8 sequence.

    """

    if not 0 <= offset < len(data):
        raise InvalidEncoding(offset, "offset out of bounds")

    lead = data[offset]
    length, mask = _classify(lead)
    if not length:
        raise InvalidEncoding(offset, "invalid leading byte 0x{:02X}"
                                      "".format(lead))

    if offset + length > len(data):
        raise InvalidEncoding(offset, "truncated sequence")

    value = lead & mask
    for i in range(1, length):
        byte = data[offset + i]
        low, high = _SECOND.get(lead, (0x80, 0xBF)) if i == 1 else (0x80, 0xBF)
        if not low <= byte <= high:
            raise InvalidEncoding(offset, "invalid continuation byte 0x{:02X}"
                                          "".format(byte))

        value = value << 6 | byte & 0x3F

    return value, length

def iter_decode(data, start=0, end=None):
    """Generator yielding (offset, value, length) for each character"""
    if end is None:
        end = len(data)

    offset = start
    while offset < end:
        value, length = decode_one(data, offset)
        yield offset, value, length
        offset += length
