"""UTF-8 column-width wrapping

Convenient utility for hard wrapping text to a terminal width on
character boundaries.
"""

from .chunks import Chunks

__all__ = ['Utf8Wrapper']


class Utf8Wrapper:
    def __init__(self, **kwargs):
        self.width = kwargs.get('width', 100)
        self.overflow = kwargs.get('overflow', 'emit')
        self.ambiguous_width = kwargs.get('ambiguous_width', 1)
        self.drop_blank = kwargs.get('drop_blank', False)

    def _split_lines(self, text):
        # Raw UTF-8 is split as bytes, decoding is left to the chunker
        if isinstance(text, (bytes, bytearray)):
            cr, lf = b'\r', b'\n'
        else:
            cr, lf = '\r', '\n'

        lines = text.replace(cr + lf, lf).replace(cr, lf).split(lf)

        for line in lines:
            if self.drop_blank and self._is_blank(line):
                continue

            yield line

    def _is_blank(self, line):
        if isinstance(line, (bytes, bytearray)):
            # Invalid bytes aren't blank, the chunker reports them
            line = bytes(line).decode('UTF-8', 'replace')

        return not line.strip()

    def _lay_line(self, line):
        if not line:
            yield ''
            return

        for chunk in Chunks(line, self.width, overflow=self.overflow,
                            ambiguous_width=self.ambiguous_width):
            yield chunk.text

    def wrap(self, text):
        """Returns the wrapped lines of text, a str or raw UTF-8 bytes"""
        return [part for line in self._split_lines(text)
                         for part in self._lay_line(line)]

    def fill(self, text):
        return '\n'.join(self.wrap(text))
