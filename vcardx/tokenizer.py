"""Turn a character stream into unfolded logical lines."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from .exceptions import InvalidLineError
from .helper import Character as Char
from .line_parser import parse_line
from .patterns import newline_re
from .version import VCardVersion

CHUNK_SIZE = 4096


@dataclass(frozen=True)
class LogicalLine:
    text: str
    line_number: int


class LineTokenizer:
    """
    Iterate through a stream, one logical line at a time.

    Because many applications still use vCard 2.1, we have to deal with the
    quoted-printable encoding for long lines, as well as the vCard 3.0 line
    folding technique, a whitespace character at the start of the line.

    Quoted-printable data is not decoded here, only the soft line breaks are
    removed.

    >>> from io import StringIO
    >>> lines = LineTokenizer(StringIO(TEST_LINES))
    >>> for line in lines:
    ...     print(f"Line {line.line_number}: {line.text}")
    ...
    Line 2: Line 0 text, Line 0 continued.
    Line 4: Line 1;encoding=quoted-printable:this is an evil evil format.
    Line 7: Line 2 is a new line, it does not start with whitespace.

    @ivar version:
        Version used to decide whether a line is quoted-printable, kept
        current by the RawReader.
    """

    def __init__(self, stream, version=VCardVersion.V2_1, chunk_size=CHUNK_SIZE):
        self.stream = stream
        self.version = version
        self.chunk_size = chunk_size
        self._physical = self._physical_lines()
        self._pending = None

    def _physical_lines(self):
        """
        Generate (line number, text) for each physical line.

        A CR that ends a chunk waits for the next chunk, it may be half of a CRLF.
        """
        number = 0
        tail = ""
        for chunk in iter(partial(self.stream.read, self.chunk_size), ""):
            data = tail + chunk
            start = 0
            for match in newline_re.finditer(data):
                if match.group() == Char.CR and match.end() == len(data):
                    break
                number += 1
                yield number, data[start : match.start()]
                start = match.end()
            tail = data[start:]
        if tail:
            pieces = newline_re.split(tail)
            if pieces[-1] == "":
                pieces.pop()
            for piece in pieces:
                number += 1
                yield number, piece

    def _next_physical(self):
        if self._pending is not None:
            physical, self._pending = self._pending, None
            return physical
        return next(self._physical, None)

    def _is_quoted_printable(self, text):
        """
        Whether the parameters of a line mark it quoted-printable, None while
        the line cannot be parsed yet.
        """
        try:
            line = parse_line(text, self.version)
        except InvalidLineError:
            return None
        return line.parameters.is_quoted_printable()

    def read_line(self):
        """
        Return the next LogicalLine, or None at the end of the stream.
        """
        parts = []
        start = None
        quoted_printable = None
        qp_continued = False
        while True:
            physical = self._next_physical()
            if physical is None:
                break
            number, text = physical
            if text == "":
                continue
            if not parts:
                start = number
                parts.append(text)
            elif qp_continued or text[0] in Char.SPACEORTAB:
                parts.append(text[1:] if text[0] in Char.SPACEORTAB else text)
            else:
                self._pending = physical
                break

            qp_continued = False
            if text.endswith("="):
                # the parameters come before the value, they are parsed once
                if quoted_printable is None:
                    quoted_printable = self._is_quoted_printable("".join(parts))
                if quoted_printable:
                    parts[-1] = parts[-1][:-1]
                    qp_continued = True

        if not parts:
            return None
        return LogicalLine("".join(parts), start)

    def __iter__(self):
        return self

    def __next__(self):
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line


TEST_LINES = """
Line 0 text
 , Line 0 continued.
Line 1;encoding=quoted-printable:this is an evil =
evil =
format.
Line 2 is a new line, it does not start with whitespace.
"""
