"""Read RawLines from a stream, following VERSION changes."""

from __future__ import annotations

from .exceptions import InvalidVersionError
from .line_parser import RawLine, parse_line
from .tokenizer import LineTokenizer
from .version import VCardVersion


class RawReader:
    """
    Parse each logical line of a stream into a RawLine.

    A VERSION line switches the syntax used for the lines that follow.

    @ivar caret_decoding:
        Whether RFC 6868 caret escapes in 3.0 and 4.0 parameter values are
        decoded.
    @ivar line_number:
        Line number of the last line read.
    """

    def __init__(self, stream, caret_decoding=True, version=VCardVersion.V2_1):
        self.stream = stream
        self.caret_decoding = caret_decoding
        self.tokenizer = LineTokenizer(stream, version)
        self.line_number = None

    @property
    def version(self) -> VCardVersion:
        return self.tokenizer.version

    @version.setter
    def version(self, version: VCardVersion):
        self.tokenizer.version = version

    def read_line(self) -> RawLine:
        """
        Return the next RawLine, or None at the end of the stream.

        Raise InvalidLineError for a line that can't be parsed, and
        InvalidVersionError for an unknown VERSION (the version stays the same);
        reading can continue after both.
        """
        logical = self.tokenizer.read_line()
        if logical is None:
            return None
        self.line_number = logical.line_number
        line = parse_line(logical.text, self.version, self.caret_decoding, logical.line_number)
        if line.name.upper() == "VERSION":
            version = VCardVersion.from_string(line.value)
            if version is None:
                raise InvalidVersionError(line.value, logical.line_number)
            self.version = version
        return line

    def __iter__(self):
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line

    def close(self):
        self.stream.close()
