"""Line folding for written vCards."""

from __future__ import annotations

from dataclasses import dataclass

from .helper import Character as Char
from .helper import DEFAULT_CHARSET, byte_width, qp_encode


@dataclass(frozen=True)
class FoldingScheme:
    """
    How long lines are folded.

    @ivar max_line_length:
        Maximum line length, None for no folding.
    @ivar indent:
        Whitespace that starts each folded line.
    """

    max_line_length: int = 75
    indent: str = Char.SPACE
    newline: str = Char.CRLF

    def __post_init__(self):
        check_folding(self.max_line_length, self.indent)


def check_folding(line_length, indent):
    if line_length is None:
        return
    if line_length <= 0:
        raise ValueError("Line length must be greater than 0.")
    if len(indent) >= line_length:
        raise ValueError("The length of the indent string must be less than the max line length.")
    if not indent or indent.strip(Char.SPACEORTAB):
        raise ValueError("Indent string may only contain spaces and tabs.")


FoldingScheme.MIME_DIR = FoldingScheme(75, Char.SPACE)
FoldingScheme.MS_OUTLOOK = FoldingScheme(72, Char.SPACE)
FoldingScheme.MAC_ADDRESS_BOOK = FoldingScheme(76, Char.SPACE * 2)
FoldingScheme.NO_FOLDING = FoldingScheme(None)


class FoldedLineWriter:
    """
    Write text to a stream, folding lines that get too long.

    A logical line may be written with any number of write calls, the
    current line length carries over between them. A fold is never put in
    front of whitespace, and never inside a quoted-printable "=XX" sequence.

    @ivar width_unit:
        "chars" to measure lines in characters, "bytes" to measure them in
        UTF-8 bytes (characters are never split).
    """

    def __init__(self, stream, line_length=75, indent=Char.SPACE, newline=Char.CRLF, width_unit="chars"):
        check_folding(line_length, indent)
        if width_unit not in ("chars", "bytes"):
            raise ValueError(f"Unknown width unit {width_unit!r}.")
        self.stream = stream
        self._line_length = line_length
        self._indent = indent
        self.newline = newline
        self.width_unit = width_unit
        self.column = 0

    @classmethod
    def from_scheme(cls, stream, scheme: FoldingScheme, newline=None, width_unit="chars"):
        return cls(stream, scheme.max_line_length, scheme.indent, newline or scheme.newline, width_unit)

    @property
    def line_length(self):
        return self._line_length

    @line_length.setter
    def line_length(self, line_length):
        check_folding(line_length, self._indent)
        self._line_length = line_length

    @property
    def indent(self):
        return self._indent

    @indent.setter
    def indent(self, indent):
        check_folding(self._line_length, indent)
        self._indent = indent

    def _width(self, char):
        return byte_width(char) if self.width_unit == "bytes" else 1

    def write(self, text: str, quoted_printable=False, charset=DEFAULT_CHARSET):
        """
        Write text, quoted-printable encoding it first if asked to.
        """
        if quoted_printable:
            text = qp_encode(text, charset or DEFAULT_CHARSET)

        if self._line_length is None:
            self.stream.write(text)
            return

        # leave room for the soft line break
        max_length = self._line_length - 1 if quoted_printable else self._line_length
        indent_width = sum(self._width(c) for c in self._indent)
        encoded_pos = -1
        start = 0
        end = len(text)
        i = 0
        while i < end:
            char = text[i]

            # count how far into an "=XX" sequence we are
            if encoded_pos >= 0:
                encoded_pos += 1
                if encoded_pos == 3:
                    encoded_pos = -1

            if char == Char.LF:
                self.stream.write(text[start : i + 1])
                self.column = 0
                start = i = i + 1
                continue

            if char == Char.CR:
                if i == end - 1 or text[i + 1] != Char.LF:
                    self.stream.write(text[start : i + 1])
                    self.column = 0
                    start = i + 1
                else:
                    self.column += 1
                i += 1
                continue

            if char == "=" and quoted_printable:
                encoded_pos = 0

            if self.column + self._width(char) > max_length:
                # never fold in front of whitespace or inside an "=XX" sequence
                fold_at = i
                if char.isspace():
                    while text[fold_at].isspace() and fold_at < end - 1:
                        fold_at += 1
                elif encoded_pos > 0:
                    fold_at += 3 - encoded_pos
                if (char.isspace() or encoded_pos > 0) and fold_at >= end - 1:
                    # too little left to fold, keep it on this line
                    self.column += sum(self._width(c) for c in text[i:end])
                    break

                self.stream.write(text[start:fold_at])
                if quoted_printable:
                    self.stream.write("=")
                self.stream.write(self.newline)
                self.stream.write(self._indent)
                self.column = indent_width + self._width(text[fold_at])
                encoded_pos = 0 if quoted_printable and text[fold_at] == "=" else -1
                start = fold_at
                i = fold_at + 1
                continue

            self.column += self._width(char)
            i += 1

        self.stream.write(text[start:end])

    def writeln(self, text: str = "", quoted_printable=False, charset=DEFAULT_CHARSET):
        self.write(text, quoted_printable, charset)
        self.write_newline()

    def write_newline(self):
        self.stream.write(self.newline)
        self.column = 0

    def flush(self):
        if hasattr(self.stream, "flush"):
            self.stream.flush()

    def close(self):
        self.stream.close()
