"""Tests for folding long lines."""

import random
import re
from io import StringIO

import pytest

from vcardx.folding import FoldedLineWriter, FoldingScheme
from vcardx.helper import qp_encode


def test_folding():
    buf = StringIO()
    writer = FoldedLineWriter(buf, line_length=10)
    writer.write("line\r\nThis line should be    ")
    writer.write("new line")
    writer.write("aa")
    writer.write("line")
    writer.write("\r\n0123456789\r\n")
    writer.write("0123456789", quoted_printable=True)
    writer.write("\r\n")
    writer.write("01234567=", quoted_printable=True)
    writer.write("\r\n")
    writer.write("01234567==", quoted_printable=True)
    writer.write("\r\n")
    writer.write("short", quoted_printable=True)
    writer.write("\r\n")
    writer.write("quoted-printable line", quoted_printable=True)

    assert buf.getvalue() == (
        "line\r\nThis line \r\n should be    \r\n new linea\r\n aline\r\n"
        "0123456789\r\n"
        "012345678=\r\n 9\r\n"
        "01234567=3D\r\n"
        "01234567=3D=\r\n =3D\r\n"
        "short\r\n"
        "quoted-pr=\r\n intable =\r\n line"
    )


def test_folding_across_write_calls():
    """The column carries over between write calls"""
    buf = StringIO()
    writer = FoldedLineWriter(buf, line_length=10)
    writer.write("This line should be    ")
    writer.write("new line")
    writer.write("aa")
    writer.write("line")
    assert buf.getvalue() == "This line \r\n should be    \r\n new linea\r\n aline"


def test_lone_cr_and_lf_reset_the_column():
    buf = StringIO()
    writer = FoldedLineWriter(buf, line_length=8)
    writer.write("one\r\ntwo three\rthree\nfour five")
    assert buf.getvalue() == "one\r\ntwo thre\r\n e\rthree\nfour fiv\r\n e"


def test_quoted_printable_charset():
    buf = StringIO()
    writer = FoldedLineWriter(buf, line_length=10)
    writer.write("test\näöüß\ntest", quoted_printable=True, charset="ISO-8859-1")
    assert buf.getvalue() == "test=0A=E4=\r\n =F6=FC=DF=\r\n =0Atest"


def test_width_in_bytes():
    """Multi-byte characters are never split"""
    buf = StringIO()
    writer = FoldedLineWriter(buf, line_length=5, width_unit="bytes")
    writer.write("ääää")
    assert buf.getvalue() == "ää\r\n ää"


def test_no_folding():
    buf = StringIO()
    writer = FoldedLineWriter.from_scheme(buf, FoldingScheme.NO_FOLDING)
    writer.write("x" * 200)
    assert buf.getvalue() == "x" * 200


def test_writeln_and_custom_newline():
    buf = StringIO()
    writer = FoldedLineWriter(buf, line_length=5, indent="\t", newline="\n")
    writer.writeln("abcdefg")
    writer.writeln("ab")
    assert buf.getvalue() == "abcde\n\tfg\nab\n"
    assert writer.column == 0


@pytest.mark.parametrize(
    "line_length, indent",
    [(0, " "), (-1, " "), (2, "  "), (10, ""), (10, "x")],
)
def test_invalid_settings(line_length, indent):
    with pytest.raises(ValueError):
        FoldedLineWriter(StringIO(), line_length, indent)
    with pytest.raises(ValueError):
        FoldingScheme(line_length, indent)


def test_setters_validate():
    writer = FoldedLineWriter(StringIO(), 10)
    with pytest.raises(ValueError):
        writer.line_length = 1
    with pytest.raises(ValueError):
        writer.indent = "-"
    writer.indent = "  "
    assert writer.indent == "  "


def test_schemes():
    assert FoldingScheme.MIME_DIR.max_line_length == 75
    assert FoldingScheme.MS_OUTLOOK.max_line_length == 72
    assert FoldingScheme.MAC_ADDRESS_BOOK.indent == "  "
    assert FoldingScheme.NO_FOLDING.max_line_length is None


def generated_texts(seed, alphabet, count=30, longest=150):
    """Random texts, the same for the same seed"""
    rng = random.Random(seed)
    for _ in range(count):
        yield "".join(rng.choice(alphabet) for _ in range(rng.randint(0, longest)))


def unfold(text, indent):
    return text.replace("\r\n" + indent, "")


@pytest.mark.parametrize("width_unit", ["chars", "bytes"])
@pytest.mark.parametrize("indent", [" ", "\t", "  "])
@pytest.mark.parametrize("line_length", [5, 8, 13, 75])
def test_unfolding_restores_the_text(line_length, indent, width_unit):
    """Folding only ever inserts a newline and the indent"""
    texts = generated_texts(line_length, "abcXYZ019=;,:\\äß€ ")
    for n, text in enumerate(texts):
        buf = StringIO()
        writer = FoldedLineWriter(buf, line_length, indent, width_unit=width_unit)
        # split the text over several write calls
        cut = n % (len(text) + 1)
        writer.write(text[:cut])
        writer.write(text[cut:])

        out = buf.getvalue()
        assert unfold(out, indent) == text
        for n_line, line in enumerate(out.split("\r\n")):
            body = line[len(indent) :] if n_line else line
            # whitespace is never moved to the next line, so such lines may run long
            if " " not in body:
                width = len(line.encode("utf-8")) if width_unit == "bytes" else len(line)
                assert width <= line_length


@pytest.mark.parametrize("charset", ["UTF-8", "ISO-8859-1"])
@pytest.mark.parametrize("line_length", [8, 10, 11, 20, 75])
def test_quoted_printable_sequences_are_never_split(line_length, charset):
    for text in generated_texts(line_length, "ab=;:\\äöüß \r\n"):
        buf = StringIO()
        writer = FoldedLineWriter(buf, line_length)
        writer.write("NOTE:")
        writer.write(text, quoted_printable=True, charset=charset)

        lines = buf.getvalue()[len("NOTE:") :].split("\r\n")
        contents = [line[:-1] for line in lines[:-1]] + [lines[-1]]
        assert all(line.endswith("=") for line in lines[:-1])
        assert all(line.startswith(" ") for line in lines[1:])
        contents = [contents[0]] + [c[1:] for c in contents[1:]]
        for content in contents:
            assert re.fullmatch("(?:[^=]|=[0-9A-F]{2})*", content)
        assert "".join(contents) == qp_encode(text, charset)
