"""Tests for reading vCards."""

import datetime as dt
from io import StringIO

import pytest
from dateutil.tz import tzoffset, tzutc

from vcardx import VCardReader, read_components, read_one
from vcardx.exceptions import InvalidLineError, InvalidVersionError
from vcardx.parameters import Parameters
from vcardx.properties import Label, Note, RawProperty
from vcardx.raw_reader import RawReader
from vcardx.scribe import ScribeIndex, Skipped, TextScribe
from vcardx.version import VCardVersion

from .common import five_hours, get_test_file

V2_1, V3_0, V4_0 = VCardVersion


def card_text(*lines, version="3.0"):
    body = ["BEGIN:VCARD", f"VERSION:{version}", *lines, "END:VCARD"]
    return "\r\n".join(body) + "\r\n"


def test_read_2_1():
    """A vCard 2.1 file with quoted-printable values, nameless parameters and an AGENT"""
    reader = VCardReader(get_test_file("vcard21.vcf"))
    card = reader.read_next()

    assert card.version is V2_1
    assert card.n.family == "Doe"
    assert card.n.prefix == "Mr."
    assert card.fn.value == "John Doe"
    assert card.org.values == ["Acme; Inc.", "Sales"]

    work, home = card.tel_list
    assert work.text == "(111) 555-1212"
    assert work.parameters.types == ["WORK", "VOICE"]
    assert home.parameters.types == ["HOME", "VOICE", "PREF"]

    assert card.adr.street == "100 Waters Edge"
    assert card.adr.country == "United States of America"
    assert card.adr.label == "100 Waters Edge\r\nBaytown, LA 30314\r\nUnited States of America"
    assert card.get_properties(Label) == []

    assert card.note.value == "Grüße aus München"
    assert list(card.note.parameters) == [("CHARSET", "ISO-8859-1")]
    assert card.email.parameters.types == ["PREF", "INTERNET"]

    agent = card.agent.vcard
    assert agent.version is V2_1
    assert agent.fn.value == "Jane Agent"
    assert agent.tel.text == "555-0000"

    assert card.rev.date == dt.datetime(2008, 4, 24, 19, 52, 43, tzinfo=tzutc())
    assert len(reader.warnings) == 0
    assert reader.read_next() is None


def test_read_3_0():
    reader = VCardReader(get_test_file("vcard30.vcf"))
    card = reader.read_next()

    assert card.version is V3_0
    assert card.n.family == "Gump"
    assert card.nickname.values == ["Gumpy", "Forrest"]

    work, home = card.tel_list
    assert work.parameters.types == ["WORK", "VOICE"]
    assert home.parameters.types == ["home", "voice"]

    assert card.adr.label == "100 Waters Edge\nBaytown, LA 30314\nUnited States of America"
    assert card.adr.parameters.types == ["WORK", "PREF"]
    assert card.bday.date == dt.date(1944, 6, 6)
    assert card.note.value == (
        "Line one\nLine two, with a comma; and a semicolon. This note is long enough to be folded."
    )

    custom = card.x_custom
    assert isinstance(custom, RawProperty)
    assert custom.value == "raw\\,value"
    assert custom.parameters.types == ["foo"]

    assert card.url.group == "item1"
    assert card.url.value == "http://example.com/forrest"
    assert card.categories.values == ["shrimp", "running"]
    assert card.rev.date == dt.datetime(2008, 4, 24, 19, 52, 43, tzinfo=tzutc())
    assert len(reader.warnings) == 0


def test_read_4_0():
    reader = VCardReader(get_test_file("vcard40.vcf"))
    card = reader.read_next()

    assert card.version is V4_0
    assert card.n.suffix == ["ing. jr", "M.Sc."]

    partial, text = card.bday_list
    assert partial.partial_date == "--0203"
    assert text.text == "not a date"
    assert card.anniversary.date == dt.datetime(2009, 8, 8, 14, 30, tzinfo=tzoffset(None, -18000))

    assert card.gender.value == "M"
    assert card.lang.parameters.pref == 1

    work, cell = card.tel_list
    assert work.uri == "tel:+1-418-656-9254;ext=102"
    assert list(work.parameters) == [("TYPE", "work"), ("TYPE", "voice"), ("PREF", "1")]
    assert cell.parameters.types == ["work", "cell", "voice", "video", "text"]

    assert card.geo.latitude == pytest.approx(46.772673)
    assert card.key.url == "http://www.viagenie.ca/simon.perreault/simon.asc"
    assert card.tz.offset == -five_hours
    assert card.adr.extended == "Suite D2-630"
    assert card.adr.label == "Simon Perreault\nSuite D2-630\n2875 Laurier\nQuebec, QC G1V 2M2\nCanada"
    assert "LABEL" not in card.adr.parameters

    assert reader.warnings.codes() == [6]


def test_bad_lines():
    """An unparseable line between two valid ones is skipped with one warning"""
    reader = VCardReader(get_test_file("bad_lines.vcf"))
    card = reader.read_next()

    assert card.fn.value == "Bad Lines"
    assert card.tel.text == "555-1234"
    assert reader.warnings.codes() == [27, 25, 28]
    assert reader.warnings[0].line_number == 5

    (bday,) = card.get_raw_properties()
    assert bday.name == "BDAY"
    assert bday.value == "yesterday"
    # the unknown version is ignored
    assert card.version is V3_0


def test_unclosed_vcard():
    reader = VCardReader(get_test_file("unclosed.vcf"))
    card = reader.read_next()
    assert card.version is V3_0
    assert card.fn.value == "No Version"
    assert card.note.value == "never closed"
    assert reader.warnings.codes() == [29, 31]
    assert reader.read_next() is None


def test_missing_version():
    text = "BEGIN:VCARD\r\nFN:x\r\nEND:VCARD\r\n"
    reader = VCardReader(text)
    assert reader.read_next().version is V2_1
    assert reader.warnings.codes() == [30]

    assert read_one(text, default_version=V3_0).version is V3_0


def test_unfolding():
    card = read_one(card_text("NOTE:line1", " second"))
    assert card.note.value == "line1second"


def test_read_components():
    text = card_text("FN:One") + "\r\n" + card_text("FN:Two", version="4.0")
    cards = list(read_components(text))
    assert [c.fn.value for c in cards] == ["One", "Two"]
    assert [c.version for c in cards] == [V3_0, V4_0]

    # the version of one vCard doesn't carry over to the next
    text = card_text("FN:One") + "BEGIN:VCARD\r\nFN:Two\r\nEND:VCARD\r\n"
    assert [c.version for c in read_components(text)] == [V3_0, V2_1]


def test_read_all():
    reader = VCardReader(card_text("FN:One", "BDAY:never") + card_text("FN:Two", "BDAY:soon"))
    cards = reader.read_all()
    assert len(cards) == 2
    assert reader.warnings.codes() == [25, 25]


def test_read_one_empty():
    assert read_one("") is None
    assert read_one("FN:not in a vCard\r\n") is None


def test_bytes_input():
    card = read_one(card_text("FN:Zoë").encode("utf-8"))
    assert card.fn.value == "Zoë"


def test_quoted_printable_charsets():
    text = card_text(
        "NOTE;ENCODING=QUOTED-PRINTABLE;CHARSET=X-UNKNOWN:caf=C3=A9",
        "NOTE;ENCODING=QUOTED-PRINTABLE:100=ZZ",
        "NOTE;ENCODING=QUOTED-PRINTABLE;CHARSET=UTF-8:caf=E9",
        version="2.1",
    )
    reader = VCardReader(text)
    card = reader.read_next()
    unknown, malformed, undecodable = card.note_list
    assert unknown.value == "café"
    assert malformed.value == "100=ZZ"
    assert undecodable.value == "caf\ufffd"
    assert reader.warnings.codes() == [23, 38, 39]


def test_nameless_parameter_names():
    card = read_one(card_text("PHOTO;URL;GIF:http://example.com/a.gif", "TEL;QUOTED-PRINTABLE;CELL:555", version="2.1"))
    assert card.photo.url == "http://example.com/a.gif"
    assert card.photo.content_type == "GIF"
    assert list(card.tel.parameters) == [("TYPE", "CELL")]


def test_agent_3_0():
    card = read_one(card_text(r"AGENT:BEGIN:VCARD\nVERSION:3.0\nFN:Agent Smith\nEND:VCARD"))
    assert card.agent.vcard.fn.value == "Agent Smith"


def test_embedded_vcard_warnings():
    reader = VCardReader(card_text(r"AGENT:BEGIN:VCARD\nVERSION:3.0\nbogus\nEND:VCARD"))
    card = reader.read_next()
    assert card.agent.vcard is not None
    assert reader.warnings.codes() == [26]
    assert "bogus" in reader.warnings[0].message


class SkippingScribe(TextScribe):
    def _parse_text(self, value, data_type, parameters, context):
        return Skipped("not wanted")


def test_skipped_property():
    index = ScribeIndex()
    index.register(SkippingScribe(Note))
    reader = VCardReader(card_text("NOTE:skip me", "FN:kept"), index=index)
    card = reader.read_next()
    assert card.get_properties(Note) == []
    assert card.fn.value == "kept"
    assert reader.warnings.codes() == [22]


def test_unknown_properties_are_raw():
    card = read_one(card_text("X-UNKNOWN;X-P=1:some\\,raw;value", "BEGIN:VALARM", "END:VALARM"))
    unknown, begin, end = card.get_raw_properties()
    assert (unknown.name, unknown.value) == ("X-UNKNOWN", "some\\,raw;value")
    assert unknown.parameters == Parameters([("X-P", "1")])
    assert (begin.name, begin.value) == ("BEGIN", "VALARM")
    assert end.name == "END"


def test_context_manager_closes_stream():
    stream = StringIO(card_text("FN:x"))
    with VCardReader(stream) as reader:
        assert reader.read_next().fn.value == "x"
    assert stream.closed


def test_raw_reader():
    reader = RawReader(StringIO("BEGIN:VCARD\r\nVERSION:3.0\r\nTEL;TYPE=a,b:1\r\nnonsense\r\nVERSION:5\r\n"))
    assert reader.read_line().name == "BEGIN"
    assert reader.read_line().value == "3.0"
    assert reader.version is V3_0
    assert reader.read_line().parameters.types == ["a", "b"]
    with pytest.raises(InvalidLineError):
        reader.read_line()
    with pytest.raises(InvalidVersionError) as exc_info:
        reader.read_line()
    assert exc_info.value.version == "5"
    assert reader.version is V3_0
    assert reader.read_line() is None
