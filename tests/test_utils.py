import datetime as dt

import pytest
from dateutil.tz import tzoffset, tzutc

from vcardx.helper import is_charset, qp_decode, qp_encode, to_list, to_string, to_vname
from vcardx.scribe.binary import data_uri, parse_data_uri
from vcardx.scribe.date_time import date_to_string, delta_to_offset, string_to_date
from vcardx.scribe.other import format_coordinate, string_to_offset


def test_to_list():
    assert to_list("") == [""]
    assert to_list("Knudson") == ["Knudson"]
    assert to_list(("a", "b")) == ["a", "b"]


def test_to_string():
    assert to_string(["Suite 100", "Floor 2"], "\n") == "Suite 100\nFloor 2"
    assert to_string("plain") == "plain"


def test_to_vname():
    assert to_vname("sort_string") == "SORT-STRING"
    assert to_vname("tel_list", 5) == "TEL"


def test_date_to_string():
    tc = {dt.date(2007, 5, 1): "20070501", dt.date(1997, 3, 17): "19970317"}
    for _date, out in tc.items():
        assert date_to_string(_date) == out
    assert date_to_string(dt.date(1997, 3, 17), extended=True) == "1997-03-17"


def test_datetime_to_string():
    tc = {
        (dt.datetime(2000, 10, 29, 3, 0), False): "20001029T030000",
        (dt.datetime(2007, 3, 13, 12, 34, 32, tzinfo=tzutc()), True): "2007-03-13T12:34:32Z",
        (dt.datetime(2009, 8, 8, 14, 30, tzinfo=tzoffset(None, -18000)), False): "20090808T143000-0500",
    }
    for inp, out in tc.items():
        assert date_to_string(*inp) == out


def test_delta_to_offset():
    assert delta_to_offset(dt.timedelta(hours=-5)) == "-0500"
    assert delta_to_offset(dt.timedelta(hours=5, minutes=30), extended=True) == "+05:30"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1996-04-15", dt.date(1996, 4, 15)),
        ("19960415", dt.date(1996, 4, 15)),
        ("19960415T231000Z", dt.datetime(1996, 4, 15, 23, 10, tzinfo=tzutc())),
        ("1996-04-15T23:10:00-05:00", dt.datetime(1996, 4, 15, 23, 10, tzinfo=tzoffset(None, -18000))),
    ],
)
def test_string_to_date(value, expected):
    assert string_to_date(value) == expected


@pytest.mark.parametrize("value", ["--0415", "1996-04", "April 15", ""])
def test_string_to_date_rejects_partial_dates(value):
    with pytest.raises(ValueError):
        string_to_date(value)


def test_string_to_offset():
    assert string_to_offset("-05:00") == dt.timedelta(hours=-5)
    assert string_to_offset("+0530") == dt.timedelta(hours=5, minutes=30)
    assert string_to_offset("-05") == dt.timedelta(hours=-5)
    assert string_to_offset("America/New_York") is None


def test_quoted_printable():
    assert qp_encode("a=b\r\nc ü") == "a=3Db=0D=0Ac =C3=BC"
    assert qp_encode("ü", "ISO-8859-1") == "=FC"
    assert qp_decode("Gr=FC=DFe", "ISO-8859-1") == "Grüße"
    assert qp_decode("a=3Db=0D=0Ac =C3=BC") == "a=b\r\nc ü"


def test_is_charset():
    assert is_charset("ISO-8859-1")
    assert is_charset("utf-8")
    assert not is_charset("X-UNKNOWN")


def test_data_uri():
    assert data_uri("image/jpeg", b"abc") == "data:image/jpeg;base64,YWJj"
    assert parse_data_uri("data:image/jpeg;base64,YWJj") == ("image/jpeg", b"abc")
    assert parse_data_uri("data:;base64,YWJj") == (None, b"abc")
    assert parse_data_uri("data:text/plain,abc") is None
    assert parse_data_uri("http://example.com/a.jpg") is None


def test_format_coordinate():
    assert format_coordinate(46.772673) == "46.772673"
    assert format_coordinate(-71.5) == "-71.5"
    assert format_coordinate(10.0) == "10"
