"""Scribes for BDAY, ANNIVERSARY and REV."""

from __future__ import annotations

import datetime as dt

from dateutil.parser import isoparse

from ..data_type import VCardDataType
from ..escaping import escape, unescape
from ..exceptions import CannotParseError
from ..patterns import full_date_re, partial_date_re
from ..properties import Revision
from ..version import VCardVersion
from .base import PropertyScribe

V2_1, V3_0, V4_0 = VCardVersion


def num_to_digits(num, places=2):
    return str(abs(num)).zfill(places)


def delta_to_offset(delta, extended=False):
    abs_delta = abs(delta)
    hours = num_to_digits(abs_delta.seconds // 3600 + abs_delta.days * 24)
    minutes = num_to_digits((abs_delta.seconds // 60) % 60)
    sign_string = "+" if abs_delta == delta else "-"
    return f"{sign_string}{hours}:{minutes}" if extended else f"{sign_string}{hours}{minutes}"


def date_to_string(date, extended=False) -> str:
    """
    Output a date or datetime, "19960415" or (extended) "1996-04-15".

    A datetime in UTC ends with "Z", one with another offset with the offset.
    """
    if not isinstance(date, dt.datetime):
        return date.strftime("%Y-%m-%d" if extended else "%Y%m%d")

    datestr = date.strftime("%Y-%m-%dT%H:%M:%S" if extended else "%Y%m%dT%H%M%S")
    offset = date.utcoffset()
    if offset is None:
        return datestr
    if offset == dt.timedelta(0):
        return datestr + "Z"
    return datestr + delta_to_offset(offset, extended)


def string_to_date(value: str):
    """
    Parse a date or date-time in basic or extended ISO 8601 format.

    Raise ValueError if it isn't one.
    """
    value = value.strip()
    if not full_date_re.match(value):
        raise ValueError(f"Not a complete date: {value!r}")
    parsed = isoparse(value)
    return parsed if "T" in value.upper() else parsed.date()


class DateOrTimeScribe(PropertyScribe):
    """
    A date, date-time, and in vCard 4.0 also a partial date or free text.

    vCard 3.0 writes the extended format ("1996-04-15"), 2.1 and 4.0 the
    basic one ("19960415").
    """

    def __init__(self, property_class):
        self.property_class = property_class
        self.name = property_class.name

    def default_data_type(self, version):
        return VCardDataType.DATE_AND_OR_TIME if version is V4_0 else None

    def data_type(self, prop, version):
        if version is not V4_0:
            return None
        if prop.text is not None:
            return VCardDataType.TEXT
        if prop.date is not None:
            return VCardDataType.DATE_TIME if prop.has_time else VCardDataType.DATE
        if prop.partial_date is not None:
            return VCardDataType.DATE_TIME if "T" in prop.partial_date else VCardDataType.DATE
        return VCardDataType.DATE_AND_OR_TIME

    def _parse_text(self, value, data_type, parameters, context):
        version = context.version
        value = unescape(value, version)
        if version is V4_0 and data_type == VCardDataType.TEXT:
            return self.property_class(text=value)

        try:
            return self.property_class(date=string_to_date(value))
        except (ValueError, OverflowError) as e:
            if version is not V4_0:
                raise CannotParseError(f"Could not parse date value {value!r}") from e

        if partial_date_re.match(value):
            return self.property_class(partial_date=value)
        context.warn(6, value)
        return self.property_class(text=value)

    def _write_text(self, prop, context):
        version = context.version
        if prop.date is not None:
            return date_to_string(prop.date, extended=version is V3_0)
        if version is not V4_0:
            return ""
        if prop.partial_date is not None:
            return prop.partial_date
        if prop.text is not None:
            return escape(prop.text, version)
        return ""

    def write_json(self, prop) -> list:
        if prop.date is not None:
            return [date_to_string(prop.date, extended=True)]
        return super().write_json(prop)


class RevisionScribe(DateOrTimeScribe):
    """
    REV is a timestamp in vCard 4.0.
    """

    def __init__(self):
        super().__init__(Revision)

    def default_data_type(self, version):
        return VCardDataType.TIMESTAMP if version is V4_0 else None

    def data_type(self, prop, version):
        if version is V4_0 and prop.date is not None:
            return VCardDataType.TIMESTAMP
        return super().data_type(prop, version)