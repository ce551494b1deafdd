"""Scribes for TEL, GEO, TZ and AGENT."""

from __future__ import annotations

import datetime as dt

from ..data_type import VCardDataType
from ..escaping import escape, unescape
from ..exceptions import CannotParseError
from ..patterns import utc_offset_re
from ..properties import Agent, Geo, Telephone, Timezone
from ..version import VCardVersion
from .base import Embedded, Nested, PropertyScribe, handle_pref_parameter
from .date_time import delta_to_offset

V2_1, V3_0, V4_0 = VCardVersion


class TelephoneScribe(PropertyScribe):
    """
    Free text, or in vCard 4.0 a "tel:" URI with VALUE=uri.
    """

    property_class = Telephone
    name = Telephone.name

    def data_type(self, prop, version):
        if prop.text is None and prop.uri is not None and version is V4_0:
            return VCardDataType.URI
        return VCardDataType.TEXT

    def _parse_text(self, value, data_type, parameters, context):
        if data_type == VCardDataType.URI:
            return Telephone(uri=value)
        return Telephone(text=unescape(value, context.version))

    def _write_text(self, prop, context):
        if prop.text is not None:
            return escape(prop.text, context.version)
        if prop.uri is None:
            return ""
        if context.version is V4_0:
            return prop.uri
        # earlier versions only know the number
        number = prop.uri.split(":", 1)[-1].split(";", 1)[0]
        return escape(number, context.version)

    def _prepare_parameters(self, prop, parameters, version, vcard):
        handle_pref_parameter(prop, parameters, version, vcard)


def format_coordinate(value) -> str:
    return f"{value:.6f}".rstrip("0").rstrip(".")


class GeoScribe(PropertyScribe):
    """
    "lat;long" in vCard 2.1 and 3.0, a "geo:lat,long" URI in 4.0.
    """

    property_class = Geo
    name = Geo.name

    def default_data_type(self, version):
        return VCardDataType.URI if version is V4_0 else VCardDataType.FLOAT

    def _parse_text(self, value, data_type, parameters, context):
        text = value.strip()
        if text.lower().startswith("geo:"):
            coordinates = text[4:].split(";", 1)[0].split(",")
        else:
            coordinates = unescape(text, context.version).split(";")
        try:
            latitude, longitude = (float(c) for c in coordinates[:2])
        except ValueError as e:
            raise CannotParseError(f"Could not parse coordinates from {value!r}") from e
        return Geo(latitude, longitude)

    def _write_text(self, prop, context):
        if prop.latitude is None or prop.longitude is None:
            return ""
        latitude = format_coordinate(prop.latitude)
        longitude = format_coordinate(prop.longitude)
        if context.version is V4_0:
            return f"geo:{latitude},{longitude}"
        return f"{latitude};{longitude}"


def string_to_offset(value):
    """
    Parse "-05:00", "-0500" or "-05" into a timedelta, or return None.
    """
    match = utc_offset_re.match(value.strip())
    if match is None:
        return None
    minutes = int(match.group("hours")) * 60 + int(match.group("minutes") or 0)
    offset = dt.timedelta(minutes=minutes)
    return -offset if match.group("sign") == "-" else offset


class TimezoneScribe(PropertyScribe):
    """
    A UTC offset ("-05:00" in 2.1 and 3.0, "-0500" in 4.0) or a text time zone.
    """

    property_class = Timezone
    name = Timezone.name

    def default_data_type(self, version):
        return VCardDataType.TEXT if version is V4_0 else VCardDataType.UTC_OFFSET

    def data_type(self, prop, version):
        if prop.offset is not None:
            return VCardDataType.UTC_OFFSET
        return VCardDataType.TEXT

    def _parse_text(self, value, data_type, parameters, context):
        value = unescape(value, context.version)
        offset = string_to_offset(value)
        if offset is not None:
            return Timezone(offset=offset)
        if context.version is V2_1:
            raise CannotParseError(f"Could not parse UTC offset {value!r}")
        return Timezone(text=value)

    def _write_text(self, prop, context):
        if prop.offset is not None:
            return delta_to_offset(prop.offset, extended=context.version is not V4_0)
        return escape(prop.text or "", context.version)


class AgentScribe(PropertyScribe):
    """
    An embedded vCard, or a URL.

    vCard 2.1 puts the embedded vCard right after the AGENT line, 3.0 escapes
    it into the property value.
    """

    property_class = Agent
    name = Agent.name

    def default_data_type(self, version):
        return None

    def data_type(self, prop, version):
        if prop.url is not None:
            return VCardDataType.URL if version is V2_1 else VCardDataType.URI
        return None

    def _parse_text(self, value, data_type, parameters, context):
        agent = Agent()
        agent.parameters = parameters
        if data_type in (VCardDataType.URI, VCardDataType.URL):
            agent.url = value
            return agent
        if context.version is V2_1 or not value.strip():
            return Embedded(agent)
        return Embedded(agent, unescape(value, context.version))

    def _write_text(self, prop, context):
        if prop.url is not None:
            return prop.url
        if prop.vcard is not None:
            return Nested(prop.vcard)
        return ""
