"""Scribes turn property values into typed properties and back."""

from .. import properties as p
from .base import (
    Embedded,
    Failed,
    Format,
    Nested,
    ParseContext,
    Parsed,
    PropertyScribe,
    Skipped,
    WriteContext,
    Written,
    handle_pref_parameter,
)
from .binary import BinaryScribe
from .date_time import DateOrTimeScribe, RevisionScribe
from .index import ScribeIndex, register_standard
from .other import AgentScribe, GeoScribe, TelephoneScribe, TimezoneScribe
from .raw import RawPropertyScribe
from .structured import AddressScribe, OrganizationScribe, StructuredNameScribe
from .text import TextListScribe, TextScribe, UriScribe

for _scribe in (
    TextScribe(p.FormattedName),
    TextScribe(p.Note),
    TextScribe(p.Title),
    TextScribe(p.Role),
    TextScribe(p.Uid),
    TextScribe(p.Email, pref=True),
    TextScribe(p.ProductId),
    TextScribe(p.Kind),
    TextScribe(p.Mailer),
    TextScribe(p.Label),
    TextScribe(p.SortString),
    TextScribe(p.Classification),
    UriScribe(p.Url),
    UriScribe(p.Source),
    TextListScribe(p.Categories),
    TextListScribe(p.Nickname),
    StructuredNameScribe(),
    AddressScribe(),
    OrganizationScribe(),
    TelephoneScribe(),
    DateOrTimeScribe(p.Birthday),
    DateOrTimeScribe(p.Anniversary),
    RevisionScribe(),
    BinaryScribe(p.Photo, "image/"),
    BinaryScribe(p.Logo, "image/"),
    BinaryScribe(p.Sound, "audio/"),
    BinaryScribe(p.Key, "application/"),
    GeoScribe(),
    TimezoneScribe(),
    AgentScribe(),
):
    register_standard(_scribe)

__all__ = [
    "AddressScribe",
    "AgentScribe",
    "BinaryScribe",
    "DateOrTimeScribe",
    "Embedded",
    "Failed",
    "Format",
    "GeoScribe",
    "Nested",
    "OrganizationScribe",
    "ParseContext",
    "Parsed",
    "PropertyScribe",
    "RawPropertyScribe",
    "RevisionScribe",
    "ScribeIndex",
    "Skipped",
    "StructuredNameScribe",
    "TelephoneScribe",
    "TextListScribe",
    "TextScribe",
    "TimezoneScribe",
    "UriScribe",
    "WriteContext",
    "Written",
    "handle_pref_parameter",
]
