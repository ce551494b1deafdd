"""Typed vCard properties."""

from __future__ import annotations

import datetime as dt

from dateutil import tz

from .helper import to_string
from .parameters import Parameters
from .version import VCardVersion

V2_1, V3_0, V4_0 = VCardVersion


class VCardProperty:
    """
    Base class for all properties.

    @cvar name:
        The uppercase property name.
    @cvar versions:
        vCard versions the property exists in.
    @ivar group:
        An optional group prefix (as in "item1.TEL"), used to relate
        properties to one another.
    @ivar parameters:
        The property's Parameters.
    """

    name = ""
    versions = (V2_1, V3_0, V4_0)
    fields = ()

    def __init__(self, group=None, parameters=None):
        self.group = group
        self.parameters = Parameters() if parameters is None else parameters

    def value_repr(self):
        return " ".join(repr(getattr(self, f)) for f in self.fields)

    def __eq__(self, other):
        if type(self) is not type(other):
            return False
        return (
            self.group == other.group
            and self.parameters == other.parameters
            and all(getattr(self, f) == getattr(other, f) for f in self.fields)
        )

    def __repr__(self):
        return f"<{self.name}{self.parameters.as_dict()}{self.value_repr()}>"


# ------------------------------------ text -----------------------------------
class TextProperty(VCardProperty):
    fields = ("value",)

    def __init__(self, value=None, group=None, parameters=None):
        super().__init__(group, parameters)
        self.value = value

    def value_repr(self):
        return self.value


class FormattedName(TextProperty):
    name = "FN"


class Note(TextProperty):
    name = "NOTE"


class Title(TextProperty):
    name = "TITLE"


class Role(TextProperty):
    name = "ROLE"


class Uid(TextProperty):
    name = "UID"


class Url(TextProperty):
    name = "URL"


class Email(TextProperty):
    name = "EMAIL"


class ProductId(TextProperty):
    name = "PRODID"
    versions = (V3_0, V4_0)


class Kind(TextProperty):
    name = "KIND"
    versions = (V4_0,)


class Mailer(TextProperty):
    name = "MAILER"
    versions = (V2_1, V3_0)


class Label(TextProperty):
    """A formatted delivery address, folded into ADR.label when TYPEs match."""

    name = "LABEL"
    versions = (V2_1, V3_0)


class SortString(TextProperty):
    name = "SORT-STRING"
    versions = (V3_0,)


class Classification(TextProperty):
    name = "CLASS"
    versions = (V3_0,)


class Source(TextProperty):
    name = "SOURCE"
    versions = (V3_0, V4_0)


class TextListProperty(VCardProperty):
    fields = ("values",)

    def __init__(self, values=None, group=None, parameters=None):
        super().__init__(group, parameters)
        self.values = list(values or [])

    def value_repr(self):
        return ",".join(self.values)


class Categories(TextListProperty):
    name = "CATEGORIES"
    versions = (V3_0, V4_0)


class Nickname(TextListProperty):
    name = "NICKNAME"
    versions = (V3_0, V4_0)


class Organization(TextListProperty):
    """An organization name followed by its units."""

    name = "ORG"

    def value_repr(self):
        return ";".join(self.values)


# --------------------------------- structured --------------------------------
class StructuredName(VCardProperty):
    """
    A structured name.

    Each name attribute can be a string or a list of strings.
    """

    name = "N"
    fields = ("family", "given", "additional", "prefix", "suffix")

    def __init__(self, family="", given="", additional="", prefix="", suffix="", group=None, parameters=None):
        super().__init__(group, parameters)
        self.family = family
        self.given = given
        self.additional = additional
        self.prefix = prefix
        self.suffix = suffix

    def __str__(self):
        eng_order = ("prefix", "given", "additional", "family", "suffix")
        return " ".join(to_string(getattr(self, val)) for val in eng_order if getattr(self, val))

    def value_repr(self):
        return str(self)


class Address(VCardProperty):
    """
    A structured address.

    Each address attribute can be a string or a list of strings.

    @ivar label:
        The formatted address text, written as a LABEL parameter in vCard 4.0
        and as a separate LABEL property before that.
    """

    name = "ADR"
    fields = ("box", "extended", "street", "city", "region", "code", "country", "label")
    lines = ("box", "extended", "street")
    one_line = ("city", "region", "code")

    def __init__(
        self,
        street="",
        city="",
        region="",
        code="",
        country="",
        box="",
        extended="",
        label=None,
        group=None,
        parameters=None,
    ):
        super().__init__(group, parameters)
        self.box = box
        self.extended = extended
        self.street = street
        self.city = city
        self.region = region
        self.code = code
        self.country = country
        self.label = label

    def __str__(self):
        lines = "\n".join(to_string(getattr(self, val), "\n") for val in self.lines if getattr(self, val))
        one_line = tuple(to_string(getattr(self, val), " ") for val in self.one_line)
        lines += "\n{0!s}, {1!s} {2!s}".format(*one_line)
        if self.country:
            lines += "\n" + to_string(self.country, "\n")
        return lines

    def value_repr(self):
        return str(self)


# ------------------------------- other values --------------------------------
class Telephone(VCardProperty):
    """
    A phone number, as free text or as a "tel:" URI (vCard 4.0).
    """

    name = "TEL"
    fields = ("text", "uri")

    def __init__(self, text=None, uri=None, group=None, parameters=None):
        super().__init__(group, parameters)
        self.text = text
        self.uri = uri

    def value_repr(self):
        return self.uri if self.text is None else self.text


class DateOrTimeProperty(VCardProperty):
    """
    A date or date-time, with text and partial date forms for vCard 4.0.

    @ivar date:
        A datetime.date or datetime.datetime.
    @ivar partial_date:
        A vCard 4.0 reduced accuracy or truncated value such as "--0415",
        kept as written.
    @ivar text:
        A free text value (vCard 4.0 VALUE=text).
    """

    fields = ("date", "partial_date", "text")

    def __init__(self, date=None, partial_date=None, text=None, group=None, parameters=None):
        super().__init__(group, parameters)
        self.date = date
        self.partial_date = partial_date
        self.text = text

    @property
    def has_time(self):
        return isinstance(self.date, dt.datetime)

    def value_repr(self):
        for f in self.fields:
            if getattr(self, f) is not None:
                return str(getattr(self, f))
        return ""


class Birthday(DateOrTimeProperty):
    name = "BDAY"


class Anniversary(DateOrTimeProperty):
    name = "ANNIVERSARY"
    versions = (V4_0,)


class Revision(DateOrTimeProperty):
    name = "REV"


class BinaryProperty(VCardProperty):
    """
    Inline binary data or a URL that points to it.

    @ivar content_type:
        A media type such as "image/jpeg", or the vCard 2.1/3.0 TYPE value
        ("JPEG") if that's all there is.
    """

    fields = ("data", "url", "content_type")

    def __init__(self, data=None, url=None, content_type=None, group=None, parameters=None):
        super().__init__(group, parameters)
        self.data = data
        self.url = url
        self.content_type = content_type

    def value_repr(self):
        if self.data is not None:
            return f" (BINARY {self.name} DATA at 0x{id(self.data)!s}) "
        return self.url


class Photo(BinaryProperty):
    name = "PHOTO"


class Logo(BinaryProperty):
    name = "LOGO"


class Sound(BinaryProperty):
    name = "SOUND"


class Key(BinaryProperty):
    name = "KEY"


class Geo(VCardProperty):
    name = "GEO"
    fields = ("latitude", "longitude")

    def __init__(self, latitude=None, longitude=None, group=None, parameters=None):
        super().__init__(group, parameters)
        self.latitude = latitude
        self.longitude = longitude

    def value_repr(self):
        return f"{self.latitude},{self.longitude}"


class Timezone(VCardProperty):
    """
    A UTC offset (datetime.timedelta) or, in vCard 4.0, a text time zone name.
    """

    name = "TZ"
    fields = ("offset", "text")

    def __init__(self, offset=None, text=None, group=None, parameters=None):
        super().__init__(group, parameters)
        self.offset = offset
        self.text = text

    @property
    def tzinfo(self):
        """
        The time zone as a dateutil tzinfo, or None.
        """
        if self.offset is not None:
            return tz.tzoffset(None, self.offset.total_seconds())
        return tz.gettz(self.text) if self.text else None

    def value_repr(self):
        return str(self.offset) if self.text is None else self.text


class Agent(VCardProperty):
    """
    Someone who acts on behalf of the vCard's entity, as an embedded VCard or a URL.
    """

    name = "AGENT"
    versions = (V2_1, V3_0)
    fields = ("vcard", "url")

    def __init__(self, vcard=None, url=None, group=None, parameters=None):
        super().__init__(group, parameters)
        self.vcard = vcard
        self.url = url

    def value_repr(self):
        return self.url if self.vcard is None else repr(self.vcard)


class RawProperty(VCardProperty):
    """
    A property without a scribe, kept exactly as read.

    @ivar value:
        The value, still escaped.
    @ivar data_type:
        The VALUE parameter it was read with, or None.
    """

    fields = ("name", "value", "data_type")

    def __init__(self, name, value, data_type=None, group=None, parameters=None):
        super().__init__(group, parameters)
        self.name = name
        self.value = value
        self.data_type = data_type

    def value_repr(self):
        return self.value
