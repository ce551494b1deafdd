"""The contract between the reader/writer and a property's scribe."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..data_type import VCardDataType
from ..diagnostics import Diagnostics
from ..escaping import escape, join_list, join_structured, unescape
from ..exceptions import CannotParseError, UnsupportedFormatError
from ..helper import XML_NAMESPACE
from ..parameters import Parameters
from ..version import VCardVersion


class Format(Enum):
    TEXT = "text"
    JSON = "json"
    XML = "xml"
    HTML = "html"


# ------------------------------------ results --------------------------------
@dataclass(frozen=True)
class Parsed:
    property: object


@dataclass(frozen=True)
class Skipped:
    """The property asked not to be read or written, with why."""

    reason: str


@dataclass(frozen=True)
class Failed:
    """The value couldn't be parsed, the reader keeps it as a RawProperty."""

    error: CannotParseError


@dataclass(frozen=True)
class Embedded:
    """
    A property that holds a whole vCard (AGENT).

    text is the unescaped vCard text, or None when the vCard follows as
    the next BEGIN:VCARD (vCard 2.1).
    """

    property: object
    text: str = None


@dataclass(frozen=True)
class Written:
    value: str


@dataclass(frozen=True)
class Nested:
    """A property written as a whole vCard (AGENT)."""

    vcard: object


# ----------------------------------- contexts --------------------------------
@dataclass
class ParseContext:
    version: VCardVersion
    warnings: Diagnostics = field(default_factory=Diagnostics)
    line_number: int = None
    property_name: str = None

    def warn(self, code, *args):
        return self.warnings.add(self.line_number, self.property_name, code, *args)


@dataclass
class WriteContext:
    version: VCardVersion
    warnings: Diagnostics = field(default_factory=Diagnostics)
    vcard: object = None
    include_trailing_semicolons: bool = None

    @property
    def trailing_semicolons(self):
        if self.include_trailing_semicolons is None:
            return self.version is not VCardVersion.V4_0
        return self.include_trailing_semicolons


# ------------------------------------ scribe ---------------------------------
class PropertyScribe:
    """
    Reads and writes one kind of property.

    Scribes hold no state of their own, a single instance serves every
    reader and writer.

    @cvar property_class:
        The VCardProperty subclass handled.
    @cvar name:
        The uppercase property name.
    @cvar formats:
        The Formats the scribe can read and write.
    """

    property_class = None
    name = ""
    formats = frozenset((Format.TEXT, Format.JSON))

    @property
    def qname(self):
        """The xCard element name, as (namespace, local name)."""
        return XML_NAMESPACE, self.name.lower()

    def supports(self, fmt: Format) -> bool:
        return fmt in self.formats

    def supported_versions(self, prop=None):
        return self.property_class.versions

    def default_data_type(self, version: VCardVersion):
        return VCardDataType.TEXT

    def data_type(self, prop, version: VCardVersion):
        """
        The data type prop's value is written as.
        """
        return self.default_data_type(version)

    def prepare_parameters(self, prop, version: VCardVersion, vcard=None) -> Parameters:
        """
        Return a copy of prop's parameters, adjusted for writing as version.
        """
        parameters = prop.parameters.copy()
        self._prepare_parameters(prop, parameters, version, vcard)
        return parameters

    def _prepare_parameters(self, prop, parameters, version, vcard):
        pass

    # --------------------------------- text ----------------------------------
    def parse_text(self, value: str, data_type, parameters: Parameters, context: ParseContext):
        """
        Unmarshal a property value.

        Return Parsed, Skipped, Failed or Embedded.
        """
        try:
            result = self._parse_text(value, data_type, parameters, context)
        except CannotParseError as e:
            return Failed(e)
        if isinstance(result, (Skipped, Embedded)):
            return result
        result.parameters = parameters
        return Parsed(result)

    def write_text(self, prop, context: WriteContext):
        """
        Marshal a property value, return Written, Skipped or Nested.
        """
        result = self._write_text(prop, context)
        if isinstance(result, (Skipped, Nested)):
            return result
        return Written(result)

    def _parse_text(self, value, data_type, parameters, context):
        raise NotImplementedError

    def _write_text(self, prop, context):
        raise NotImplementedError

    # --------------------------------- jCard ---------------------------------
    def parse_json(self, values: list, data_type, parameters: Parameters, context: ParseContext):
        """
        Unmarshal the value part of a jCard property.

        values holds strings, or lists of strings for structured values.
        """
        self._check(Format.JSON)
        version = VCardVersion.V4_0
        if len(values) == 1 and isinstance(values[0], list):
            text = join_structured(values[0], version)
        elif len(values) > 1:
            text = join_list([str(v) for v in values], version)
        elif values:
            text = escape(str(values[0]), version)
        else:
            text = ""
        return self.parse_text(text, data_type, parameters, context)

    def write_json(self, prop) -> list:
        """
        Marshal a property value for jCard, as a list of values.
        """
        self._check(Format.JSON)
        result = self.write_text(prop, WriteContext(VCardVersion.V4_0))
        if not isinstance(result, Written):
            return []
        return [unescape(result.value, VCardVersion.V4_0)]

    # ------------------------------ xCard, hCard -----------------------------
    def parse_xml(self, element, parameters, context):
        self._check(Format.XML)

    def write_xml(self, prop, element):
        self._check(Format.XML)

    def parse_html(self, element, context):
        self._check(Format.HTML)

    def _check(self, fmt):
        if not self.supports(fmt):
            raise UnsupportedFormatError(self, fmt.value)

    def __repr__(self):
        return f"<{type(self).__name__}: {self.name}>"


def handle_pref_parameter(prop, parameters, version, vcard):
    """
    Convert between the vCard 4.0 PREF parameter and TYPE=pref.

    For 2.1 and 3.0 only the property with the lowest PREF among the vCard's
    properties of the same class gets TYPE=pref.
    """
    if version is VCardVersion.V4_0:
        for t in parameters.types:
            if t.lower() == "pref":
                parameters.remove(Parameters.TYPE, t)
                parameters.pref = 1
                break
        return

    pref = parameters.get_pref()
    if pref is None:
        return
    parameters.replace(Parameters.PREF, None)
    most_preferred = prop
    if vcard is not None:
        lowest = None
        for other in vcard.get_properties(type(prop)):
            other_pref = other.parameters.get_pref()
            if other_pref is not None and (lowest is None or other_pref < lowest):
                lowest, most_preferred = other_pref, other
    if most_preferred is prop:
        parameters.add_type("pref")
