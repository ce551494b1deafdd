"""Writing vCards to a stream."""

from __future__ import annotations

from .data_type import VCardDataType
from .diagnostics import Diagnostics
from .escaping import escape
from .folding import FoldingScheme
from .helper import PRODUCT_ID, get_buffer
from .parameters import Encoding, Parameters
from .properties import Address, Label, ProductId, RawProperty
from .raw_writer import RawWriter
from .scribe import Nested, ScribeIndex, Skipped, WriteContext
from .vcard import VCard
from .version import VCardVersion

V2_1, V3_0, V4_0 = VCardVersion

# a date-and-or-time value doesn't need a VALUE parameter for these
_DATE_AND_OR_TIME_TYPES = (VCardDataType.DATE, VCardDataType.DATE_TIME, VCardDataType.TIME)


def needs_value_parameter(data_type, default) -> bool:
    if data_type is None or data_type == default:
        return False
    return not (default == VCardDataType.DATE_AND_OR_TIME and data_type in _DATE_AND_OR_TIME_TYPES)


class VCardWriter:
    """
    Write vCards to a stream as one vCard version.

    @ivar version:
        The VCardVersion written.
    @ivar add_prodid:
        Whether a PRODID property (X-PRODID in 2.1) is added to vCards that
        don't have one.
    @ivar version_strict:
        Whether properties that don't exist in version are left out.
    @ivar include_trailing_semicolons:
        Whether structured values keep their empty trailing components, None
        for the version's default.
    @ivar warnings:
        Diagnostics of the last vCard written.
    """

    def __init__(
        self,
        stream,
        version=V3_0,
        index=None,
        folding=FoldingScheme.MIME_DIR,
        newline=None,
        add_prodid=True,
        caret_encoding=False,
        version_strict=True,
        include_trailing_semicolons=None,
        width_unit="chars",
    ):
        self.stream = stream
        self.version = version
        self.index = ScribeIndex() if index is None else index
        self.folding = folding
        self.add_prodid = add_prodid
        self.version_strict = version_strict
        self.include_trailing_semicolons = include_trailing_semicolons
        self.warnings = Diagnostics()
        self.raw = RawWriter(stream, version, folding, newline, width_unit, caret_encoding, self.warnings)

    @property
    def caret_encoding(self):
        return self.raw.caret_encoding

    @caret_encoding.setter
    def caret_encoding(self, value):
        self.raw.caret_encoding = value

    def register_scribe(self, scribe):
        self.index.register(scribe)

    def write(self, vcard: VCard):
        """
        Write a vCard.

        Raise ScribeNotFoundError if one of its properties has no scribe.
        """
        self.warnings = self.raw.warnings = Diagnostics()
        self._write_vcard(vcard, self.add_prodid)

    def _write_vcard(self, vcard, add_prodid):
        raw = self.raw
        raw.write_begin()
        raw.write_version()
        if add_prodid and not self._has_prodid(vcard):
            name = "X-PRODID" if self.version is V2_1 else ProductId.name
            raw.write_property(None, name, escape(PRODUCT_ID, self.version))
        for prop in vcard:
            self._write_property(prop, vcard)
        raw.write_end()

    def _has_prodid(self, vcard):
        if self.version is V2_1:
            return any(isinstance(p, RawProperty) and p.name.upper() == "X-PRODID" for p in vcard)
        return any(isinstance(p, ProductId) for p in vcard)

    def _write_property(self, prop, vcard):
        version = self.version
        scribe = self.index.lookup_property(prop)
        if self.version_strict and version not in scribe.supported_versions(prop):
            self.warnings.add(None, prop.name, 8, version)
            return

        context = WriteContext(version, self.warnings, vcard, self.include_trailing_semicolons)
        result = scribe.write_text(prop, context)
        if isinstance(result, Skipped):
            self.warnings.add(None, prop.name, 22, result.reason)
            return

        parameters = self._prepare_parameters(scribe, prop, vcard)

        if isinstance(result, Nested):
            self._write_nested(prop, parameters, result.vcard)
            return

        self.raw.write_property(prop.group, prop.name, result.value, parameters)

        if isinstance(prop, Address) and prop.label and version is not V4_0:
            label = Label(prop.label, parameters=Parameters((Parameters.TYPE, t) for t in parameters.types))
            self._write_property(label, vcard)

    def _prepare_parameters(self, scribe, prop, vcard):
        version = self.version
        parameters = scribe.prepare_parameters(prop, version, vcard)

        data_type = scribe.data_type(prop, version)
        parameters.replace(Parameters.VALUE, None)
        if needs_value_parameter(data_type, scribe.default_data_type(version)):
            name = str(data_type)
            parameters.replace(Parameters.VALUE, name.upper() if version is V2_1 else name)

        if version is not V2_1:
            for encoding in parameters.get(Parameters.ENCODING):
                if encoding.upper() == Encoding.QUOTED_PRINTABLE:
                    parameters.remove(Parameters.ENCODING, encoding)
            parameters.replace(Parameters.CHARSET, None)
        return parameters

    def _write_nested(self, prop, parameters, vcard):
        """
        Write an AGENT's vCard: inline after the property in 2.1, escaped
        into the property value after that.
        """
        if self.version is V2_1:
            self.raw.write_property(prop.group, prop.name, "", parameters)
            self._write_vcard(vcard, add_prodid=False)
            return

        buf = get_buffer()
        nested = VCardWriter(
            buf,
            self.version,
            index=self.index,
            folding=FoldingScheme.NO_FOLDING,
            add_prodid=False,
            caret_encoding=self.caret_encoding,
            version_strict=self.version_strict,
            include_trailing_semicolons=self.include_trailing_semicolons,
        )
        nested.write(vcard)
        self.warnings.extend(nested.warnings)
        value = escape(buf.getvalue().rstrip("\r\n"), self.version)
        self.raw.write_property(prop.group, prop.name, value, parameters)

    def flush(self):
        self.raw.flush()

    def close(self):
        self.raw.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


def write(vcards, buf=None, version=None, **options):
    """
    Serialize vCards to buf if it exists, otherwise return a string.

    vcards may be a single VCard or an iterable of them, written as version
    (3.0 by default).
    """
    if isinstance(vcards, VCard):
        vcards = [vcards]
    out = get_buffer(buf)
    writer = VCardWriter(out, version or V3_0, **options)
    for vcard in vcards:
        writer.write(vcard)
    writer.flush()
    if buf is None:
        return out.getvalue()
    return None
