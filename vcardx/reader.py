"""Reading vCards from a stream."""

from __future__ import annotations

from dataclasses import dataclass, field

from .data_type import VCardDataType
from .diagnostics import Diagnostics
from .exceptions import InvalidLineError, InvalidVersionError
from .helper import DEFAULT_CHARSET, get_buffer, is_charset, logger, qp_decode, to_unicode
from .parameters import Encoding, Parameters
from .patterns import bad_qp_escape_re
from .properties import Address, Label, RawProperty
from .raw_reader import RawReader
from .scribe import Embedded, Failed, ParseContext, ScribeIndex, Skipped
from .vcard import VCard
from .version import VCardVersion


@dataclass
class _Frame:
    """A vCard between its BEGIN and END lines."""

    vcard: VCard
    line_number: int
    has_version: bool = False
    labels: list = field(default_factory=list)


def guess_parameter_name(value):
    """
    Name a nameless vCard 2.1 parameter: VALUE, ENCODING or TYPE.
    """
    if VCardDataType.find(value) is not None:
        return Parameters.VALUE
    if Encoding.find(value) is not None:
        return Parameters.ENCODING
    return Parameters.TYPE


def normalize_parameters(parameters: Parameters) -> Parameters:
    """
    Name nameless parameters and split TYPE values like "work,voice".
    """
    items = []
    for key, value in parameters:
        if key is None:
            key = guess_parameter_name(value)
        if key == Parameters.TYPE and "," in value:
            items.extend((key, t) for t in value.split(",") if t)
        else:
            items.append((key, value))
    return Parameters(items)


def same_types(a: Parameters, b: Parameters) -> bool:
    return {t.lower() for t in a.types} == {t.lower() for t in b.types}


class VCardReader:
    """
    Read vCards from a stream or a string, one at a time.

    Problems that don't stop the vCard from being read are collected in
    warnings, which is reset by every call to read_next.

    @ivar index:
        The ScribeIndex used to find property scribes.
    @ivar default_version:
        The version of a vCard until its VERSION property is read.
    @ivar default_charset:
        Charset for quoted-printable values without a usable CHARSET.
    """

    def __init__(
        self,
        stream_or_string,
        index=None,
        caret_decoding=True,
        default_version=VCardVersion.V2_1,
        default_charset=DEFAULT_CHARSET,
    ):
        if isinstance(stream_or_string, (str, bytes)):
            stream = get_buffer(to_unicode(stream_or_string))
        else:
            stream = stream_or_string
        self.raw = RawReader(stream, caret_decoding, default_version)
        self.index = ScribeIndex() if index is None else index
        self.default_version = default_version
        self.default_charset = default_charset
        self.warnings = Diagnostics()

    @property
    def caret_decoding(self):
        return self.raw.caret_decoding

    @caret_decoding.setter
    def caret_decoding(self, value):
        self.raw.caret_decoding = value

    def register_scribe(self, scribe):
        self.index.register(scribe)

    def read_next(self):
        """
        Return the next vCard in the stream, or None if there are no more.
        """
        self.warnings = Diagnostics()
        stack = []
        root = None
        pending_agent = None

        while True:
            try:
                line = self.raw.read_line()
            except InvalidVersionError as e:
                self.warnings.add(e.line_number, "VERSION", 28, e.version, self.raw.version)
                if stack:
                    stack[-1].has_version = True
                continue
            except InvalidLineError as e:
                if stack:
                    logger.warning(f"Skipped line {e.line_number}, message: {e.msg}")
                    self.warnings.add(e.line_number, None, 27, e.line)
                continue

            if line is None:
                break

            name = line.name.upper()
            if name == "BEGIN" and line.value.strip().upper() == "VCARD":
                if not stack:
                    self.raw.version = self.default_version
                vcard = VCard(self.raw.version)
                if pending_agent is not None:
                    pending_agent.vcard = vcard
                    pending_agent = None
                if root is None:
                    root = vcard
                stack.append(_Frame(vcard, line.line_number))
                continue

            if not stack:
                # not inside a vCard yet
                continue

            frame = stack[-1]
            if name == "END" and line.value.strip().upper() == "VCARD":
                self._close(stack.pop())
                if not stack:
                    break
                self.raw.version = stack[-1].vcard.version
                continue

            if name == "VERSION":
                if frame.vcard.properties:
                    self.warnings.add(line.line_number, "VERSION", 29)
                frame.vcard.version = self.raw.version
                frame.has_version = True
                continue

            pending_agent = self._read_property(line, frame)

        if stack:
            logger.warning(f"vCard starting at line {stack[0].line_number} was never closed")
            while stack:
                frame = stack.pop()
                self.warnings.add(frame.line_number, None, 31)
                self._close(frame)
        return root

    def _read_property(self, line, frame):
        """
        Add the property on line to the open vCard.

        Return the Agent property if its vCard comes next (vCard 2.1).
        """
        version = self.raw.version
        context = ParseContext(version, self.warnings, line.line_number, line.name)
        parameters = normalize_parameters(line.parameters)
        value = self._decode_quoted_printable(line.value, parameters, context)

        scribe = self.index.lookup(line.name)
        explicit_type = parameters.value_type
        parameters.value_type = None
        data_type = explicit_type or scribe.default_data_type(version)

        result = scribe.parse_text(value, data_type, parameters.copy(), context)

        if isinstance(result, Skipped):
            context.warn(22, result.reason)
            return None

        if isinstance(result, Failed):
            context.warn(25, value, result.error.msg)
            prop = RawProperty(line.name, value, explicit_type, line.group, parameters)
            frame.vcard.add(prop)
            return None

        prop = result.property
        prop.group = line.group
        frame.vcard.add(prop)

        if isinstance(result, Embedded):
            if result.text is None:
                return prop
            nested = VCardReader(
                result.text,
                index=self.index,
                caret_decoding=self.caret_decoding,
                default_version=self.default_version,
                default_charset=self.default_charset,
            )
            prop.vcard = nested.read_next()
            for warning in nested.warnings:
                context.warn(26, warning)
            return None

        if isinstance(prop, Label) and version is not VCardVersion.V4_0:
            frame.labels.append(prop)
        return None

    def _decode_quoted_printable(self, value, parameters, context):
        if not parameters.is_quoted_printable():
            return value
        for encoding in parameters.get(Parameters.ENCODING):
            if encoding.upper() == Encoding.QUOTED_PRINTABLE:
                parameters.remove(Parameters.ENCODING, encoding)

        charset = self.default_charset
        charset_name = parameters.charset
        if charset_name:
            if is_charset(charset_name):
                charset = charset_name
            else:
                context.warn(23, charset_name, charset)

        if bad_qp_escape_re.search(value):
            context.warn(38, value)
        try:
            return qp_decode(value, charset)
        except UnicodeDecodeError:
            context.warn(39, charset)
            return qp_decode(value, charset, errors="replace")

    def _close(self, frame):
        """
        Finish a vCard: check its VERSION and attach LABELs to addresses.
        """
        if not frame.has_version:
            self.warnings.add(frame.line_number, None, 30, frame.vcard.version)
        addresses = frame.vcard.get_properties(Address)
        for label in frame.labels:
            for address in addresses:
                if address.label is None and same_types(address.parameters, label.parameters):
                    address.label = label.value
                    frame.vcard.remove(label)
                    break

    def read_all(self) -> list:
        """
        Return every remaining vCard, with the warnings of all of them.
        """
        vcards = []
        warnings = Diagnostics()
        while True:
            vcard = self.read_next()
            warnings.extend(self.warnings)
            if vcard is None:
                break
            vcards.append(vcard)
        self.warnings = warnings
        return vcards

    def __iter__(self):
        while True:
            vcard = self.read_next()
            if vcard is None:
                return
            yield vcard

    def close(self):
        self.raw.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


def read_components(stream_or_string, **options):
    """
    Generate one VCard at a time from a stream or a string.
    """
    yield from VCardReader(stream_or_string, **options)


def read_one(stream_or_string, **options):
    """
    Return the first VCard from a stream or a string, None if there is none.
    """
    return next(read_components(stream_or_string, **options), None)
