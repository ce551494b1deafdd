"""Write property lines, one at a time."""

from __future__ import annotations

from .diagnostics import Diagnostics
from .escaping import encode_caret, quote_param_value
from .exceptions import VCardError
from .folding import FoldedLineWriter, FoldingScheme
from .helper import Character as Char
from .helper import DEFAULT_CHARSET, is_charset
from .parameters import Encoding, Parameters
from .patterns import bad_name_char_re, bad_old_param_char_re, control_char_re, newline_re
from .version import VCardVersion

V2_1, V3_0, V4_0 = VCardVersion


def check_name(name, what="property"):
    """
    Raise VCardError if name can't be used as a group or property name.
    """
    if not name or bad_name_char_re.search(name) or name[0] in Char.SPACEORTAB:
        raise VCardError(f"Invalid {what} name: {name!r}")


def sanitize_parameter_value(value: str, version: VCardVersion, caret_encoding=False) -> str:
    """
    Remove or replace what a parameter value can't hold in version.

    2.1 values lose ",.:=[]" and control characters. 3.0 values can't hold
    newlines, and a double quote becomes a single one unless caret encoding
    is used.
    """
    if version is V2_1:
        value = newline_re.sub(Char.SPACE, value)
        return bad_old_param_char_re.sub("", value)
    value = control_char_re.sub("", value)
    if caret_encoding:
        return value
    if version is V3_0:
        value = newline_re.sub(Char.SPACE, value)
    return value.replace('"', "'")


def encode_parameter_value(value: str, version: VCardVersion, caret_encoding=False) -> str:
    """
    Escape, and in 3.0 and 4.0 quote, a sanitized parameter value.
    """
    value = value.replace("\\", "\\\\")
    if version is V2_1:
        return value.replace(";", "\\;")
    if caret_encoding:
        value = encode_caret(value)
    else:
        value = newline_re.sub(r"\\n", value)
    return quote_param_value(value)


class RawWriter:
    """
    Write BEGIN, END, VERSION and property lines to a stream.

    Values are written as given, they must already be escaped. Lines are
    folded according to the folding scheme.

    @ivar caret_encoding:
        Whether parameter values are written with RFC 6868 caret escapes
        (3.0 and 4.0 only).
    @ivar warnings:
        Diagnostics for parameter values that had to be changed.
    """

    def __init__(
        self,
        stream,
        version=V3_0,
        folding=FoldingScheme.MIME_DIR,
        newline=None,
        width_unit="chars",
        caret_encoding=False,
        warnings=None,
    ):
        self.writer = FoldedLineWriter.from_scheme(stream, folding, newline, width_unit)
        self.version = version
        self.caret_encoding = caret_encoding
        self.warnings = Diagnostics() if warnings is None else warnings

    @property
    def uses_caret_encoding(self):
        return self.caret_encoding and self.version.policy.caret_escaping

    def write_begin(self, component="VCARD"):
        self.write_property(None, "BEGIN", component)

    def write_end(self, component="VCARD"):
        self.write_property(None, "END", component)

    def write_version(self):
        self.write_property(None, "VERSION", str(self.version))

    def write_property(self, group, name, value, parameters=None):
        """
        Write one property line.

        A 2.1 value with newlines is written quoted-printable, with an
        ENCODING and a CHARSET parameter added. In 3.0 and 4.0 newlines
        left in the value are written as "\\n".
        """
        if group is not None:
            check_name(group, "group")
        check_name(name)
        parameters = Parameters() if parameters is None else parameters.copy()
        value = value or ""

        quoted_printable = False
        charset = None
        if self.version is V2_1:
            if newline_re.search(value) or parameters.is_quoted_printable():
                quoted_printable = True
                charset = self._prepare_quoted_printable(parameters, value)
        else:
            value = newline_re.sub(r"\\n", value)

        writer = self.writer
        if group:
            writer.write(f"{group}.")
        writer.write(name)
        self._write_parameters(name, parameters)
        writer.write(":")
        writer.write(value, quoted_printable, charset)
        writer.write_newline()

    def _prepare_quoted_printable(self, parameters, value):
        """
        Move ENCODING and CHARSET to the end of the parameters, return the
        charset to encode with.

        The two are always written last and in this order, so a line read
        back and written again comes out the same.
        """
        charset = parameters.charset
        if not (charset and is_charset(charset) and self._can_encode(value, charset)):
            charset = DEFAULT_CHARSET.upper()

        for key in (Parameters.ENCODING, None):
            for v in parameters.get(key):
                if v.upper() == Encoding.QUOTED_PRINTABLE:
                    parameters.remove(key, v)
        parameters.replace(Parameters.CHARSET, None)
        parameters.put(Parameters.ENCODING, Encoding.QUOTED_PRINTABLE)
        parameters.put(Parameters.CHARSET, charset)
        return charset

    @staticmethod
    def _can_encode(value, charset):
        try:
            value.encode(charset)
        except UnicodeEncodeError:
            return False
        return True

    def _sanitize(self, property_name, key, value):
        clean = sanitize_parameter_value(value, self.version, self.uses_caret_encoding)
        if clean != value:
            self.warnings.add(None, property_name, 32, key or "Nameless", value, clean, self.version)
        return clean

    def _write_parameters(self, property_name, parameters):
        writer = self.writer
        caret = self.uses_caret_encoding

        if self.version is V2_1:
            for key, value in parameters:
                value = encode_parameter_value(self._sanitize(property_name, key, value), V2_1)
                if key is None:
                    writer.write(f";{value}")
                elif key == Parameters.TYPE:
                    writer.write(f";{value.upper()}")
                else:
                    writer.write(f";{key}={value}")
            return

        for key in parameters.keys():
            values = [
                encode_parameter_value(self._sanitize(property_name, key, v), self.version, caret)
                for v in parameters.get(key)
            ]
            if key is None:
                for value in values:
                    writer.write(f";{value}")
            else:
                writer.write(f";{key}={','.join(values)}")

    def flush(self):
        self.writer.flush()

    def close(self):
        self.writer.close()
