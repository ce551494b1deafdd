"""Split one logical line into group, name, parameters and value."""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import InvalidLineError
from .helper import Character as Char
from .parameters import Parameters
from .version import VCardVersion


@dataclass(frozen=True)
class RawLine:
    """
    One unfolded property line.

    For example::
      item1.TEL;TYPE=home:555-1234 -> RawLine("TEL", "555-1234", {TYPE: [home]}, "item1")

    @ivar value:
        The value as it appears in the line: still backslash escaped and, if
        the parameters say so, still quoted-printable encoded.
    @ivar parameters:
        Parameter values have their escaping already removed.
    """

    name: str
    value: str
    parameters: Parameters = field(default_factory=Parameters)
    group: str = None
    line_number: int = None


def _head_escape(char, following, version, caret):
    """Return what an escape sequence in the line head stands for."""
    if caret:
        return {"^": "^", "n": Char.LF, "'": '"'}.get(following, char + following)
    if following == "\\":
        return "\\"
    if following in "nN":
        return Char.LF
    if following == ";":
        return ";"
    if following == '"' and version is not VCardVersion.V2_1:
        return '"'
    return char + following


def parse_line(text: str, version=VCardVersion.V2_1, caret_decoding=True, line_number=None) -> RawLine:
    """
    Parse a logical line.

    Raise InvalidLineError if the line has no property name or no ":".
    """
    policy = version.policy
    caret_decoding = caret_decoding and policy.caret_escaping
    group = name = param_name = None
    parameters = Parameters()
    buf = []
    in_quotes = False
    escape_char = None

    def take():
        value = "".join(buf)
        buf.clear()
        return value

    for i, char in enumerate(text):
        if escape_char is not None:
            buf.append(_head_escape(escape_char, char, version, escape_char == "^"))
            escape_char = None
            continue

        if char == "\\" or (char == "^" and caret_decoding):
            escape_char = char
            continue

        if char == "." and group is None and name is None:
            group = take()
            continue

        if char in ";:" and not in_quotes:
            if name is None:
                name = take()
            else:
                value = take()
                if policy.trim_param_whitespace:
                    value = value.lstrip()
                parameters.put(param_name, value)
                param_name = None
            if char == ":":
                if not name:
                    break
                return RawLine(name, text[i + 1 :], parameters, group or None, line_number)
            continue

        if char == "," and name is not None and not in_quotes and policy.split_param_values:
            parameters.put(param_name, take())
            continue

        if char == "=" and name is not None and param_name is None:
            param_name = take()
            if policy.trim_param_whitespace:
                param_name = param_name.strip()
            continue

        if char == '"' and name is not None and policy.quoted_param_values:
            in_quotes = not in_quotes
            continue

        buf.append(char)

    raise InvalidLineError(text, line_number)
