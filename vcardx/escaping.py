"""Escaping of property values and parameter values."""

from __future__ import annotations

from .helper import Character as Char
from .patterns import newline_re
from .version import VCardVersion


def unescape(text: str, version: VCardVersion) -> str:
    r"""
    Remove backslash escaping from a property value.

    vCard 2.1 knows "\\", "\;" and "\n", 3.0 and 4.0 also "\,".
    Unknown sequences and a trailing backslash are kept as they are.
    """
    if "\\" not in text:
        return text
    policy = version.policy
    out = []
    chars = iter(text)
    for char in chars:
        if char != "\\":
            out.append(char)
            continue
        following = next(chars, None)
        if following is None:
            out.append(char)
            break
        plain = policy.unescape_char(following)
        out.append(char + following if plain is None else plain)
    return "".join(out)


def escape(text: str, version: VCardVersion) -> str:
    """
    Backslash escape a property value, the inverse of unescape.

    Newlines are left alone for vCard 2.1, which writes such values
    quoted-printable instead.
    """
    policy = version.policy
    for char in policy.escaped_chars:
        text = text.replace(char, "\\" + char)
    if policy.escape_newlines:
        text = newline_re.sub(r"\\n", text)
    return text


def _split(value: str, separator: str) -> list:
    """
    Split on every separator not preceded by a backslash, keeping escapes.
    """
    parts = []
    current = []
    chars = iter(value)
    for char in chars:
        if char == "\\":
            current.append(char)
            following = next(chars, None)
            if following is not None:
                current.append(following)
        elif char == separator:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return parts


def split_list(value: str, version: VCardVersion) -> list:
    """
    Split a comma separated value and unescape each item.

    An empty value is an empty list.
    """
    if value == "":
        return []
    return [unescape(part, version) for part in _split(value, ",")]


def join_list(values, version: VCardVersion) -> str:
    return ",".join(escape(v, version) for v in values)


def split_components(value: str, version: VCardVersion) -> list:
    """
    Split a semicolon separated value into unescaped strings.
    """
    return [unescape(part, version) for part in _split(value, ";")]


def split_structured(value: str, version: VCardVersion) -> list:
    """
    Split a semicolon separated value into components.

    Each component is a list of unescaped values: 3.0 and 4.0 allow several
    comma separated values per component, 2.1 commas are plain text.
    """
    components = []
    for part in _split(value, ";"):
        if version.policy.list_values:
            components.append(split_list(part, version))
        else:
            components.append([unescape(part, version)] if part else [])
    return components


def join_structured(components, version: VCardVersion, include_trailing_semicolons=True) -> str:
    """
    Join components (each a string or a list of strings) with semicolons.
    """
    fields = []
    for component in components:
        if component is None:
            component = []
        elif isinstance(component, str):
            component = [component]
        if version.policy.list_values:
            fields.append(join_list(component, version))
        else:
            fields.append(",".join(escape(v, version) for v in component))
    value = ";".join(fields)
    if not include_trailing_semicolons:
        stripped = value.rstrip(";")
        # a semicolon after an odd run of backslashes is text, not a separator
        backslashes = len(stripped) - len(stripped.rstrip("\\"))
        value = stripped + ";" if backslashes % 2 else stripped
    return value


# --------------------------- parameter values (RFC 6868) ----------------------
_CARET_DECODE = {"^": "^", "n": Char.LF, "'": '"'}


def decode_caret(text: str) -> str:
    if "^" not in text:
        return text
    out = []
    chars = iter(text)
    for char in chars:
        if char != "^":
            out.append(char)
            continue
        following = next(chars, None)
        if following is None:
            out.append(char)
            break
        plain = _CARET_DECODE.get(following)
        out.append(char + following if plain is None else plain)
    return "".join(out)


def encode_caret(text: str) -> str:
    text = text.replace("^", "^^")
    text = newline_re.sub("^n", text)
    return text.replace('"', "^'")


def needs_quoting(value: str) -> bool:
    return any(char in value for char in ",;:")


def quote_param_value(value: str) -> str:
    """
    Return value, or "value" if ',' or ';' or ':' is in value.
    """
    return f'"{value}"' if needs_quoting(value) else value
