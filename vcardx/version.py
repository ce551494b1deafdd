"""vCard versions and the per-version syntax rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


@dataclass(frozen=True)
class VersionPolicy:
    """
    Syntax rules that differ between vCard versions.

    @ivar value_escapes:
        Map of the character following a backslash in a property value to the
        character it stands for.
    @ivar escaped_chars:
        Characters escaped with a backslash when a text value is written.
    @ivar escape_newlines:
        Whether newlines in values are written as "\\n" (otherwise they are
        carried by quoted-printable encoding).
    @ivar split_param_values:
        Whether unquoted commas separate parameter values.
    @ivar quoted_param_values:
        Whether double quotes delimit parameter values.
    @ivar trim_param_whitespace:
        Whether whitespace around "=" in parameters is ignored.
    @ivar caret_escaping:
        Whether RFC 6868 caret escaping may be used in parameter values.
    @ivar list_values:
        Whether commas separate the values of structured components.
    """

    value_escapes: tuple
    escaped_chars: str
    escape_newlines: bool
    split_param_values: bool
    quoted_param_values: bool
    trim_param_whitespace: bool
    caret_escaping: bool
    list_values: bool

    def unescape_char(self, char: str):
        """Return what an escaped char stands for, or None if it is not an escape."""
        for escaped, plain in self.value_escapes:
            if char == escaped:
                return plain
        return None


_OLD_POLICY = VersionPolicy(
    value_escapes=(("\\", "\\"), (";", ";"), ("n", "\n"), ("N", "\n")),
    escaped_chars="\\;",
    escape_newlines=False,
    split_param_values=False,
    quoted_param_values=False,
    trim_param_whitespace=True,
    caret_escaping=False,
    list_values=False,
)

_NEW_POLICY = VersionPolicy(
    value_escapes=(("\\", "\\"), (";", ";"), (",", ","), ("n", "\n"), ("N", "\n")),
    escaped_chars="\\;,",
    escape_newlines=True,
    split_param_values=True,
    quoted_param_values=True,
    trim_param_whitespace=False,
    caret_escaping=True,
    list_values=True,
)


@total_ordering
class VCardVersion(Enum):
    V2_1 = "2.1"
    V3_0 = "3.0"
    V4_0 = "4.0"

    @classmethod
    def from_string(cls, value: str):
        """
        Return the version for a VERSION property value, or None.
        """
        value = (value or "").strip()
        for version in cls:
            if version.value == value:
                return version
        return None

    @property
    def policy(self) -> VersionPolicy:
        return _OLD_POLICY if self is VCardVersion.V2_1 else _NEW_POLICY

    @property
    def _rank(self):
        return list(VCardVersion).index(self)

    def __lt__(self, other):
        if not isinstance(other, VCardVersion):
            return NotImplemented
        return self._rank < other._rank

    def __str__(self):
        return self.value


ALL_VERSIONS = tuple(VCardVersion)
