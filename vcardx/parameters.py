"""Property parameters."""

from __future__ import annotations

from .data_type import VCardDataType


class Encoding:
    """Values of the ENCODING parameter."""

    QUOTED_PRINTABLE = "QUOTED-PRINTABLE"
    BASE64 = "BASE64"
    B = "b"
    EIGHT_BIT = "8BIT"
    SEVEN_BIT = "7BIT"

    known = (QUOTED_PRINTABLE, BASE64, B, EIGHT_BIT, SEVEN_BIT)

    @classmethod
    def find(cls, value):
        """
        Return the known encoding matching value case-insensitively, or None.
        """
        for encoding in cls.known:
            if encoding.lower() == (value or "").lower():
                return encoding
        return None


def _key(key):
    return None if key is None else key.upper()


class Parameters:
    """
    An ordered multimap of parameter names to values.

    Names are case-insensitive and stored uppercased. A name may appear any
    number of times, and the name None holds nameless vCard 2.1 values
    (for example the WORK in "ADR;WORK:...").

    For example::
      ;TYPE=home,work;PREF=1 -> [("TYPE", "home"), ("TYPE", "work"), ("PREF", "1")]
    """

    ALTID = "ALTID"
    CALSCALE = "CALSCALE"
    CHARSET = "CHARSET"
    ENCODING = "ENCODING"
    GEO = "GEO"
    INDEX = "INDEX"
    LABEL = "LABEL"
    LANGUAGE = "LANGUAGE"
    LEVEL = "LEVEL"
    MEDIATYPE = "MEDIATYPE"
    PID = "PID"
    PREF = "PREF"
    SORT_AS = "SORT-AS"
    TYPE = "TYPE"
    TZ = "TZ"
    VALUE = "VALUE"

    def __init__(self, items=None):
        self.items = []
        for key, value in items or ():
            self.put(key, value)

    # -------------------------------- multimap --------------------------------
    def first(self, key, default=None):
        key = _key(key)
        for k, v in self.items:
            if k == key:
                return v
        return default

    def get(self, key) -> list:
        key = _key(key)
        return [v for k, v in self.items if k == key]

    def put(self, key, value):
        self.items.append((_key(key), value))

    def put_all(self, key, values):
        for value in values:
            self.put(key, value)

    def remove(self, key, value) -> bool:
        """
        Remove the first occurrence of key with value.
        """
        entry = (_key(key), value)
        if entry in self.items:
            self.items.remove(entry)
            return True
        return False

    def remove_all(self, key) -> list:
        key = _key(key)
        removed = [v for k, v in self.items if k == key]
        self.items = [(k, v) for k, v in self.items if k != key]
        return removed

    def replace(self, key, value):
        """
        Set key to the single value (or remove it when value is None).

        The new value takes the place of the first existing occurrence, so the
        order of the other parameters does not change.
        """
        key = _key(key)
        position = next((i for i, (k, _) in enumerate(self.items) if k == key), None)
        self.remove_all(key)
        if value is None:
            return
        if position is None:
            self.items.append((key, value))
        else:
            self.items.insert(position, (key, value))

    def keys(self) -> list:
        keys = []
        for k, _ in self.items:
            if k not in keys:
                keys.append(k)
        return keys

    def as_dict(self) -> dict:
        return {k: self.get(k) for k in self.keys()}

    def copy(self) -> Parameters:
        copied = Parameters()
        copied.items = list(self.items)
        return copied

    def clear(self):
        self.items = []

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __bool__(self):
        return bool(self.items)

    def __contains__(self, key):
        key = _key(key)
        return any(k == key for k, _ in self.items)

    def __eq__(self, other):
        return isinstance(other, Parameters) and self.items == other.items

    def __repr__(self):
        return f"<Parameters{self.as_dict()}>"

    # ----------------------------- typed access --------------------------------
    def _integer(self, key, warnings, property_name=None):
        value = self.first(key)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            if warnings is not None:
                warnings.add(None, property_name, 5, key, value)
            return None

    def get_pref(self, warnings=None, property_name=None):
        """
        Return PREF as an int, None if absent or malformed.

        A malformed value is reported to warnings (a Diagnostics) when given.
        """
        return self._integer(self.PREF, warnings, property_name)

    def get_index(self, warnings=None, property_name=None):
        return self._integer(self.INDEX, warnings, property_name)

    @property
    def pref(self):
        return self.get_pref()

    @pref.setter
    def pref(self, value):
        self.replace(self.PREF, None if value is None else str(value))

    @property
    def index(self):
        return self.get_index()

    @index.setter
    def index(self, value):
        self.replace(self.INDEX, None if value is None else str(value))

    @property
    def value_type(self):
        value = self.first(self.VALUE)
        return None if value is None else VCardDataType.get(value)

    @value_type.setter
    def value_type(self, data_type):
        self.replace(self.VALUE, None if data_type is None else str(data_type))

    @property
    def types(self) -> list:
        return self.get(self.TYPE)

    @property
    def type(self):
        return self.first(self.TYPE)

    def add_type(self, value):
        self.put(self.TYPE, value)

    def remove_type(self, value) -> bool:
        for t in self.types:
            if t.lower() == value.lower():
                return self.remove(self.TYPE, t)
        return False

    def has_type(self, value) -> bool:
        return any(t.lower() == value.lower() for t in self.types)

    @property
    def pids(self) -> list:
        return self.get(self.PID)

    def is_quoted_printable(self) -> bool:
        """
        Whether the value is quoted-printable encoded.

        vCard 2.1 allows the encoding as a nameless parameter.
        """
        values = self.get(self.ENCODING) + self.get(None)
        return any(v.upper() == Encoding.QUOTED_PRINTABLE for v in values)


def _single_value(key):
    def getter(self):
        return self.first(key)

    def setter(self, value):
        self.replace(key, value)

    return property(getter, setter, doc=f"The first {key} parameter value.")


for _name, _key_name in (
    ("altid", Parameters.ALTID),
    ("calscale", Parameters.CALSCALE),
    ("charset", Parameters.CHARSET),
    ("encoding", Parameters.ENCODING),
    ("geo", Parameters.GEO),
    ("label", Parameters.LABEL),
    ("language", Parameters.LANGUAGE),
    ("level", Parameters.LEVEL),
    ("mediatype", Parameters.MEDIATYPE),
    ("sort_as", Parameters.SORT_AS),
    ("timezone", Parameters.TZ),
):
    setattr(Parameters, _name, _single_value(_key_name))
