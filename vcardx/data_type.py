"""Data types named by the VALUE parameter."""

from __future__ import annotations


class VCardDataType:
    """
    A property value data type.

    Known types are class attributes, unknown names read from a VALUE
    parameter are created on demand and compare by their lower-cased name.
    """

    __known = {}

    def __init__(self, name):
        self.name = name.lower()

    @classmethod
    def _define(cls, name):
        data_type = cls(name)
        cls.__known[data_type.name] = data_type
        return data_type

    @classmethod
    def find(cls, name):
        """
        Return the known data type called name, or None.
        """
        if name is None:
            return None
        return cls.__known.get(name.strip().lower())

    @classmethod
    def get(cls, name):
        """
        Return the known data type called name, or a new one.
        """
        return cls.find(name) or cls(name.strip())

    @classmethod
    def all(cls):
        return list(cls.__known.values())

    def __eq__(self, other):
        return isinstance(other, VCardDataType) and self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"<VCardDataType: {self.name}>"


VCardDataType.BINARY = VCardDataType._define("binary")
VCardDataType.BOOLEAN = VCardDataType._define("boolean")
VCardDataType.CONTENT_ID = VCardDataType._define("content-id")
VCardDataType.DATE = VCardDataType._define("date")
VCardDataType.DATE_TIME = VCardDataType._define("date-time")
VCardDataType.DATE_AND_OR_TIME = VCardDataType._define("date-and-or-time")
VCardDataType.FLOAT = VCardDataType._define("float")
VCardDataType.INTEGER = VCardDataType._define("integer")
VCardDataType.LANGUAGE_TAG = VCardDataType._define("language-tag")
VCardDataType.TEXT = VCardDataType._define("text")
VCardDataType.TIME = VCardDataType._define("time")
VCardDataType.TIMESTAMP = VCardDataType._define("timestamp")
VCardDataType.URI = VCardDataType._define("uri")
VCardDataType.URL = VCardDataType._define("url")
VCardDataType.UTC_OFFSET = VCardDataType._define("utc-offset")
