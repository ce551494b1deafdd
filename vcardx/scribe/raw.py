from __future__ import annotations

from ..properties import RawProperty
from ..version import VCardVersion
from .base import Format, PropertyScribe


class RawPropertyScribe(PropertyScribe):
    """
    Keeps a property without a scribe as it was read, value still escaped.
    """

    property_class = RawProperty

    def __init__(self, name):
        self.name = name.upper()

    def supported_versions(self, prop=None):
        return tuple(VCardVersion)

    def default_data_type(self, version):
        return None

    def data_type(self, prop, version):
        return prop.data_type

    def _parse_text(self, value, data_type, parameters, context):
        return RawProperty(context.property_name or self.name, value, data_type)

    def _write_text(self, prop, context):
        return prop.value or ""

    def write_json(self, prop) -> list:
        self._check(Format.JSON)
        return [prop.value or ""]
