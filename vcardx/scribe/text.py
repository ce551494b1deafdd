"""Scribes for single and multi valued text properties."""

from __future__ import annotations

from ..data_type import VCardDataType
from ..escaping import escape, join_list, split_list, unescape
from ..version import VCardVersion
from .base import Format, PropertyScribe, handle_pref_parameter


class TextScribe(PropertyScribe):
    """
    A property whose value is one string.

    @ivar escaped:
        False for URI values, which are written as they are.
    """

    def __init__(self, property_class, data_type=VCardDataType.TEXT, escaped=True, pref=False):
        self.property_class = property_class
        self.name = property_class.name
        self._data_type = data_type
        self.escaped = escaped
        self.pref = pref

    def default_data_type(self, version):
        return self._data_type

    def _parse_text(self, value, data_type, parameters, context):
        if self.escaped:
            value = unescape(value, context.version)
        return self.property_class(value)

    def _write_text(self, prop, context):
        value = prop.value or ""
        return escape(value, context.version) if self.escaped else value

    def _prepare_parameters(self, prop, parameters, version, vcard):
        if self.pref:
            handle_pref_parameter(prop, parameters, version, vcard)


class UriScribe(TextScribe):
    """
    A URI valued property, VALUE=url in vCard 2.1 and uri after that.
    """

    def __init__(self, property_class):
        super().__init__(property_class, VCardDataType.URI, escaped=False)

    def default_data_type(self, version):
        return VCardDataType.URL if version is VCardVersion.V2_1 else VCardDataType.URI


class TextListScribe(PropertyScribe):
    """
    A comma separated list of text values.
    """

    def __init__(self, property_class):
        self.property_class = property_class
        self.name = property_class.name

    def _parse_text(self, value, data_type, parameters, context):
        return self.property_class(split_list(value, context.version))

    def _write_text(self, prop, context):
        return join_list(prop.values, context.version)

    def write_json(self, prop) -> list:
        self._check(Format.JSON)
        return list(prop.values) or [""]
