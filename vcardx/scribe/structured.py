"""Scribes for N, ADR and ORG."""

from __future__ import annotations

from ..escaping import escape, join_structured, split_components, split_structured
from ..helper import to_list, to_list_or_string
from ..parameters import Parameters
from ..properties import Address, Organization, StructuredName
from ..version import VCardVersion
from .base import Format, PropertyScribe, handle_pref_parameter

NAME_ORDER = ("family", "given", "additional", "prefix", "suffix")
ADDRESS_ORDER = ("box", "extended", "street", "city", "region", "code", "country")


def split_fields(value, version, order):
    """
    Return a dict of field name to string or list from a structured value.
    """
    components = split_structured(value, version)
    components += [[]] * (len(order) - len(components))
    return {f: to_list_or_string(c) if c else "" for f, c in zip(order, components)}


def serialize_fields(prop, order, version, include_trailing_semicolons=True):
    """
    Turn a property's fields into a ';' and ',' separated string.
    """
    components = [to_list(getattr(prop, f) or "") for f in order]
    return join_structured(components, version, include_trailing_semicolons)


class StructuredScribe(PropertyScribe):
    order = ()

    def _parse_text(self, value, data_type, parameters, context):
        return self.property_class(**split_fields(value, context.version, self.order))

    def _write_text(self, prop, context):
        return serialize_fields(prop, self.order, context.version, context.trailing_semicolons)

    def write_json(self, prop) -> list:
        self._check(Format.JSON)
        return [[getattr(prop, f) or "" for f in self.order]]


class StructuredNameScribe(StructuredScribe):
    property_class = StructuredName
    name = StructuredName.name
    order = NAME_ORDER


class AddressScribe(StructuredScribe):
    """
    The LABEL parameter is read into Address.label. It is written back as a
    parameter for vCard 4.0 only. For 2.1 and 3.0 the writer puts a LABEL
    property after the address instead.
    """

    property_class = Address
    name = Address.name
    order = ADDRESS_ORDER

    def _parse_text(self, value, data_type, parameters, context):
        address = super()._parse_text(value, data_type, parameters, context)
        address.label = parameters.label
        parameters.replace(Parameters.LABEL, None)
        return address

    def _prepare_parameters(self, prop, parameters, version, vcard):
        handle_pref_parameter(prop, parameters, version, vcard)
        label = prop.label if version is VCardVersion.V4_0 else None
        parameters.replace(Parameters.LABEL, label)


class OrganizationScribe(PropertyScribe):
    """
    The organization name and units, separated by semicolons.
    """

    property_class = Organization
    name = Organization.name

    def _parse_text(self, value, data_type, parameters, context):
        return Organization(split_components(value, context.version))

    def _write_text(self, prop, context):
        return ";".join(escape(v, context.version) for v in prop.values)

    def write_json(self, prop) -> list:
        self._check(Format.JSON)
        if len(prop.values) == 1:
            return list(prop.values)
        return [list(prop.values)]
