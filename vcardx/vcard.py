"""The vCard document."""

from __future__ import annotations

from .helper import to_vname
from .properties import RawProperty


class VCard:
    """
    An ordered list of properties plus the version the vCard was read as.

    For convenience, properties are accessible as attributes, the first
    property with a name as vcard.tel and all of them as vcard.tel_list.
    Underscores are converted to dashes, so vcard.sort_string finds
    SORT-STRING and vcard.x_custom finds X-CUSTOM.

    @ivar version:
        The VCardVersion the vCard was read with, None for a new vCard.
    @ivar properties:
        The properties in the order they were read or added, without BEGIN,
        END and VERSION.
    """

    def __init__(self, version=None, properties=None):
        self.version = version
        self.properties = list(properties or [])

    def add(self, prop):
        self.properties.append(prop)
        return prop

    def remove(self, prop):
        """
        Remove prop, matching by identity.
        """
        for i, p in enumerate(self.properties):
            if p is prop:
                del self.properties[i]
                return

    def get_properties(self, name_or_class) -> list:
        """
        Return the properties with a name, or of a property class.
        """
        if isinstance(name_or_class, str):
            name = name_or_class.upper()
            return [p for p in self.properties if p.name.upper() == name]
        return [p for p in self.properties if isinstance(p, name_or_class)]

    def get_property(self, name_or_class, default=None):
        found = self.get_properties(name_or_class)
        return found[0] if found else default

    def get_raw_properties(self) -> list:
        return [p for p in self.properties if isinstance(p, RawProperty)]

    def __getattr__(self, name):
        """
        For convenience, make the properties directly accessible.
        """
        # if the object is being re-created by pickle, self.properties may not
        # be set, don't get into an infinite loop over the issue
        if name.startswith("__") or name == "properties":
            raise AttributeError(name)
        if name.endswith("_list"):
            return self.get_properties(to_vname(name, 5))
        found = self.get_properties(to_vname(name))
        if not found:
            raise AttributeError(name)
        return found[0]

    def __iter__(self):
        return iter(self.properties)

    def __len__(self):
        return len(self.properties)

    def __eq__(self, other):
        return isinstance(other, VCard) and self.version == other.version and self.properties == other.properties

    def serialize(self, buf=None, version=None, **kwargs):
        """
        Serialize to buf if it exists, otherwise return a string.

        The vCard is written as version, or as the version it was read with.
        """
        from .writer import write

        return write([self], buf, version or self.version, **kwargs)

    def __repr__(self):
        return f"<VCARD| {self.properties}>"
