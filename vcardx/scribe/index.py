"""Finding the scribe for a property name or class."""

from __future__ import annotations

from ..exceptions import ScribeNotFoundError
from ..properties import RawProperty
from .raw import RawPropertyScribe

# --------------------------- standard scribe registry --------------------------
_standard_registry = {}


def register_standard(scribe):
    """
    Register a scribe that every ScribeIndex knows about.
    """
    _standard_registry[scribe.name.upper()] = scribe


class ScribeIndex:
    """
    Looks up scribes by property name, property class or xCard element name.

    Scribes registered on an index take precedence over the standard ones,
    so a custom scribe can replace the handling of a standard property. The
    last scribe registered for a name wins.
    """

    def __init__(self):
        self.extended = {}

    def register(self, scribe, name=None):
        if not name:
            name = scribe.name
        self.extended[name.upper()] = scribe

    def unregister(self, scribe):
        for name, registered in list(self.extended.items()):
            if registered is scribe:
                del self.extended[name]

    def _all(self):
        scribes = dict(_standard_registry)
        scribes.update(self.extended)
        return scribes

    def find(self, name):
        """
        Return the scribe registered for name, or None.
        """
        name = name.upper()
        scribe = self.extended.get(name)
        return scribe if scribe is not None else _standard_registry.get(name)

    def lookup(self, name):
        """
        Return the scribe for name, a RawPropertyScribe if there is none.
        """
        return self.find(name) or RawPropertyScribe(name)

    def has_scribe(self, prop) -> bool:
        try:
            self.lookup_property(prop)
        except ScribeNotFoundError:
            return False
        return True

    def lookup_property(self, prop):
        """
        Return the scribe that writes prop.

        Raise ScribeNotFoundError if prop's class has no scribe, which is an
        error in how the index was set up.
        """
        if isinstance(prop, RawProperty):
            return RawPropertyScribe(prop.name)
        candidates = [s for s in self._all().values() if s.property_class is type(prop)]
        if not candidates:
            raise ScribeNotFoundError(type(prop))
        # a custom scribe beats the standard one
        for scribe in candidates:
            if scribe in self.extended.values():
                return scribe
        return candidates[0]

    def lookup_qname(self, namespace, local_name):
        for scribe in self._all().values():
            if scribe.qname == (namespace, local_name.lower()):
                return scribe
        return None
