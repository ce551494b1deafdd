"""Recoverable problems found while reading or writing."""

from __future__ import annotations

from dataclasses import dataclass

from .helper import logger

MESSAGES = {
    5: "{0} parameter has a malformed value: {1!r}",
    6: "Date value could not be parsed, stored as text: {0}",
    8: "Property is not supported by vCard {0} and was not written.",
    22: "Property has requested that it be skipped: {0}",
    23: "Unknown character set {0!r}, decoded with {1!r} instead.",
    25: "Property value could not be parsed and was kept as a raw property. Value: {0!r}, reason: {1}",
    26: "Problem in the embedded vCard: {0}",
    27: "Skipped an unparseable line: {0}",
    28: "Unknown vCard version {0!r}, using {1} instead.",
    29: "VERSION is not the first property of the vCard.",
    30: "vCard has no VERSION property, assumed {0}.",
    31: "vCard was never closed with END:VCARD.",
    32: "{0} parameter value {1!r} was written as {2!r} for vCard {3}.",
    38: "Quoted-printable value has a malformed escape sequence: {0!r}",
    39: "Quoted-printable value is not valid {0}, undecodable bytes replaced.",
}


@dataclass(frozen=True)
class Diagnostic:
    message: str
    line_number: int = None
    property_name: str = None
    code: int = None

    def __str__(self):
        prefix = []
        if self.line_number is not None:
            prefix.append(f"Line {self.line_number}")
        if self.property_name is not None:
            prefix.append(f"{self.property_name} property")
        if self.code is not None:
            prefix.append(f"[{self.code}]")
        return f"{' '.join(prefix)}: {self.message}" if prefix else self.message


class Diagnostics:
    """
    The diagnostics of one read or write operation.

    Passed explicitly to everything that can record a problem, so nothing is
    shared between readers or writers.
    """

    def __init__(self):
        self.items = []

    def add(self, line_number, property_name, code, *args) -> Diagnostic:
        """
        Record a diagnostic, code is a key of MESSAGES or a literal message.
        """
        if isinstance(code, int):
            message = MESSAGES[code].format(*args)
        else:
            message, code = code, None
        diagnostic = Diagnostic(message, line_number, property_name, code)
        logger.debug(str(diagnostic))
        self.items.append(diagnostic)
        return diagnostic

    def extend(self, diagnostics):
        self.items.extend(diagnostics)

    def codes(self) -> list:
        return [d.code for d in self.items]

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __repr__(self):
        return f"<Diagnostics: {self.items!r}>"
