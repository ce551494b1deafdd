class VCardError(Exception):
    def __init__(self, msg, line_number=None):
        super().__init__(msg)
        self.msg = msg
        self.line_number = line_number

    def __str__(self):
        if self.line_number is None:
            return repr(self.msg)
        return f"At line {self.line_number!s}: {self.msg!s}"


class ParseError(VCardError):
    def __init__(self, msg, line_number=None, *, inputs=None):
        super().__init__(msg, line_number)
        self.inputs = inputs


class InvalidLineError(ParseError):
    """A logical line that has no property name or no value delimiter."""

    def __init__(self, line, line_number=None):
        super().__init__(f"Failed to parse line: {line!s}", line_number, inputs=line)
        self.line = line


class InvalidVersionError(ParseError):
    """A VERSION property whose value is not a known vCard version."""

    def __init__(self, version, line_number=None):
        super().__init__(f"Unknown vCard version: {version!s}", line_number, inputs=version)
        self.version = version


class CannotParseError(VCardError):
    """
    Raised by a scribe when a property value cannot be unmarshalled.

    The reader keeps the value as a raw property instead.
    """


class ScribeNotFoundError(VCardError):
    def __init__(self, property_class):
        super().__init__(f"No scribe registered for property class {property_class.__name__}")
        self.property_class = property_class


class UnsupportedFormatError(VCardError):
    def __init__(self, scribe, fmt):
        super().__init__(f"{type(scribe).__name__} does not support the {fmt} format")
        self.scribe = scribe
        self.format = fmt
