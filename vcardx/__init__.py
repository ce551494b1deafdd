"""
vcardx: reading and writing vCard 2.1, 3.0 and 4.0

Parses vCard files into VCard objects holding typed properties, and writes
them back out as any of the three versions.

Usage
-----
    >>> import vcardx
    >>> card = vcardx.read_one("BEGIN:VCARD\\r\\nVERSION:3.0\\r\\nFN:Jeffrey Harris\\r\\nEND:VCARD\\r\\n")
    >>> card.fn.value
    'Jeffrey Harris'
    >>> vcardx.write(card, version=vcardx.VCardVersion.V4_0, add_prodid=False).splitlines()
    ['BEGIN:VCARD', 'VERSION:4.0', 'FN:Jeffrey Harris', 'END:VCARD']
"""

from .data_type import VCardDataType
from .diagnostics import Diagnostic, Diagnostics
from .exceptions import (
    CannotParseError,
    InvalidLineError,
    InvalidVersionError,
    ParseError,
    ScribeNotFoundError,
    UnsupportedFormatError,
    VCardError,
)
from .folding import FoldedLineWriter, FoldingScheme
from .helper import VERSION
from .parameters import Encoding, Parameters
from .properties import (
    Address,
    Agent,
    Anniversary,
    Birthday,
    Categories,
    Classification,
    Email,
    FormattedName,
    Geo,
    Key,
    Kind,
    Label,
    Logo,
    Mailer,
    Nickname,
    Note,
    Organization,
    Photo,
    ProductId,
    RawProperty,
    Revision,
    Role,
    SortString,
    Sound,
    Source,
    StructuredName,
    Telephone,
    Timezone,
    Title,
    Uid,
    Url,
    VCardProperty,
)
from .reader import VCardReader, read_components, read_one
from .scribe import PropertyScribe, ScribeIndex
from .vcard import VCard
from .version import VCardVersion
from .writer import VCardWriter, write

__version__ = VERSION
