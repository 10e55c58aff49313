"""Domain entities.

Items served by the lookup cache and the files, documents and credentials
handled by dispatch.
"""

from .files import Certificate, ParsedDocument, RawFile
from .item import Item
from .outcome import NOT_FOUND, Found, Lookup, NotFound

__all__ = [
    "NOT_FOUND",
    "Certificate",
    "Found",
    "Item",
    "Lookup",
    "NotFound",
    "ParsedDocument",
    "RawFile",
]
