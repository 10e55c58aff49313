"""courier package.

Two small building blocks with injected collaborators:

- LookupCache: memoizes successful reads from a lookup service
- FileDispatchUseCase: recognizes, validates, signs and sends a batch of
  files and reports the ones that were skipped
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("courier")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from courier.application.file_dispatch_use_case import (
    FileDispatchDependencies,
    FileDispatchUseCase,
)
from courier.application.models import DispatchResult
from courier.domain.entities import (
    NOT_FOUND,
    Certificate,
    Found,
    Item,
    NotFound,
    ParsedDocument,
    RawFile,
)
from courier.infrastructure.caching import LookupCache

__all__ = [
    "NOT_FOUND",
    "__version__",
    # Entities
    "Certificate",
    "Found",
    "Item",
    "NotFound",
    "ParsedDocument",
    "RawFile",
    # Lookup cache
    "LookupCache",
    # Dispatch
    "DispatchResult",
    "FileDispatchDependencies",
    "FileDispatchUseCase",
]
