"""Domain services.

Pure functions with no collaborators.
"""

from .document_checks import add_months, is_recent, is_supported_format

__all__ = [
    "add_months",
    "is_recent",
    "is_supported_format",
]
