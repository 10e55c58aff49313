"""Port interfaces for external dependencies.

This module defines abstract interfaces (protocols) that adapters and test
doubles must implement. This enables dependency injection and testing.
"""

from .repositories import LookupServicePort
from .services import ClockPort, LoggerPort, RecognizerPort, SenderPort, SignerPort

__all__ = [
    "ClockPort",
    "LoggerPort",
    "LookupServicePort",
    "RecognizerPort",
    "SenderPort",
    "SignerPort",
]
