"""Application layer for courier.

This layer contains use cases and application-level orchestration logic.
It defines ports (interfaces) for external dependencies.
"""

from .file_dispatch_use_case import FileDispatchDependencies, FileDispatchUseCase
from .models import DispatchRequest, DispatchResult, SkipReason

__all__ = [
    "DispatchRequest",
    "DispatchResult",
    "FileDispatchDependencies",
    "FileDispatchUseCase",
    "SkipReason",
]
