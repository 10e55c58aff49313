"""Infrastructure layer for courier.

This layer contains adapters for clocks, logging and caching, plus the
dependency container that wires them into the application layer.
"""

from .container import DependencyContainer, create_default_container

__all__ = [
    "DependencyContainer",
    "create_default_container",
]
