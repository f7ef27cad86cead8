"""Domain repository interfaces.

The abstraction is defined here with abc.ABC and @abstractmethod.
Concrete implementations live in diamond_shop/infrastructure/persistence/
and are wired at the application boundary via dependency injection.
"""

from .base import Include, Predicate, QueryView, Repository

__all__ = [
    "Repository",
    "Predicate",
    "Include",
    "QueryView",
]
