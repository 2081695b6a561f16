"""Domain repository interfaces (abstract base classes only).

Concrete implementations are in catalog/infrastructure/persistence/ and are
injected at the application boundary.
"""

from .base import Repository
from .items import ItemRepository

__all__ = [
    "Repository",
    "ItemRepository",
]
