"""
Prototype Services
CRUD over prototype records and their storage backends
"""

from .types import Prototype, PrototypeStore
from .storage import InMemoryPrototypeStore, JsonFilePrototypeStore
from .prototypes import PrototypeService, PrototypeNotFoundError

__all__ = [
    "Prototype",
    "PrototypeStore",
    "InMemoryPrototypeStore",
    "JsonFilePrototypeStore",
    "PrototypeService",
    "PrototypeNotFoundError",
]
