from .base import BaseStorage
from .in_memory import InMemoryStorage

__all__ = ["BaseStorage", "InMemoryStorage"]
