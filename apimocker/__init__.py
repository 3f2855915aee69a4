"""Mock REST server over a JSON file of collections."""

from apimocker.app import create_app
from apimocker.repositories.memory_store import MemoryStore

__all__ = ["create_app", "MemoryStore"]
