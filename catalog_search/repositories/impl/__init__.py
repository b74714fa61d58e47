"""Repositories implementation package."""

from .memory_repository import InMemoryProductRepository

__all__ = ["InMemoryProductRepository"]
