"""Stable link registry."""

from .registry import LinkRegistry, create_registry

__all__ = ["LinkRegistry", "create_registry"]
