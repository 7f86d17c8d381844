"""Singleton: every caller shares one lazily created instance."""

from __future__ import annotations

from typing import Iterable, Optional


class Singleton:
    _instance: Optional["Singleton"] = None

    @classmethod
    def get_instance(cls) -> "Singleton":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None


def all_same(instances: Iterable[object]) -> bool:
    """True when every element is the very same object (vacuously for <2)."""
    items = list(instances)
    return all(item is items[0] for item in items[1:])
