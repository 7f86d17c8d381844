"""Factory: build an animal from a type name."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Protocol

from ..observer.notifier import Inform


class Animal(Protocol):
    def speak(self) -> str:
        ...


class Dog:
    def __init__(self, inform: Inform = print) -> None:
        self._inform = inform

    def speak(self) -> str:
        sound = "Woof Woof!"
        self._inform(sound)
        return sound


class Cat:
    def __init__(self, inform: Inform = print) -> None:
        self._inform = inform

    def speak(self) -> str:
        sound = "Meow Meow!"
        self._inform(sound)
        return sound


_ANIMALS: Dict[str, Callable[[Inform], Animal]] = {
    "dog": Dog,
    "cat": Cat,
}


class AnimalFactory:
    @staticmethod
    def kinds() -> list[str]:
        return sorted(_ANIMALS)

    @staticmethod
    def get_animal(kind: str, inform: Inform = print) -> Optional[Animal]:
        """Return an animal for `kind` (case-insensitive) or None if unknown."""
        make = _ANIMALS.get(kind.strip().lower())
        if make is None:
            return None
        return make(inform)
