"""Decorator: wrap a coffee with toppings that add cost and description."""

from __future__ import annotations

from typing import Dict, Protocol, Type


class Coffee(Protocol):
    def cost(self) -> float:
        ...

    def description(self) -> str:
        ...


class SimpleCoffee:
    def __init__(self, base_cost: float = 50) -> None:
        self.base_cost = base_cost

    def cost(self) -> float:
        return self.base_cost

    def description(self) -> str:
        return "Simple coffee"


class CoffeeDecorator:
    """Forwards to the wrapped coffee; subclasses add their own share."""

    def __init__(self, coffee: Coffee) -> None:
        self._coffee = coffee

    def cost(self) -> float:
        return self._coffee.cost()

    def description(self) -> str:
        return self._coffee.description()


class MilkDecorator(CoffeeDecorator):
    def cost(self) -> float:
        return super().cost() + 10

    def description(self) -> str:
        return super().description() + ", Milk"


class SugarDecorator(CoffeeDecorator):
    def cost(self) -> float:
        return super().cost() + 5

    def description(self) -> str:
        return super().description() + ", Sugar"


TOPPINGS: Dict[str, Type[CoffeeDecorator]] = {
    "milk": MilkDecorator,
    "sugar": SugarDecorator,
}


def add_topping(coffee: Coffee, topping: str) -> Coffee:
    try:
        decorator = TOPPINGS[topping.strip().lower()]
    except KeyError:
        raise KeyError(f"Unknown topping: {topping}") from None
    return decorator(coffee)
