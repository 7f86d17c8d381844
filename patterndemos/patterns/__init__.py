from .singleton import Singleton, all_same
from .factory import AnimalFactory, Cat, Dog
from .strategy import CreditCard, PayPal, PaymentContext, Upi, make_strategy
from .facade import OrderFacade
from .decorator import MilkDecorator, SimpleCoffee, SugarDecorator, add_topping
from .adapter import AudioPlayer, MediaAdapter

__all__ = [
    "Singleton",
    "all_same",
    "AnimalFactory",
    "Dog",
    "Cat",
    "CreditCard",
    "Upi",
    "PayPal",
    "PaymentContext",
    "make_strategy",
    "OrderFacade",
    "SimpleCoffee",
    "MilkDecorator",
    "SugarDecorator",
    "add_topping",
    "AudioPlayer",
    "MediaAdapter",
]
