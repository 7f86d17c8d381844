"""Strategy: pay an amount through an interchangeable payment method."""

from __future__ import annotations

from typing import Dict, Protocol, Type

from ..observer.notifier import Inform


DEFAULT_CURRENCY = "₹"


class PaymentStrategy(Protocol):
    def pay(self, amount: float) -> str:
        ...


class _LabelledPayment:
    label = ""

    def __init__(self, currency: str = DEFAULT_CURRENCY, inform: Inform = print) -> None:
        self.currency = currency
        self._inform = inform

    def pay(self, amount: float) -> str:
        line = f"Paid {self.currency}{format_amount(amount)} using {self.label}"
        self._inform(line)
        return line


class CreditCard(_LabelledPayment):
    label = "Credit Card"


class Upi(_LabelledPayment):
    label = "Upi"


class PayPal(_LabelledPayment):
    label = "PayPal"


STRATEGIES: Dict[str, Type[_LabelledPayment]] = {
    "credit_card": CreditCard,
    "upi": Upi,
    "paypal": PayPal,
}


def format_amount(amount: float) -> str:
    # 100.0 -> "100", 99.5 -> "99.5", 99.999 -> "100"
    rounded = round(float(amount), 2)
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0")


def normalize_method(method: str) -> str:
    return method.strip().lower().replace("-", "_").replace(" ", "_")


def make_strategy(method: str, *, currency: str = DEFAULT_CURRENCY, inform: Inform = print) -> PaymentStrategy:
    key = normalize_method(method)
    try:
        cls = STRATEGIES[key]
    except KeyError:
        raise KeyError(f"Unknown payment method: {method}") from None
    return cls(currency=currency, inform=inform)


class PaymentContext:
    """Delegates payments to whichever strategy is currently installed."""

    def __init__(self, strategy: PaymentStrategy) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> PaymentStrategy:
        return self._strategy

    def set_strategy(self, strategy: PaymentStrategy) -> None:
        self._strategy = strategy

    def pay(self, amount: float) -> str:
        return self._strategy.pay(amount)
