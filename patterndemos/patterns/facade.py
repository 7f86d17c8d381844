"""Facade: one `place_order` call in front of four order services.

The services only report what they do; stock and payment outcomes are
fixed at construction so callers can exercise the failure branches.
"""

from __future__ import annotations

from typing import Optional

from ..observer.notifier import Inform
from .strategy import DEFAULT_CURRENCY, format_amount


DEFAULT_PRICE = 499


class InventoryService:
    def __init__(self, in_stock: bool = True, inform: Inform = print) -> None:
        self.in_stock = in_stock
        self._inform = inform

    def check_stock(self, product_id: str) -> bool:
        self._inform(f"Checking stock for product: {product_id}")
        return self.in_stock


class PaymentService:
    def __init__(self, approve: bool = True, currency: str = DEFAULT_CURRENCY, inform: Inform = print) -> None:
        self.approve = approve
        self.currency = currency
        self._inform = inform

    def process_payment(self, user_id: str, amount: float) -> bool:
        self._inform(f"Processing payment of {self.currency}{format_amount(amount)} for user: {user_id}")
        return self.approve


class InvoiceService:
    def __init__(self, inform: Inform = print) -> None:
        self._inform = inform

    def generate_invoice(self, product_id: str, user_id: str) -> None:
        self._inform(f"Invoice generated for {product_id} and user {user_id}")


class NotificationService:
    def __init__(self, inform: Inform = print) -> None:
        self._inform = inform

    def send_confirmation_email(self, user_id: str) -> None:
        self._inform(f"Email sent to user {user_id}: Order Confirmed!")


class OrderFacade:
    def __init__(
        self,
        *,
        price: float = DEFAULT_PRICE,
        inventory: Optional[InventoryService] = None,
        payment: Optional[PaymentService] = None,
        invoice: Optional[InvoiceService] = None,
        notification: Optional[NotificationService] = None,
        inform: Inform = print,
    ) -> None:
        self.price = price
        self._inform = inform
        self.inventory = inventory or InventoryService(inform=inform)
        self.payment = payment or PaymentService(inform=inform)
        self.invoice = invoice or InvoiceService(inform=inform)
        self.notification = notification or NotificationService(inform=inform)

    def place_order(self, product_id: str, user_id: str) -> bool:
        """Run stock check, payment, invoice and confirmation in order.

        Returns False as soon as stock or payment fails; later services are
        not called in that case.
        """
        self._inform("Starting order placement process...")

        if not self.inventory.check_stock(product_id):
            self._inform("Product is out of stock.")
            return False

        if not self.payment.process_payment(user_id, self.price):
            self._inform("Payment failed.")
            return False

        self.invoice.generate_invoice(product_id, user_id)
        self.notification.send_confirmation_email(user_id)

        self._inform("Order placed successfully!")
        return True
