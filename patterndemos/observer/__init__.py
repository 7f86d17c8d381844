from .notifier import (
    Inform,
    Subscriber,
    ChannelSubscriber,
    CallbackSubscriber,
    Notifier,
)

__all__ = [
    "Inform",
    "Subscriber",
    "ChannelSubscriber",
    "CallbackSubscriber",
    "Notifier",
]
