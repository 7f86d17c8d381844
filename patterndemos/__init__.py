"""Design pattern demos.

The Observer notifier is importable straight from the package; every other
pattern lives under `patterndemos.patterns`.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .observer.notifier import CallbackSubscriber, ChannelSubscriber, Notifier, Subscriber

__all__ = [
    "__version__",
    "Notifier",
    "Subscriber",
    "ChannelSubscriber",
    "CallbackSubscriber",
]
