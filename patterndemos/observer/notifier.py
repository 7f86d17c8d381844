"""Named notifier broadcasting string events to an ordered subscriber list."""

from __future__ import annotations

from typing import Callable, List, Protocol, Tuple, runtime_checkable


Inform = Callable[[str], None]


@runtime_checkable
class Subscriber(Protocol):
    def receive(self, event: str) -> None:
        ...


class ChannelSubscriber:
    """Subscriber that reports every event it receives through `inform`."""

    def __init__(self, name: str, inform: Inform = print) -> None:
        self.name = name
        self._inform = inform

    def receive(self, event: str) -> None:
        self._inform(f'{self.name} notified: "{event}"')

    def __repr__(self) -> str:
        return f"ChannelSubscriber({self.name!r})"


class CallbackSubscriber:
    """Adapts a plain callable taking the event string into a subscriber."""

    def __init__(self, name: str, callback: Callable[[str], None]) -> None:
        self.name = name
        self._callback = callback

    def receive(self, event: str) -> None:
        self._callback(event)

    def __repr__(self) -> str:
        return f"CallbackSubscriber({self.name!r})"


class Notifier:
    """Publisher holding subscribers in insertion order.

    The same handle may be registered more than once and is then notified
    once per registration. Handles are compared by identity.
    """

    def __init__(self, name: str, inform: Inform = print) -> None:
        self.name = name
        self._inform = inform
        self._subs: List[Subscriber] = []

    @property
    def subscribers(self) -> Tuple[Subscriber, ...]:
        return tuple(self._subs)

    def __len__(self) -> int:
        return len(self._subs)

    def __contains__(self, handle: object) -> bool:
        return any(s is handle for s in self._subs)

    def add_subscriber(self, handle: Subscriber) -> None:
        if handle is None:
            raise TypeError("subscriber must not be None")
        self._subs.append(handle)

    def remove_subscriber(self, handle: Subscriber) -> None:
        """Remove every registration of `handle`; unknown handles are ignored."""
        self._subs = [s for s in self._subs if s is not handle]

    def publish(self, event: str) -> None:
        """Announce `event` and deliver it to each current subscriber in order.

        Delivery walks a snapshot of the list taken before the first
        `receive` call, so callbacks that subscribe or unsubscribe only affect
        later broadcasts.
        """
        self._inform(f'{self.name} emitted: "{event}"')
        for sub in tuple(self._subs):
            sub.receive(event)

    def __repr__(self) -> str:
        return f"Notifier({self.name!r}, subscribers={len(self._subs)})"
