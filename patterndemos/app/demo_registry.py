"""Demo registry and metadata.

Expose metadata for every pattern demo and run a demo against the
validated configuration, writing its lines to an `inform` sink.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

from ..config.schema import DemoConfig
from ..observer.notifier import ChannelSubscriber, Inform, Notifier
from ..patterns.adapter import AudioPlayer
from ..patterns.decorator import SimpleCoffee, add_topping
from ..patterns.facade import OrderFacade, PaymentService
from ..patterns.factory import AnimalFactory
from ..patterns.singleton import Singleton, all_same
from ..patterns.strategy import PaymentContext, format_amount, make_strategy


@dataclass(frozen=True)
class DemoMeta:
    id: str
    name: str
    category: str
    description: str
    runner: Callable[[DemoConfig, Inform], None]


def run_observer(cfg: DemoConfig, inform: Inform) -> None:
    for channel in cfg.observer.channels:
        notifier = Notifier(channel.name, inform)
        handles: Dict[str, ChannelSubscriber] = {}

        def handle_for(name: str) -> ChannelSubscriber:
            if name not in handles:
                handles[name] = ChannelSubscriber(name, inform)
            return handles[name]

        for name in channel.subscribers:
            notifier.add_subscriber(handle_for(name))

        for step in channel.script:
            if step.action == "publish":
                notifier.publish(step.value)
            elif step.action == "add":
                notifier.add_subscriber(handle_for(step.value))
            elif step.action == "remove" and step.value in handles:
                notifier.remove_subscriber(handles[step.value])


def run_singleton(cfg: DemoConfig, inform: Inform) -> None:
    instances = [Singleton.get_instance() for _ in range(cfg.singleton.instances)]
    if all_same(instances):
        inform("All instances are same")
    else:
        inform("All instances are not same")


def run_factory(cfg: DemoConfig, inform: Inform) -> None:
    for kind in cfg.factory.animals:
        animal = AnimalFactory.get_animal(kind, inform)
        if animal is None:
            inform(f"Unknown animal type: '{kind}'")
            continue
        animal.speak()


def run_strategy(cfg: DemoConfig, inform: Inform) -> None:
    currency = cfg.display.currency
    context = None
    for p in cfg.strategy.payments:
        strategy = make_strategy(p.method, currency=currency, inform=inform)
        if context is None:
            context = PaymentContext(strategy)
        else:
            context.set_strategy(strategy)
        context.pay(p.amount)


def run_facade(cfg: DemoConfig, inform: Inform) -> None:
    facade = OrderFacade(
        price=cfg.facade.price,
        payment=PaymentService(currency=cfg.display.currency, inform=inform),
        inform=inform,
    )
    for order in cfg.facade.orders:
        facade.place_order(order.product_id, order.user_id)


def run_decorator(cfg: DemoConfig, inform: Inform) -> None:
    currency = cfg.display.currency
    coffee = SimpleCoffee(cfg.decorator.base_cost)
    inform(f"{coffee.description()} {currency}{format_amount(coffee.cost())}")
    for topping in cfg.decorator.toppings:
        coffee = add_topping(coffee, topping)
        inform(f"{coffee.description()} {currency}{format_amount(coffee.cost())}")


def run_adapter(cfg: DemoConfig, inform: Inform) -> None:
    player = AudioPlayer(inform)
    for media in cfg.adapter.files:
        player.play(media.audio_type, media.file_name)


_DEMOS: List[DemoMeta] = [
    DemoMeta(
        id="singleton",
        name="Singleton",
        category="creational",
        description="Every get_instance() call returns the same object.",
        runner=run_singleton,
    ),
    DemoMeta(
        id="factory",
        name="Factory",
        category="creational",
        description="Build animals from a type name.",
        runner=run_factory,
    ),
    DemoMeta(
        id="strategy",
        name="Strategy",
        category="behavioral",
        description="Pay through interchangeable payment methods.",
        runner=run_strategy,
    ),
    DemoMeta(
        id="observer",
        name="Observer",
        category="behavioral",
        description="Channels broadcast events to their subscribers in order.",
        runner=run_observer,
    ),
    DemoMeta(
        id="facade",
        name="Facade",
        category="structural",
        description="Place an order through one call over four services.",
        runner=run_facade,
    ),
    DemoMeta(
        id="decorator",
        name="Decorator",
        category="structural",
        description="Stack toppings onto a coffee, accumulating cost.",
        runner=run_decorator,
    ),
    DemoMeta(
        id="adapter",
        name="Adapter",
        category="structural",
        description="Route vlc and mp4 files through a media adapter.",
        runner=run_adapter,
    ),
]


def list_demos() -> List[DemoMeta]:
    return list(_DEMOS)


def get_demo(demo_id: str) -> DemoMeta:
    for m in _DEMOS:
        if m.id == demo_id:
            return m
    raise KeyError(f"Unknown demo id: {demo_id}")


def run_demo(demo_id: str, cfg: DemoConfig, inform: Inform = print) -> None:
    get_demo(demo_id).runner(cfg, inform)
