"""Pydantic models for the demo configuration file."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator


OBSERVER_ACTIONS = ("publish", "add", "remove")


class DisplaySection(BaseModel):
    currency: str = "₹"


# --- Observer ---

class ObserverStep(BaseModel):
    action: Literal["publish", "add", "remove"]
    value: str


class ChannelSpec(BaseModel):
    name: str = Field(min_length=1)
    subscribers: List[str] = Field(default_factory=list)
    script: List[ObserverStep] = Field(default_factory=list)

    @field_validator("subscribers")
    @classmethod
    def _names_not_blank(cls, v: List[str]) -> List[str]:
        if any(not str(n).strip() for n in v):
            raise ValueError("subscriber names must not be blank")
        return v


class ObserverSection(BaseModel):
    channels: List[ChannelSpec] = Field(default_factory=list)


# --- Other patterns ---

class SingletonSection(BaseModel):
    instances: int = Field(3, ge=1)


class FactorySection(BaseModel):
    animals: List[str] = Field(default_factory=lambda: ["Dog", "Cat"])


class PaymentSpec(BaseModel):
    method: str
    amount: float = Field(gt=0)


class StrategySection(BaseModel):
    payments: List[PaymentSpec] = Field(default_factory=list)


class OrderSpec(BaseModel):
    product_id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)


class FacadeSection(BaseModel):
    price: float = Field(499, ge=0)
    orders: List[OrderSpec] = Field(default_factory=list)


class DecoratorSection(BaseModel):
    base_cost: float = Field(50, ge=0)
    toppings: List[str] = Field(default_factory=lambda: ["milk", "sugar"])


class MediaSpec(BaseModel):
    audio_type: str
    file_name: str


class AdapterSection(BaseModel):
    files: List[MediaSpec] = Field(default_factory=list)


class DemoConfig(BaseModel):
    display: DisplaySection = Field(default_factory=DisplaySection)
    observer: ObserverSection = Field(default_factory=ObserverSection)
    singleton: SingletonSection = Field(default_factory=SingletonSection)
    factory: FactorySection = Field(default_factory=FactorySection)
    strategy: StrategySection = Field(default_factory=StrategySection)
    facade: FacadeSection = Field(default_factory=FacadeSection)
    decorator: DecoratorSection = Field(default_factory=DecoratorSection)
    adapter: AdapterSection = Field(default_factory=AdapterSection)
