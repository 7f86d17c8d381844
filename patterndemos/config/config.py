"""Configuration loading and validation for the pattern demos.

This module loads YAML configuration, applies defaults, drops entries the
demos cannot run (with a warning), and validates the result into the
pydantic models in `schema`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import sys

import yaml
from pydantic import ValidationError

from ..patterns.decorator import TOPPINGS
from ..patterns.strategy import STRATEGIES, normalize_method
from .schema import OBSERVER_ACTIONS, DemoConfig


DEFAULTS_PATH = Path(__file__).with_name("defaults.yml")


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"ERROR: Could not parse config {path}: {e}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(data, dict):
        print(f"ERROR: Config {path} must be a mapping at the top level.", file=sys.stderr)
        sys.exit(1)
    return data


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with raw configuration values.
    """
    if path:
        return _load_yaml(Path(path))
    return _load_yaml(DEFAULTS_PATH)


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = cfg.get(name)
    if not isinstance(value, dict):
        if value is not None:
            print(f"WARNING: Section '{name}' is not a mapping, using defaults.")
        value = {}
        cfg[name] = value
    return value


def validate_config(cfg: Dict[str, Any]) -> DemoConfig:
    """Apply defaults and validate configuration values.

    Unsupported payment methods, toppings and observer actions are dropped
    with a warning so the remaining demo steps still run. Anything else that
    fails validation is fatal.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated DemoConfig.
    """
    display = _section(cfg, "display")
    observer = _section(cfg, "observer")
    singleton = _section(cfg, "singleton")
    factory = _section(cfg, "factory")
    strategy = _section(cfg, "strategy")
    facade = _section(cfg, "facade")
    decorator = _section(cfg, "decorator")
    adapter = _section(cfg, "adapter")

    # Apply section defaults
    display.setdefault("currency", "₹")
    observer.setdefault("channels", [])
    singleton.setdefault("instances", 3)
    factory.setdefault("animals", ["Dog", "Cat"])
    strategy.setdefault("payments", [])
    facade.setdefault("price", 499)
    facade.setdefault("orders", [])
    decorator.setdefault("base_cost", 50)
    decorator.setdefault("toppings", ["milk", "sugar"])
    adapter.setdefault("files", [])

    for channel in observer.get("channels") or []:
        if not isinstance(channel, dict):
            continue
        subscribers = channel.get("subscribers")
        if subscribers is None:
            channel["subscribers"] = []
        elif isinstance(subscribers, list):
            channel["subscribers"] = [str(n) for n in subscribers]
        steps = []
        for step in channel.get("script") or []:
            action = step.get("action") if isinstance(step, dict) else None
            if action not in OBSERVER_ACTIONS:
                print(f"WARNING: Unsupported observer action '{action}' in channel '{channel.get('name')}', skipping.")
                continue
            if step.get("value") is None:
                print(f"WARNING: Observer step '{action}' in channel '{channel.get('name')}' has no value, skipping.")
                continue
            step["value"] = str(step["value"])
            steps.append(step)
        channel["script"] = steps

    payments = []
    for p in strategy.get("payments") or []:
        method = normalize_method(str(p.get("method", ""))) if isinstance(p, dict) else ""
        if method not in STRATEGIES:
            print(f"WARNING: Unsupported payment method '{method}', skipping.")
            continue
        payments.append({**p, "method": method})
    strategy["payments"] = payments

    toppings = []
    for t in decorator.get("toppings") or []:
        name = str(t).strip().lower()
        if name not in TOPPINGS:
            print(f"WARNING: Unsupported topping '{t}', skipping.")
            continue
        toppings.append(name)
    decorator["toppings"] = toppings

    try:
        return DemoConfig.model_validate(cfg)
    except ValidationError as e:
        print(f"ERROR: Invalid config:\n{e}", file=sys.stderr)
        sys.exit(1)
