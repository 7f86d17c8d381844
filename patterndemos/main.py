"""CLI entry point for the pattern demos."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import __version__
from .app.demo_registry import get_demo, list_demos
from .config.config import load_config, validate_config


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="patterndemos", description="Design pattern demos")
    p.add_argument("demos", nargs="*", metavar="DEMO", help="Demo ids to run (default: all)")
    p.add_argument("--config", type=str, default=None, help="Path to YAML config")
    p.add_argument("--list", action="store_true", help="List available demos and exit")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p.parse_args(argv)


def cli(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    if args.version:
        print(f"patterndemos {__version__}")
        sys.exit(0)

    if args.list:
        for m in list_demos():
            print(f"{m.id:<10} {m.category:<11} {m.description}")
        sys.exit(0)

    try:
        demos = [get_demo(d) for d in args.demos] if args.demos else list_demos()
    except KeyError as e:
        print(f"ERROR: {e.args[0]}. Use --list to see available demos.", file=sys.stderr)
        sys.exit(2)

    cfg = validate_config(load_config(args.config))

    for i, m in enumerate(demos):
        if i:
            print()
        print(f"== {m.name} ({m.category}) ==")
        m.runner(cfg, print)


if __name__ == "__main__":
    cli()
