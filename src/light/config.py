from __future__ import annotations

import argparse
import enum
import math
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from light import __version__


class ConfigError(ValueError):
    pass


class Operation(enum.Enum):
    INCREASE = "increase"
    DECREASE = "decrease"
    CURRENT = "current"
    MAX = "max"
    HELP = "help"


@dataclass(frozen=True)
class Config:
    operation: Operation
    device: Path | None = None
    percent: float = 0.0
    min_brightness: int = 0
    verbose: bool = False


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ConfigError(message)


def build_parser() -> argparse.ArgumentParser:
    ap = _Parser(prog="light", add_help=False)
    ap.add_argument("-h", "--help", action="store_true", help="Print this help and exit")
    ap.add_argument("--version", action="version", version=__version__)
    ap.add_argument("-v", "--verbose", action="store_true", help="Log curve details to stderr")

    ops = ap.add_mutually_exclusive_group()
    ops.add_argument("-C", dest="current", metavar="dev", help="Print brightness")
    ops.add_argument("-M", dest="max", metavar="dev", help="Print maximum brightness")
    ops.add_argument(
        "-I",
        dest="increase",
        nargs=3,
        metavar=("dev", "val", "min_brightness"),
        help="Increase brightness by percentage",
    )
    ops.add_argument(
        "-D",
        dest="decrease",
        nargs=3,
        metavar=("dev", "val", "min_brightness"),
        help="Decrease brightness by percentage",
    )
    return ap


def _parse_percent(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"Cannot parse number from {raw}") from None
    if not math.isfinite(value):
        raise ConfigError(f"Percentage must be finite: {raw}")
    return value


def _parse_min_brightness(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"Cannot parse integer from {raw}") from None
    if value <= 0:
        raise ConfigError(f"min_brightness must be > 0: {raw}")
    return value


def from_namespace(ns: argparse.Namespace) -> Config:
    verbose = bool(ns.verbose)
    if ns.help:
        return Config(Operation.HELP, verbose=verbose)
    if ns.current is not None:
        return Config(Operation.CURRENT, device=Path(ns.current), verbose=verbose)
    if ns.max is not None:
        return Config(Operation.MAX, device=Path(ns.max), verbose=verbose)

    for op, raw in ((Operation.INCREASE, ns.increase), (Operation.DECREASE, ns.decrease)):
        if raw is None:
            continue
        dev, val, min_brightness = raw
        return Config(
            op,
            device=Path(dev),
            percent=_parse_percent(val),
            min_brightness=_parse_min_brightness(min_brightness),
            verbose=verbose,
        )

    return Config(Operation.HELP, verbose=verbose)


def parse(argv: list[str]) -> Config:
    """Turn command-line arguments into a ``Config``.

    An empty argument list means help. Raises ``ConfigError`` on any
    argument problem.
    """

    if not argv:
        return Config(Operation.HELP)
    return from_namespace(build_parser().parse_args(argv))
