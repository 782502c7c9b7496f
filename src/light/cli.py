from __future__ import annotations

import logging
import sys

from light import brightness
from light.config import Config, ConfigError, Operation, build_parser, parse
from light.curve import CurveError
from light.log import setup_logging
from light.system.backlight import Backlight, DeviceError

log = logging.getLogger(__name__)


def run(cfg: Config) -> None:
    if cfg.operation is Operation.HELP:
        build_parser().print_help()
        return

    assert cfg.device is not None
    bl = Backlight(cfg.device)
    if cfg.operation is Operation.CURRENT:
        print(brightness.current(bl))
    elif cfg.operation is Operation.MAX:
        print(brightness.maximum(bl))
    elif cfg.operation is Operation.INCREASE:
        brightness.increase(bl, cfg.percent, cfg.min_brightness)
    elif cfg.operation is Operation.DECREASE:
        brightness.decrease(bl, cfg.percent, cfg.min_brightness)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()

    try:
        cfg = parse(argv)
    except ConfigError as e:
        build_parser().print_usage(sys.stderr)
        log.error("%s", e)
        return 1

    if cfg.verbose:
        setup_logging(level=logging.DEBUG)

    try:
        run(cfg)
    except (DeviceError, CurveError) as e:
        log.error("%s", e)
        return 1
    return 0
