from __future__ import annotations

import compileall
import importlib
from pathlib import Path

import pytest


def test_compileall_src() -> None:
    src = Path(__file__).resolve().parents[1] / "src"
    assert compileall.compile_dir(str(src), quiet=1)


@pytest.mark.parametrize(
    "name",
    [
        "light",
        "light.cli",
        "light.config",
        "light.curve",
        "light.brightness",
        "light.log",
        "light.system.backlight",
    ],
)
def test_import_modules(name: str) -> None:
    importlib.import_module(name)
