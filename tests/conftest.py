from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_device(tmp_path: Path) -> Callable[..., Path]:
    """Create a fake backlight directory with the given file contents."""

    def make(brightness: str = "50\n", max_brightness: str = "100\n") -> Path:
        dev = tmp_path / "backlight"
        dev.mkdir(exist_ok=True)
        (dev / "brightness").write_text(brightness, encoding="utf-8")
        (dev / "max_brightness").write_text(max_brightness, encoding="utf-8")
        return dev

    return make
