from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

# Device files hold unsigned 32-bit values.
MAX_RAW = 2**32 - 1

_LEADING_INT = re.compile(r"\s*(\d+)")


class DeviceError(RuntimeError):
    pass


@dataclass(frozen=True)
class Backlight:
    sysfs_dir: Path

    @property
    def _brightness(self) -> Path:
        return self.sysfs_dir / "brightness"

    @property
    def _max_brightness(self) -> Path:
        return self.sysfs_dir / "max_brightness"

    def _read_int(self, path: Path) -> int:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DeviceError(f"{path} is not text") from e
        except OSError as e:
            raise DeviceError(f"Cannot read {path}: {e.strerror or e}") from e

        # Our own writes leave a trailing NUL behind.
        text = text.replace("\0", " ")
        if not text.strip():
            raise DeviceError(f"{path} is empty")
        m = _LEADING_INT.match(text)
        if not m:
            raise DeviceError(f"{path} does not start with an integer: {text.split()[0]!r}")
        value = int(m.group(1))
        if value > MAX_RAW:
            raise DeviceError(f"{path} value exceeds {MAX_RAW}")
        return value

    def brightness(self) -> int:
        return self._read_int(self._brightness)

    def max_brightness(self) -> int:
        return self._read_int(self._max_brightness)

    def set_brightness(self, value: int) -> None:
        try:
            self._brightness.write_text(f"{int(value)}\0", encoding="utf-8")
        except OSError as e:
            raise DeviceError(f"Cannot write {self._brightness}: {e.strerror or e}") from e
