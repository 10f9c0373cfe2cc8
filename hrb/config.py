from __future__ import annotations

from dataclasses import dataclass
import os

DEFAULT_PCODE_PREVIEW = 16


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().casefold()
    return normalized not in {"0", "false", "off", ""}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw, 0)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


@dataclass(frozen=True)
class HrbConfig:
    debug: bool
    pcode_preview: int


def load_hrb_config() -> HrbConfig:
    return HrbConfig(
        debug=_env_flag("HRB_DEBUG", default=False),
        pcode_preview=_env_int("HRB_PCODE_PREVIEW", DEFAULT_PCODE_PREVIEW),
    )


__all__ = ["DEFAULT_PCODE_PREVIEW", "HrbConfig", "load_hrb_config"]
