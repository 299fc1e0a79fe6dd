from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypedDict


class LinkifySettings(TypedDict, total=False):
    debounce_ms: int
    hypertext_priority: int
    hypertext_enabled: bool


def default_linkify_settings() -> LinkifySettings:
    return {
        "debounce_ms": 200,
        "hypertext_priority": 0,
        "hypertext_enabled": True,
    }


def normalize_linkify_settings(raw: Any) -> LinkifySettings:
    defaults = default_linkify_settings()
    data = dict(defaults)
    if isinstance(raw, dict):
        for key, value in raw.items():
            data[str(key)] = value

    def _clamp_int(value: Any, low: int, high: int, fallback: int) -> int:
        try:
            return max(low, min(high, int(value)))
        except Exception:
            return fallback

    def _as_int(value: Any, fallback: int) -> int:
        if isinstance(value, bool):
            return fallback
        try:
            return int(value)
        except Exception:
            return fallback

    enabled = data.get("hypertext_enabled", defaults["hypertext_enabled"])
    if not isinstance(enabled, bool):
        enabled = str(enabled).strip().lower() not in {"0", "false", "no", "off", ""}

    return {
        "debounce_ms": _clamp_int(data.get("debounce_ms"), 0, 5000, int(defaults["debounce_ms"])),
        "hypertext_priority": _as_int(data.get("hypertext_priority"), int(defaults["hypertext_priority"])),
        "hypertext_enabled": enabled,
    }


@dataclass(frozen=True, slots=True)
class NormalizedLinkifyConfig:
    debounce_ms: int
    hypertext_priority: int
    hypertext_enabled: bool

    @classmethod
    def from_mapping(cls, data: Any) -> "NormalizedLinkifyConfig":
        n = normalize_linkify_settings(data)
        return cls(
            debounce_ms=int(n["debounce_ms"]),
            hypertext_priority=int(n["hypertext_priority"]),
            hypertext_enabled=bool(n["hypertext_enabled"]),
        )
