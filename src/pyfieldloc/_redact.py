"""Render device payloads for DEBUG logs.

Payloads identify the network a client sits on (addresses, SSIDs, dish
serials), and aircraft-tracking feeds list hundreds of tracked objects.
:func:`redact_for_log` masks identity keys at any depth and shortens long
text and long lists so one log line stays readable.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

MASK = "<redacted>"

_IDENTITY_KEYS: frozenset[str] = frozenset(
    {
        "ip",
        "ip_address",
        "ip_addresses",
        "hostname",
        "mac",
        "mac_address",
        "bssid",
        "ssid",
        "serial",
        "serial_number",
        "password",
        "token",
        "api_key",
        "authorization",
    }
)

_MAX_DEPTH = 10


def _shorten(text: str, limit: int) -> str:
    return text if len(text) <= limit else f"{text[:limit]}…<truncated>"


def _render(value: Any, max_string: int, max_items: int, depth: int) -> Any:
    if depth > _MAX_DEPTH:
        return "<max-depth>"
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return _shorten(value, max_string)
    if isinstance(value, (bytes, bytearray)):
        return f"<{len(value)} bytes>"
    if isinstance(value, Mapping):
        return {
            str(key): MASK if str(key).lower() in _IDENTITY_KEYS else _render(item, max_string, max_items, depth + 1)
            for key, item in value.items()
        }
    if isinstance(value, Sequence):
        shown = [_render(item, max_string, max_items, depth + 1) for item in value[:max_items]]
        hidden = len(value) - len(shown)
        if hidden > 0:
            shown.append(f"<{hidden} more>")
        return shown
    # Opaque objects are named, not dumped.
    return f"<{type(value).__name__}>"


def redact_for_log(value: Any, *, max_string: int = 256, max_items: int = 20) -> Any:
    """Return a copy of *value* that is safe and compact enough to log."""
    return _render(value, max_string, max_items, 0)
