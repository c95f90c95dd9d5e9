from __future__ import annotations

import re

import pygame

from railclock.exceptions import ConfigurationError

_FUNCTIONAL = re.compile(
    r"^(?P<fn>rgba?)\(\s*(?P<args>[^)]*)\)$", re.IGNORECASE
)


def parse_color(value: str) -> pygame.Color:
    """Parse a CSS-style color string.

    Accepts pygame color names (``"red"``), hex (``"#ff0000"``) and the
    functional ``rgb(r, g, b)`` / ``rgba(r, g, b, a)`` forms, where ``a`` is an
    opacity in ``[0, 1]``.
    """
    text = value.strip()
    match = _FUNCTIONAL.match(text)
    if match is None:
        try:
            return pygame.Color(text)
        except ValueError as exc:
            raise ConfigurationError(f"unknown color {value!r}") from exc

    parts = [part.strip() for part in match.group("args").split(",")]
    expected = 4 if match.group("fn").lower() == "rgba" else 3
    if len(parts) != expected:
        raise ConfigurationError(
            f"{match.group('fn')}() takes {expected} components, got {value!r}"
        )
    try:
        r, g, b = (int(part) for part in parts[:3])
        alpha = float(parts[3]) if expected == 4 else 1.0
    except ValueError as exc:
        raise ConfigurationError(f"malformed color {value!r}") from exc
    if not all(0 <= channel <= 255 for channel in (r, g, b)) or not 0 <= alpha <= 1:
        raise ConfigurationError(f"color component out of range in {value!r}")
    return pygame.Color(r, g, b, round(alpha * 255))
