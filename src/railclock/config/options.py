"""Immutable clock options.

Defaults mirror the proportions of the Hilfiker railway clock. A nested
mapping (for instance loaded from JSON) is merged over them once, through
:meth:`ClockOptions.from_mapping`; after that nothing is looked up
dynamically.
"""

from __future__ import annotations

import json
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, is_dataclass, replace
from pathlib import Path
from typing import Any, TypeVar

from railclock.config.colors import parse_color
from railclock.exceptions import ConfigurationError
from railclock.motion.behavior import HandBehaviors

OptionsT = TypeVar("OptionsT")

# camelCase spellings accepted for compatibility with existing option files.
KEY_ALIASES = {
    "offsetX": "offset_x",
    "offsetY": "offset_y",
}


def _check_positive(owner: str, **values: float) -> None:
    for name, value in values.items():
        if value <= 0:
            raise ConfigurationError(
                f"{owner}.{name} must be positive, got {value!r}"
            )


def _check_colors(owner: str, **values: str) -> None:
    for name, value in values.items():
        try:
            parse_color(value)
        except ConfigurationError as exc:
            raise ConfigurationError(f"{owner}.{name}: {exc}") from exc


@dataclass(frozen=True, slots=True)
class MarkerShape:
    width: float
    height: float

    def __post_init__(self) -> None:
        _check_positive("marker", width=self.width, height=self.height)


@dataclass(frozen=True, slots=True)
class Extent:
    width: float
    height: float

    def __post_init__(self) -> None:
        _check_positive("hand", width=self.width, height=self.height)


@dataclass(frozen=True, slots=True)
class HandShape:
    base: Extent
    top: Extent


@dataclass(frozen=True, slots=True)
class SecondHandShape:
    width: float = 1.4
    base_height: float = 16.5
    top_height: float = 31.2
    top_radius: float = 5.25

    def __post_init__(self) -> None:
        _check_positive(
            "second_hand",
            width=self.width,
            base_height=self.base_height,
            top_height=self.top_height,
            top_radius=self.top_radius,
        )


@dataclass(frozen=True, slots=True)
class ShapeOptions:
    marker_radius: float = 48.5
    hour_marker: MarkerShape = MarkerShape(width=3.5, height=12.0)
    minute_marker: MarkerShape = MarkerShape(width=1.4, height=3.5)
    hour_hand: HandShape = HandShape(
        base=Extent(width=6.4, height=12.0), top=Extent(width=5.2, height=32.0)
    )
    minute_hand: HandShape = HandShape(
        base=Extent(width=5.2, height=12.0), top=Extent(width=3.6, height=46.0)
    )
    second_hand: SecondHandShape = SecondHandShape()

    def __post_init__(self) -> None:
        _check_positive("shape", marker_radius=self.marker_radius)


@dataclass(frozen=True, slots=True)
class ShadowStyle:
    color: str = "rgba(0, 0, 0, 0.2)"
    offset_x: float = 5
    offset_y: float = 5
    blur: float = 2

    def __post_init__(self) -> None:
        _check_colors("style.shadow", color=self.color)
        if self.blur < 0:
            raise ConfigurationError(
                f"style.shadow.blur must not be negative, got {self.blur!r}"
            )


@dataclass(frozen=True, slots=True)
class StyleOptions:
    background: str = "white"
    border: str = "black"
    hour_marker: str = "black"
    minute_marker: str = "black"
    hour_hand: str = "black"
    minute_hand: str = "black"
    second_hand: str = "red"
    shadow: ShadowStyle = ShadowStyle()

    def __post_init__(self) -> None:
        _check_colors(
            "style",
            background=self.background,
            border=self.border,
            hour_marker=self.hour_marker,
            minute_marker=self.minute_marker,
            hour_hand=self.hour_hand,
            minute_hand=self.minute_hand,
            second_hand=self.second_hand,
        )


@dataclass(frozen=True, slots=True)
class ClockOptions:
    size: int = 300
    fps: int = 30
    margin: float = 0.1
    shape: ShapeOptions = field(default_factory=ShapeOptions)
    behavior: HandBehaviors = field(default_factory=HandBehaviors)
    style: StyleOptions = field(default_factory=StyleOptions)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ConfigurationError(f"size must be positive, got {self.size!r}")
        if self.fps <= 0:
            raise ConfigurationError(f"fps must be positive, got {self.fps!r}")
        if not 0 <= self.margin < 0.5:
            raise ConfigurationError(
                f"margin must be in [0, 0.5), got {self.margin!r}"
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ClockOptions":
        return _merge(cls(), mapping, path="")

    @classmethod
    def from_file(cls, path: str | Path) -> "ClockOptions":
        path = Path(path)
        try:
            raw = json.loads(path.read_text())
        except FileNotFoundError as exc:
            raise ConfigurationError(f"options file {path} does not exist") from exc
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"options file {path} is not valid JSON: {exc}") from exc
        if not isinstance(raw, Mapping):
            raise ConfigurationError(f"options file {path} must contain an object")
        return cls.from_mapping(raw)

    def with_overrides(self, **changes: Any) -> "ClockOptions":
        """Return a copy with top-level fields replaced, skipping ``None``."""
        changes = {key: value for key, value in changes.items() if value is not None}
        if not changes:
            return self
        return replace(self, **changes)


def _merge(current: OptionsT, mapping: Mapping[str, Any], *, path: str) -> OptionsT:
    if not isinstance(mapping, Mapping):
        raise ConfigurationError(f"{path or 'options'} must be an object")

    hints = typing.get_type_hints(type(current))
    known = {f.name for f in fields(current)}
    changes: dict[str, Any] = {}
    for raw_key, value in mapping.items():
        key = KEY_ALIASES.get(raw_key, raw_key)
        dotted = f"{path}.{key}" if path else key
        if key not in known:
            raise ConfigurationError(f"unknown option {dotted!r}")
        existing = getattr(current, key)
        if is_dataclass(existing):
            changes[key] = _merge(existing, value, path=dotted)
        else:
            changes[key] = _coerce(value, hints[key], dotted)
    return replace(current, **changes)


def _coerce(value: Any, hint: Any, path: str) -> Any:
    if isinstance(hint, types.UnionType):
        hint = next(arg for arg in typing.get_args(hint) if arg is not type(None))
    if hint is str:
        if not isinstance(value, str):
            raise ConfigurationError(f"{path} must be a string, got {value!r}")
        return value
    # bool is an int subclass but never a meaningful size or rate.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{path} must be a number, got {value!r}")
    if hint is int:
        if isinstance(value, float) and not value.is_integer():
            raise ConfigurationError(f"{path} must be an integer, got {value!r}")
        return int(value)
    return float(value)
