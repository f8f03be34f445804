"""Per-render icon options."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Final

from svg_inline.errors import InvalidIconOptionError, UnknownIconOptionError
from svg_inline.render.units import round_half_away, to_pixels

# Public option names; `class` maps to the `class_` field.
OPTION_NAMES: Final[tuple[str, ...]] = ("width", "height", "class", "fill", "title", "css")


def _coerce_length(name: str, value: int | str | None) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidIconOptionError(f"{name} must be a length, got {value!r}")
    if isinstance(value, str):
        px = to_pixels(value)
    elif isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise InvalidIconOptionError(f"{name} must be finite, got {value!r}")
        px = round_half_away(value)
    else:
        raise InvalidIconOptionError(f"{name} must be a length, got {type(value).__name__}")
    if px <= 0:
        raise InvalidIconOptionError(f"{name} must be positive, got {value!r}")
    return px


@dataclass(frozen=True)
class IconRequest:
    """Caller options for a single render.

    `None` means "not set". For `fill` that selects the configured default,
    while an empty string turns the attribute off.
    """

    width: int | None = None
    height: int | None = None
    class_: str | None = None
    fill: str | None = None
    title: str | None = None
    css: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _coerce_length("width", self.width))
        object.__setattr__(self, "height", _coerce_length("height", self.height))
        if not isinstance(self.css, Mapping):
            raise InvalidIconOptionError(f"css must be a mapping, got {type(self.css).__name__}")
        object.__setattr__(self, "css", {str(k): str(v) for k, v in self.css.items()})

    @property
    def has_size_override(self) -> bool:
        return self.width is not None or self.height is not None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "IconRequest":
        unknown = [k for k in raw if k not in OPTION_NAMES]
        if unknown:
            raise UnknownIconOptionError(
                f"unknown icon option(s): {', '.join(sorted(unknown))}; "
                f"expected one of {', '.join(OPTION_NAMES)}"
            )
        kwargs = {("class_" if k == "class" else k): v for k, v in raw.items()}
        if kwargs.get("css") is None:
            kwargs.pop("css", None)
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "class": self.class_,
            "fill": self.fill,
            "title": self.title,
            "css": dict(self.css),
        }

    def with_options(self, **options: Any) -> "IconRequest":
        """Return a copy with the given options replaced (`class` may be passed as `class_`)."""
        merged = self.to_dict()
        for k, v in options.items():
            merged["class" if k == "class_" else k] = v
        return IconRequest.from_dict(merged)

    def with_size(self, width: int | str | None, height: int | str | None = None) -> "IconRequest":
        return replace(self, width=width, height=height)
