"""Natural size detection and override sizing for SVG root elements."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from lxml import etree

from svg_inline.render.units import round_half_away, to_pixels

_log = logging.getLogger("svg_inline.dimensions")

DEFAULT_SIZE: tuple[int, int] = (1, 1)


@dataclass(frozen=True)
class Dimensions:
    width: int
    height: int

    def as_tuple(self) -> tuple[int, int]:
        return self.width, self.height


def _parse_viewbox(value: str) -> tuple[float, float] | None:
    parts = re.split(r"[,\s]+", value.strip())
    if len(parts) != 4:
        return None
    try:
        x_start, y_start, x_end, y_end = (float(p) for p in parts)
    except ValueError:
        return None
    width = x_end - x_start
    height = y_end - y_start
    if not (math.isfinite(width) and math.isfinite(height)):
        return None
    if width <= 0 or height <= 0:
        return None
    return width, height


def natural_size(root: etree._Element) -> tuple[float, float]:
    """Return the intrinsic (width, height) of an `svg` element.

    A valid viewBox wins over the width/height attributes. When neither yields a
    positive pair the size is (1, 1), so aspect ratios never divide by zero.
    """
    width: float = to_pixels(root.get("width"))
    height: float = to_pixels(root.get("height"))

    viewbox_raw = root.get("viewBox")
    if viewbox_raw is not None:
        vb = _parse_viewbox(viewbox_raw)
        if vb is not None:
            width, height = vb

    if width <= 0 or height <= 0:
        return DEFAULT_SIZE
    return width, height


def resolve_dimensions(
    natural: tuple[float, float],
    width: int | None = None,
    height: int | None = None,
) -> Dimensions:
    """Compute the rendered size from the natural size and optional overrides.

    One override derives the other from the natural aspect ratio, never below 1px;
    two overrides are used as given.
    """
    natural_w, natural_h = natural
    if natural_w <= 0 or natural_h <= 0:
        _log.debug("natural_size_clamped natural=%s", natural)
        natural_w, natural_h = DEFAULT_SIZE

    if width is None and height is None:
        return Dimensions(width=round_half_away(natural_w), height=round_half_away(natural_h))
    if width is not None and height is not None:
        return Dimensions(width=int(width), height=int(height))
    if width is not None:
        return Dimensions(width=int(width), height=max(1, round_half_away(width * natural_h / natural_w)))
    assert height is not None
    return Dimensions(width=max(1, round_half_away(height * natural_w / natural_h)), height=int(height))
