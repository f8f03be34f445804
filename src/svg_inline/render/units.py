"""CSS length → pixel conversion."""

from __future__ import annotations

import logging
import math
import re
from typing import Final

_log = logging.getLogger("svg_inline.units")

BASE_FONT_PX: Final[int] = 16

# Fixed equivalence table. Font-relative units assume a 16px base font size.
PIXEL_MAP: Final[dict[str, float]] = {
    "px": 1,
    "em": BASE_FONT_PX,
    "ex": BASE_FONT_PX / 2,
    "pt": BASE_FONT_PX / 12,
    "pc": BASE_FONT_PX,
    "in": BASE_FONT_PX * 6,
    "cm": BASE_FONT_PX / (2.54 / 6),
    "mm": BASE_FONT_PX / (25.4 / 6),
}

_NUMERIC_RE = re.compile(r"^\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*$")
_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 → 3, -2.5 → -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _finite_px(px: float, literal: str) -> int:
    if not math.isfinite(px):
        _log.debug("length_overflow literal=%r", literal)
        return 0
    return round_half_away(px)


def _is_numeric(text: str) -> bool:
    return _NUMERIC_RE.match(text) is not None


def _leading_number(text: str) -> float:
    m = _LEADING_NUMBER_RE.match(text)
    if not m:
        return 0.0
    return float(m.group(1))


def to_pixels(literal: str | None) -> int:
    """Convert a length literal such as `24px`, `1.5em` or `10pt` to whole pixels.

    The last two characters are tried as a unit. When they are not a known unit,
    or the rest is not a number, the literal is read as a bare pixel count using
    its leading number. Anything without a leading number converts to 0.
    """
    size = (literal or "").strip()
    value, unit = size[:-2], size[-2:]

    if _is_numeric(value) and unit in PIXEL_MAP:
        return _finite_px(float(value) * PIXEL_MAP[unit], size)

    px = _leading_number(size)
    if size and not _is_numeric(size):
        _log.debug("length_fallthrough literal=%r px=%s", size, px)
    return _finite_px(px, size)
