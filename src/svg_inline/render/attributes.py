"""Presentation attributes written onto the rendered `svg` element."""

from __future__ import annotations

from collections.abc import Mapping

from svg_inline.icons.request import IconRequest
from svg_inline.render.dimensions import Dimensions


def css_style_from_mapping(css: Mapping[str, object]) -> str:
    """Serialize an ordered property mapping as `key:value;key:value`."""
    return ";".join(f"{k}:{v}" for k, v in css.items())


def build_attributes(
    icon: IconRequest,
    dims: Dimensions | None,
    fill: str,
    *,
    default_class: str = "",
) -> dict[str, str]:
    """Build the ordered attribute set for the root element.

    `aria-hidden` and `role` are always present. Other entries appear only with a
    non-empty value; `width`/`height` only when `dims` comes from an override.
    """
    attrs: dict[str, str] = {}
    if dims is not None:
        attrs["width"] = str(dims.width)
        attrs["height"] = str(dims.height)

    attrs["aria-hidden"] = "true"
    attrs["role"] = "img"

    css_class = icon.class_ if icon.class_ is not None else default_class
    if css_class:
        attrs["class"] = css_class

    if icon.css:
        attrs["style"] = css_style_from_mapping(icon.css)

    resolved_fill = icon.fill if icon.fill is not None else fill
    if resolved_fill:
        attrs["fill"] = resolved_fill

    return attrs
