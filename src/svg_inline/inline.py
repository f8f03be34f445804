"""Public rendering API.

    svg = SvgInline(InlineConfig(fallback_icon="@icons/missing.svg", aliases={"@icons": "assets"}))
    html = str(svg.file("@icons/home.svg").width(32).class_("icon").title("Home"))
    html = svg.fai("house", "regular").fill("").render()
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from svg_inline.aliases import Aliases
from svg_inline.config import InlineConfig
from svg_inline.icons.request import IconRequest
from svg_inline.icons.sources import BootstrapIcon, FileIcon, FontAwesomeIcon, IconSource
from svg_inline.render.attributes import build_attributes
from svg_inline.render.dimensions import natural_size, resolve_dimensions
from svg_inline.render.document import IconDocument


class SvgInline:
    """Renders icons to inline SVG markup using one configuration."""

    def __init__(self, config: InlineConfig | None = None, aliases: Aliases | None = None) -> None:
        self._log = logging.getLogger("svg_inline.inline")
        self._config = config or InlineConfig()
        self._aliases = aliases if aliases is not None else Aliases(self._config.aliases)

    def file(self, path: str) -> "InlineIcon":
        return InlineIcon(self, FileIcon(path))

    def bootstrap(self, name: str) -> "InlineIcon":
        return InlineIcon(self, BootstrapIcon(name))

    def fai(self, name: str, style: str | None = None) -> "InlineIcon":
        return InlineIcon(self, FontAwesomeIcon(name, style))

    def render(self, source: IconSource, request: IconRequest | None = None) -> str:
        request = request or IconRequest()
        resolved = source.resolve(self._config, self._aliases)
        fallback = self._aliases.get(self._config.fallback_icon) if self._config.fallback_icon else ""

        doc = IconDocument(fallback_path=fallback).load(resolved.path)

        dims = None
        if request.has_size_override:
            dims = resolve_dimensions(natural_size(doc.root), request.width, request.height)

        attrs = build_attributes(
            request,
            dims,
            self._config.fill,
            default_class=self._config.default_class,
        )
        markup = doc.apply(attrs, title=request.title).serialize()
        self._log.debug(
            "rendered kind=%s path=%s fallback=%s size=%s",
            resolved.kind,
            resolved.path,
            doc.used_fallback,
            dims.as_tuple() if dims else None,
        )
        return markup


@dataclass(frozen=True)
class InlineIcon:
    """An icon source plus its options. Setters return a new instance."""

    renderer: SvgInline
    source: IconSource
    request: IconRequest = field(default_factory=IconRequest)

    def _with(self, **options: Any) -> "InlineIcon":
        return InlineIcon(self.renderer, self.source, self.request.with_options(**options))

    def width(self, value: int | str) -> "InlineIcon":
        return self._with(width=value)

    def height(self, value: int | str) -> "InlineIcon":
        return self._with(height=value)

    def size(self, width: int | str | None, height: int | str | None = None) -> "InlineIcon":
        return InlineIcon(self.renderer, self.source, self.request.with_size(width, height))

    def class_(self, value: str) -> "InlineIcon":
        return self._with(class_=value)

    def fill(self, value: str) -> "InlineIcon":
        return self._with(fill=value)

    def title(self, value: str) -> "InlineIcon":
        return self._with(title=value)

    def css(self, value: Mapping[str, str]) -> "InlineIcon":
        return self._with(css=value)

    def options(self, **options: Any) -> "InlineIcon":
        return self._with(**options)

    def render(self) -> str:
        return self.renderer.render(self.source, self.request)

    def __str__(self) -> str:
        return self.render()
