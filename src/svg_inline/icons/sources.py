"""Icon sources: plain files and named icon sets.

Every source resolves to a `ResolvedIcon`, the concrete path that the document
loader reads. Named sets only differ in how a name (and optional style) maps to
a file below their root directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Protocol, Union

from svg_inline.aliases import Aliases
from svg_inline.config import InlineConfig
from svg_inline.errors import InvalidIconOptionError, UnknownIconStyleError

FONTAWESOME_STYLES: Final[tuple[str, ...]] = ("solid", "regular", "brands")


@dataclass(frozen=True)
class ResolvedIcon:
    path: str
    kind: str = "file"


class NamedIconSet(Protocol):
    def locate(self, name: str, style: str | None = None) -> str: ...


def _check_name(name: str) -> str:
    name = (name or "").strip()
    if not name or "/" in name or "\\" in name or name in (".", ".."):
        raise InvalidIconOptionError(f"invalid icon name {name!r}")
    return name


@dataclass(frozen=True)
class BootstrapIcons:
    root: str

    def locate(self, name: str, style: str | None = None) -> str:
        if style:
            raise UnknownIconStyleError(f"bootstrap icons have no styles, got {style!r}")
        return f"{self.root.rstrip('/')}/{_check_name(name)}.svg"


@dataclass(frozen=True)
class FontAwesomeIcons:
    root: str
    default_style: str = "solid"

    def locate(self, name: str, style: str | None = None) -> str:
        style = style or self.default_style
        if style not in FONTAWESOME_STYLES:
            raise UnknownIconStyleError(
                f"unknown Font Awesome style {style!r}; expected one of {', '.join(FONTAWESOME_STYLES)}"
            )
        return f"{self.root.rstrip('/')}/{style}/{_check_name(name)}.svg"


@dataclass(frozen=True)
class FileIcon:
    path: str

    def resolve(self, config: InlineConfig, aliases: Aliases) -> ResolvedIcon:
        return ResolvedIcon(path=aliases.get(self.path), kind="file")


@dataclass(frozen=True)
class BootstrapIcon:
    name: str

    def resolve(self, config: InlineConfig, aliases: Aliases) -> ResolvedIcon:
        icon_set: NamedIconSet = BootstrapIcons(root=config.bootstrap_root)
        return ResolvedIcon(path=aliases.get(icon_set.locate(self.name)), kind="bootstrap")


@dataclass(frozen=True)
class FontAwesomeIcon:
    name: str
    style: str | None = None

    def resolve(self, config: InlineConfig, aliases: Aliases) -> ResolvedIcon:
        icon_set: NamedIconSet = FontAwesomeIcons(
            root=config.fontawesome_root,
            default_style=config.fontawesome_default_style,
        )
        return ResolvedIcon(path=aliases.get(icon_set.locate(self.name, self.style)), kind="fontawesome")


IconSource = Union[FileIcon, BootstrapIcon, FontAwesomeIcon]
