"""Configuration persistence for svg-inline.

The configuration is a small JSON file, by default
`~/.config/svg-inline/config.json` (or `$SVG_INLINE_CONFIG` when set). It holds the
values shared by every render: the fallback icon, the default fill and class, path
aliases and the icon set roots.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

APP_DIR_NAME: Final[str] = "svg-inline"
CONFIG_FILE_NAME: Final[str] = "config.json"

_log = logging.getLogger("svg_inline.config")


def _default_config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def get_config_path() -> Path:
    override = os.getenv("SVG_INLINE_CONFIG")
    if override:
        return Path(override)
    return _default_config_dir() / APP_DIR_NAME / CONFIG_FILE_NAME


@dataclass
class InlineConfig:
    """Process-wide render settings.

    Notes:
    - `fallback_icon` may be an alias path; it is rendered when a requested icon fails to load.
    - `fill` is the default fill color. An empty string disables the attribute.
    - `aliases` maps `@name` to a directory and is used for every icon path.
    """

    fallback_icon: str = ""
    fill: str = "currentColor"
    default_class: str = ""

    aliases: dict[str, str] = field(default_factory=dict)

    bootstrap_root: str = "@npm/bootstrap-icons/icons"
    fontawesome_root: str = "@npm/fortawesome--fontawesome-free/svgs"
    fontawesome_default_style: str = "solid"

    def to_dict(self) -> dict[str, Any]:
        return {
            "fallback_icon": self.fallback_icon,
            "fill": self.fill,
            "default_class": self.default_class,
            "aliases": dict(self.aliases),
            "bootstrap_root": self.bootstrap_root,
            "fontawesome_root": self.fontawesome_root,
            "fontawesome_default_style": self.fontawesome_default_style,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "InlineConfig":
        cfg = cls()
        for k, v in raw.items():
            if hasattr(cfg, k):
                if k == "aliases" and not isinstance(v, dict):
                    _log.warning("config_key_ignored key=aliases reason=not-an-object")
                    continue
                setattr(cfg, k, dict(v) if k == "aliases" else v)
        return cfg

    @classmethod
    def load(cls, path: Path | None = None) -> "InlineConfig":
        path = path or get_config_path()
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            _log.warning("config_unreadable path=%s error=%s", path, e)
            return cls()
        if not isinstance(data, dict):
            _log.warning("config_ignored path=%s reason=not-an-object", path)
            return cls()
        return cls.from_dict(data)

    def save(self, path: Path | None = None) -> None:
        path = path or get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
