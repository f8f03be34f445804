"""Path aliases (`@icons/home.svg` → `/srv/assets/icons/home.svg`)."""

from __future__ import annotations

from collections.abc import Mapping

from svg_inline.errors import UnknownAliasError

_MAX_DEPTH = 16


def _normalize_name(name: str) -> str:
    name = name.strip()
    if not name.startswith("@"):
        name = f"@{name}"
    return name.rstrip("/")


class Aliases:
    """Resolves `@name` prefixes to concrete paths.

    Alias targets may start with another alias; they are expanded recursively.
    Paths without a leading `@` are returned unchanged.
    """

    def __init__(self, mapping: Mapping[str, str] | None = None) -> None:
        self._aliases: dict[str, str] = {}
        for name, path in (mapping or {}).items():
            self.set(name, path)

    def set(self, name: str, path: str) -> None:
        target = str(path).strip()
        if not target:
            raise UnknownAliasError(f"alias {name!r} has an empty target path")
        self._aliases[_normalize_name(name)] = target.rstrip("/") or "/"

    def has(self, name: str) -> bool:
        return _normalize_name(name) in self._aliases

    def get(self, path: str) -> str:
        return self._get(str(path), depth=0)

    def _get(self, path: str, *, depth: int) -> str:
        if not path.startswith("@"):
            return path
        if depth >= _MAX_DEPTH:
            raise UnknownAliasError(f"alias nesting too deep while resolving {path!r}")

        name, sep, rest = path.partition("/")
        target = self._aliases.get(name)
        if target is None:
            raise UnknownAliasError(f"unknown alias {name!r} in {path!r}")

        resolved = self._get(target, depth=depth + 1)
        if not sep:
            return resolved
        return f"{resolved.rstrip('/')}/{rest}"
