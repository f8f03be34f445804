"""Loading, mutating and serializing one icon document.

An `IconDocument` moves through `UNLOADED → LOADED → MUTATED → SERIALIZED`. The
requested file is parsed with lxml; if that fails for any reason the configured
fallback icon is parsed instead. Only a broken fallback is reported to the caller.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from pathlib import Path

from lxml import etree

from svg_inline.errors import (
    FallbackLoadError,
    InvalidDocumentStateError,
    MissingRootElementError,
    ResourceLoadError,
)


class DocumentState(enum.Enum):
    UNLOADED = "unloaded"
    LOADED = "loaded"
    MUTATED = "mutated"
    SERIALIZED = "serialized"


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)


def _find_svg(tree: etree._ElementTree) -> etree._Element | None:
    for el in tree.getroot().iter("{*}svg"):
        return el
    return None


def parse_svg(path: str | Path) -> tuple[etree._ElementTree, etree._Element]:
    """Parse `path` and return the tree and its first `svg` element.

    Raises `ResourceLoadError` when the file is missing, unreadable, malformed or
    has no `svg` element.
    """
    if not str(path):
        raise ResourceLoadError("no icon path given")
    parser = _make_parser()
    etree.clear_error_log()
    try:
        tree = etree.parse(str(path), parser)
    except (OSError, etree.XMLSyntaxError) as e:
        raise ResourceLoadError(f"cannot parse {path}: {e}") from e
    finally:
        etree.clear_error_log()

    root = _find_svg(tree)
    if root is None:
        raise ResourceLoadError(f"no svg element in {path}")
    return tree, root


class IconDocument:
    """A single render's SVG document.

    Instances are not shared between renders; each call to `load` parses a fresh tree.
    """

    def __init__(self, fallback_path: str | Path = "") -> None:
        self._log = logging.getLogger("svg_inline.document")
        self._fallback_path = str(fallback_path)
        self._tree: etree._ElementTree | None = None
        self._root: etree._Element | None = None
        self.state = DocumentState.UNLOADED
        self.used_fallback = False

    @property
    def root(self) -> etree._Element:
        if self._root is None:
            raise InvalidDocumentStateError("document is not loaded")
        return self._root

    def _require(self, *states: DocumentState) -> None:
        if self.state not in states:
            raise InvalidDocumentStateError(
                f"operation requires state {'/'.join(s.value for s in states)}, document is {self.state.value}"
            )

    def load(self, path: str | Path) -> "IconDocument":
        self._require(DocumentState.UNLOADED)
        try:
            self._tree, self._root = parse_svg(path)
        except ResourceLoadError as e:
            self._log.warning("fallback_used path=%s fallback=%s reason=%s", path, self._fallback_path, e)
            self._load_fallback()
        self.state = DocumentState.LOADED
        return self

    def _load_fallback(self) -> None:
        if not self._fallback_path:
            raise FallbackLoadError("icon could not be loaded and no fallback icon is configured")
        try:
            tree = etree.parse(self._fallback_path, _make_parser())
        except (OSError, etree.XMLSyntaxError) as e:
            raise FallbackLoadError(f"fallback icon {self._fallback_path} cannot be loaded: {e}") from e
        finally:
            etree.clear_error_log()

        root = _find_svg(tree)
        if root is None:
            raise MissingRootElementError(f"fallback icon {self._fallback_path} has no svg element")
        self._tree, self._root = tree, root
        self.used_fallback = True

    def apply(self, attributes: Mapping[str, object], title: str | None = None) -> "IconDocument":
        """Insert the optional `<title>` and write `attributes` onto the root.

        Each listed attribute is removed first and set again when its value is
        non-empty. Attributes not listed are left as they are.
        """
        self._require(DocumentState.LOADED)
        root = self.root

        if title:
            qname = etree.QName(root)
            tag = f"{{{qname.namespace}}}title" if qname.namespace else "title"
            # Created inside the root so it reuses the root's namespace declaration.
            title_el = etree.SubElement(root, tag)
            title_el.text = title
            root.insert(0, title_el)
            title_el.tail = root.text
            root.text = None

        for key, value in attributes.items():
            if key in root.attrib:
                del root.attrib[key]
            if value is not None and value != "":
                root.set(key, str(value))

        self.state = DocumentState.MUTATED
        return self

    def serialize(self) -> str:
        """Return the markup of the root `svg` element only, without an XML declaration."""
        self._require(DocumentState.MUTATED, DocumentState.SERIALIZED)
        markup = etree.tostring(self.root, encoding="unicode", with_tail=False)
        self.state = DocumentState.SERIALIZED
        return markup
