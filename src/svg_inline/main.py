"""Command-line entrypoint: render one icon to stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from svg_inline.aliases import Aliases
from svg_inline.config import InlineConfig
from svg_inline.errors import SvgInlineError
from svg_inline.icons.request import IconRequest
from svg_inline.icons.sources import BootstrapIcon, FileIcon, FontAwesomeIcon, IconSource
from svg_inline.inline import SvgInline


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _key_value(raw: str, sep: str) -> tuple[str, str]:
    key, found, value = raw.partition(sep)
    if not found or not key.strip():
        raise argparse.ArgumentTypeError(f"expected KEY{sep}VALUE, got {raw!r}")
    return key.strip(), value.strip()


def _css_item(raw: str) -> tuple[str, str]:
    return _key_value(raw, "=")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="svg-inline", description="Render an SVG icon as inline markup.")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    parser.add_argument("--config", type=Path, default=None, help="JSON configuration file")
    parser.add_argument("--fallback", default=None, help="fallback icon path (overrides config)")
    parser.add_argument("--fill", dest="default_fill", default=None, help="default fill (overrides config)")
    parser.add_argument("--alias", action="append", default=[], metavar="@NAME=DIR", help="register a path alias")

    sub = parser.add_subparsers(dest="source", required=True)
    p_file = sub.add_parser("file", help="render an SVG file")
    p_file.add_argument("path")
    p_bs = sub.add_parser("bootstrap", help="render a Bootstrap icon")
    p_bs.add_argument("name")
    p_fa = sub.add_parser("fa", help="render a Font Awesome icon")
    p_fa.add_argument("name")
    p_fa.add_argument("--style", default=None)

    for p in (p_file, p_bs, p_fa):
        p.add_argument("--width", default=None)
        p.add_argument("--height", default=None)
        p.add_argument("--class", dest="css_class", default=None)
        p.add_argument("--title", default=None)
        p.add_argument("--icon-fill", dest="icon_fill", default=None)
        p.add_argument("--css", action="append", type=_css_item, default=[], metavar="PROP=VALUE")
    return parser


def _source_from_args(args: argparse.Namespace) -> IconSource:
    if args.source == "file":
        return FileIcon(args.path)
    if args.source == "bootstrap":
        return BootstrapIcon(args.name)
    return FontAwesomeIcon(args.name, args.style)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(bool(args.verbose))
    log = logging.getLogger("svg_inline")

    config = InlineConfig.load(args.config)
    if args.fallback is not None:
        config.fallback_icon = args.fallback
    if args.default_fill is not None:
        config.fill = args.default_fill

    aliases = Aliases(config.aliases)
    for raw in args.alias:
        try:
            name, path = _key_value(raw, "=")
        except argparse.ArgumentTypeError as e:
            parser.error(str(e))
        aliases.set(name, path)

    try:
        request = IconRequest.from_dict(
            {
                "width": args.width,
                "height": args.height,
                "class": args.css_class,
                "fill": args.icon_fill,
                "title": args.title,
                "css": dict(args.css) or None,
            }
        )
        markup = SvgInline(config, aliases).render(_source_from_args(args), request)
    except SvgInlineError as e:
        log.error("render_failed error=%s", e)
        print(f"svg-inline: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(markup + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
