"""Exceptions raised while resolving and rendering inline SVG icons."""

from __future__ import annotations


class SvgInlineError(Exception):
    """Base class for all svg-inline failures."""


class ResourceLoadError(SvgInlineError):
    """The requested icon could not be parsed.

    Recovered by the document loader, which substitutes the fallback icon.
    """


class FallbackLoadError(SvgInlineError):
    """The configured fallback icon is missing or not valid markup."""


class MissingRootElementError(SvgInlineError):
    """The loaded document has no `svg` element."""


class InvalidDocumentStateError(SvgInlineError):
    """A document operation was called out of order."""


class UnknownAliasError(SvgInlineError, ValueError):
    pass


class UnknownIconOptionError(SvgInlineError, ValueError):
    pass


class InvalidIconOptionError(SvgInlineError, ValueError):
    pass


class UnknownIconStyleError(SvgInlineError, ValueError):
    pass
