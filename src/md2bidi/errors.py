"""Exceptions raised while parsing and rebuilding message markup.

The :class:`~md2bidi.converter.Converter` catches every
:class:`BidiRenderError` and falls back to the unmodified HTML, so these
only surface to callers that use the lower-level APIs directly.
"""

from __future__ import annotations


class BidiRenderError(ValueError):
    """Base class for failures of the bidi wrapping pass."""


class MalformedMarkupError(BidiRenderError):
    """The HTML fragment could not be turned into a well-formed tree."""


class PathologicalInputError(BidiRenderError):
    """The input exceeds the configured size or nesting limits."""
