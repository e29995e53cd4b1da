"""md2bidi - render chat Markdown to HTML with explicit bidi direction markers."""

from __future__ import annotations

__version__ = "0.1.0"

from md2bidi.converter import Converter, Direction, RenderResult
from md2bidi.errors import BidiRenderError, MalformedMarkupError, PathologicalInputError
from md2bidi.script import ScriptTag, TextChunk, classify, has_rtl, segment

__all__ = [
    "__version__",
    "BidiRenderError",
    "Converter",
    "Direction",
    "MalformedMarkupError",
    "PathologicalInputError",
    "RenderResult",
    "ScriptTag",
    "TextChunk",
    "classify",
    "has_rtl",
    "segment",
]
