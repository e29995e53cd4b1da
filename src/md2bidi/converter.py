"""High-level Markdown-to-bidi-HTML orchestrator.

Ties together the Markdown renderer, the fragment parser and the
reconstructor into a single public API.  Messages without any Arabic code
point skip the parse entirely; for the rest the rendered HTML is rebuilt
with direction markers, falling back to the renderer's output untouched if
anything goes wrong.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from html import escape
from pathlib import Path
from typing import Optional

from md2bidi.errors import BidiRenderError
from md2bidi.markdown_renderer import MarkdownRenderer
from md2bidi.parser import RenderLimits, parse_fragment
from md2bidi.reconstructor import Reconstructor
from md2bidi.script import has_rtl
from md2bidi.style_manager import StyleManager

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    LTR = "ltr"
    RTL = "rtl"


@dataclass(frozen=True)
class RenderResult:
    """Rendered HTML plus the base direction for its container."""

    html: str
    direction: Direction

    def container_attrs(self) -> dict[str, str]:
        """Attributes to set on the element that receives :attr:`html`."""
        if self.direction is Direction.RTL:
            return {"dir": "rtl", "style": "unicode-bidi: plaintext;"}
        return {"dir": "ltr"}

    def as_container(self, tag: str = "div") -> str:
        """Return :attr:`html` wrapped in a *tag* element carrying the direction."""
        attrs = "".join(f' {k}="{escape(v)}"' for k, v in self.container_attrs().items())
        return f"<{tag}{attrs}>{self.html}</{tag}>"

    def as_document(self, title: str = "") -> str:
        """Return a standalone HTML document containing :meth:`as_container`."""
        return _DOCUMENT_TEMPLATE.format(title=escape(title), body=self.as_container())


_DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
{body}
</body>
</html>
"""


class Converter:
    """Render chat messages to HTML with explicit bidi markers.

    Usage::

        converter = Converter(style_preset="inline-block")
        result = converter.render("Hello مرحبا world")
        result.html, result.direction

        # or from a file
        converter.convert_file("message.md", "message.html")
    """

    def __init__(
        self,
        style_preset: str = "inline-block",
        *,
        allow_raw_html: bool = False,
        hard_wrap: bool = False,
        limits: Optional[RenderLimits] = None,
    ) -> None:
        self.style_manager = StyleManager(style_preset)
        self.markdown = MarkdownRenderer(allow_raw_html=allow_raw_html, hard_wrap=hard_wrap)
        self.limits = limits or RenderLimits()
        self.reconstructor = Reconstructor(self.style_manager.wrapper)

    def render(self, raw_message: str) -> RenderResult:
        """Render *raw_message* and add direction markers when it needs them.

        Never raises for string input: on any failure of the bidi pass the
        Markdown renderer's HTML is returned unchanged with direction
        ``ltr``.
        """
        html = self.markdown.render(raw_message)
        if not has_rtl(raw_message):
            return RenderResult(html=html, direction=Direction.LTR)

        logger.debug("RTL script found, wrapping %d characters of HTML", len(html))
        try:
            wrapped = self.wrap_html(html)
        except (BidiRenderError, RecursionError) as exc:
            logger.warning("Skipping bidi wrapping: %s", exc)
            return RenderResult(html=html, direction=Direction.LTR)
        except Exception:
            logger.exception("Unexpected error while wrapping HTML for bidi")
            return RenderResult(html=html, direction=Direction.LTR)
        return RenderResult(html=wrapped, direction=Direction.RTL)

    def wrap_html(self, html: str) -> str:
        """Parse *html* and return it with every text chunk direction-wrapped.

        Raises:
            MalformedMarkupError: *html* is not a well-formed fragment.
            PathologicalInputError: *html* exceeds :attr:`limits`.
        """
        root = parse_fragment(html, self.limits)
        return self.reconstructor.reconstruct(root)

    def convert_file(
        self,
        input_path: str | Path,
        output_path: str | Path,
        *,
        encoding: str = "utf-8",
        fragment: bool = False,
    ) -> RenderResult:
        """Read a Markdown file and write the rendered HTML.

        Args:
            input_path: Path to the input ``.md`` file.
            output_path: Path for the output ``.html`` file.
            encoding: Text encoding of the source file.
            fragment: Write only the container element instead of a full
                HTML document.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        result = self.render(input_path.read_text(encoding=encoding))
        if fragment:
            body = result.as_container()
        else:
            body = result.as_document(title=input_path.stem)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(body, encoding="utf-8")
        return result
