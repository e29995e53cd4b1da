"""Markdown to HTML adapter around mistune v3.

The bidi pass treats this renderer as a black box: whatever HTML string it
returns is what gets parsed and wrapped.  Whether raw HTML in a message
passes through or is escaped is decided here and nowhere else.
"""

from __future__ import annotations

import mistune


class MarkdownRenderer:
    """Render chat-message Markdown to an HTML string.

    Usage::

        renderer = MarkdownRenderer(allow_raw_html=False)
        html = renderer.render("**Hello** world")
    """

    PLUGINS = ["strikethrough", "table", "url", "task_lists"]

    def __init__(self, allow_raw_html: bool = False, hard_wrap: bool = False) -> None:
        self.allow_raw_html = allow_raw_html
        self._md = mistune.create_markdown(
            escape=not allow_raw_html,
            hard_wrap=hard_wrap,
            plugins=self.PLUGINS,
        )

    def render(self, text: str) -> str:
        """Return the HTML rendering of *text*."""
        if not text:
            return ""
        return self._md(text)  # type: ignore[return-value]
