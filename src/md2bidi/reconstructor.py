"""Re-emit a parsed fragment with every text chunk wrapped in a ``dir`` marker.

Elements come back out with the same tag and the same attributes in the
same order; only text nodes change, each split by
:func:`~md2bidi.script.segment` and wrapped chunk by chunk.  Text inside
``script``/``style`` is copied verbatim and text inside ``textarea``/``title``
is only re-escaped, since browsers show neither as markup.  Comments are
dropped.  Output is accumulated into a single list and joined once.
"""

from __future__ import annotations

from html import escape
from typing import Optional

from md2bidi.parser import (
    ESCAPABLE_RAW_TEXT_ELEMENTS,
    RAW_TEXT_ELEMENTS,
    VOID_ELEMENTS,
    MarkupNode,
)
from md2bidi.script import ScriptTag, segment
from md2bidi.style_manager import StyleManager, WrapperStyle


class Reconstructor:
    """Serialise a :class:`MarkupNode` tree, wrapping text by script."""

    def __init__(self, wrapper: Optional[WrapperStyle] = None) -> None:
        self.wrapper = wrapper or StyleManager().wrapper

    # -- public API ---------------------------------------------------------

    def reconstruct(self, root: MarkupNode) -> str:
        """Return the HTML for the children of *root*."""
        out: list[str] = []
        self._visit_children(root, out, _WRAP)
        return "".join(out)

    # -- visitors -----------------------------------------------------------

    def _visit_children(self, node: MarkupNode, out: list[str], mode: str) -> None:
        for child in node.children:
            visitor = getattr(self, f"_visit_{child.type.value}")
            visitor(child, out, mode)

    def _visit_element(self, node: MarkupNode, out: list[str], mode: str) -> None:
        out.append(f"<{node.tag}{_format_attrs(node.attrs)}>")
        if node.tag in VOID_ELEMENTS:
            return
        self._visit_children(node, out, _text_mode(node.tag, mode))
        out.append(f"</{node.tag}>")

    def _visit_text(self, node: MarkupNode, out: list[str], mode: str) -> None:
        if mode == _VERBATIM:
            out.append(node.text)
            return
        if mode == _ESCAPE_ONLY:
            out.append(escape(node.text, quote=False))
            return
        for chunk in segment(node.text):
            if not chunk.text:
                continue
            if chunk.is_blank:
                # Whitespace between elements is layout; leave it bare.
                out.append(chunk.text)
                continue
            direction = "rtl" if chunk.script is ScriptTag.RTL else "ltr"
            out.append(self.wrapper.open_tag(direction))
            out.append(escape(chunk.text, quote=False))
            out.append(self.wrapper.close_tag)

    def _visit_comment(self, node: MarkupNode, out: list[str], mode: str) -> None:
        pass


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

# How text under an element is written out.
_WRAP = "wrap"
_VERBATIM = "verbatim"
_ESCAPE_ONLY = "escape"


def _text_mode(tag: str, inherited: str) -> str:
    if tag in RAW_TEXT_ELEMENTS:
        return _VERBATIM
    if tag in ESCAPABLE_RAW_TEXT_ELEMENTS:
        return _ESCAPE_ONLY
    return inherited


def _format_attrs(attrs: list[tuple[str, Optional[str]]]) -> str:
    """Serialise attributes in source order, re-escaping the decoded values."""
    return "".join(f' {name}="{escape(value or "")}"' for name, value in attrs)


def reconstruct(root: MarkupNode, wrapper: Optional[WrapperStyle] = None) -> str:
    """Shortcut for ``Reconstructor(wrapper).reconstruct(root)``."""
    return Reconstructor(wrapper).reconstruct(root)
