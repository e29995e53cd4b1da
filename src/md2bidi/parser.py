"""HTML fragment parser that produces the tree walked by the reconstructor.

Uses the standard library :class:`html.parser.HTMLParser` tokenizer and
assembles its events into a small :class:`MarkupNode` tree.  Unlike a
browser, the parser refuses markup it cannot close cleanly: an end tag
without a matching start tag, or an element left open at the end of the
input, raises :class:`~md2bidi.errors.MalformedMarkupError`.  Elements whose
end tag HTML allows to be omitted (``li``, ``p``, ``td``, ...) are closed
implicitly.  A self-closing slash only closes void elements and elements
inside ``svg``/``math``; ``<div/>`` opens a ``div`` like ``<div>`` does.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from html.parser import HTMLParser
from typing import Optional

from md2bidi.errors import MalformedMarkupError, PathologicalInputError


# ---------------------------------------------------------------------------
# Tree node definitions
# ---------------------------------------------------------------------------

class NodeType(Enum):
    FRAGMENT = "fragment"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"


@dataclass
class MarkupNode:
    type: NodeType
    children: list[MarkupNode] = field(default_factory=list)
    # Element
    tag: str = ""
    attrs: list[tuple[str, Optional[str]]] = field(default_factory=list)
    # Text / comment
    text: str = ""


VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})

RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

# Browsers read the content of these as plain text, never as markup.
ESCAPABLE_RAW_TEXT_ELEMENTS = frozenset({"textarea", "title"})

# Roots of foreign content, where a trailing slash really closes an element.
FOREIGN_ELEMENTS = frozenset({"svg", "math"})

# Elements whose end tag may be left out; closed when an ancestor closes or
# the fragment ends.
OPTIONAL_END_ELEMENTS = frozenset({
    "li", "dt", "dd", "p", "rt", "rp", "optgroup", "option",
    "colgroup", "caption", "thead", "tbody", "tfoot", "tr", "td", "th",
})

# Start tags that implicitly close an open element of the listed kinds, as
# in <li>one<li>two.
_IMPLIED_CLOSE = {
    "li": {"li"},
    "dt": {"dt", "dd"},
    "dd": {"dt", "dd"},
    "p": {"p"},
    "option": {"option"},
    "tr": {"tr", "td", "th"},
    "td": {"td", "th"},
    "th": {"td", "th"},
}


@dataclass
class RenderLimits:
    """Ceilings applied before and during parsing."""

    max_input_chars: int = 1_000_000
    max_depth: int = 200


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class FragmentParser(HTMLParser):
    """Build a :class:`MarkupNode` tree from an HTML fragment.

    One instance parses one fragment; use :func:`parse_fragment` rather than
    driving the tokenizer by hand.
    """

    def __init__(self, limits: Optional[RenderLimits] = None) -> None:
        super().__init__(convert_charrefs=True)
        self.limits = limits or RenderLimits()
        self.root = MarkupNode(type=NodeType.FRAGMENT)
        self._stack: list[MarkupNode] = [self.root]

    # -- public API ---------------------------------------------------------

    def parse(self, html: str) -> MarkupNode:
        """Return a *FRAGMENT* node holding the parsed content of *html*."""
        if len(html) > self.limits.max_input_chars:
            raise PathologicalInputError(
                f"input is {len(html)} characters, limit is {self.limits.max_input_chars}"
            )
        self.feed(html)
        self.close()
        self._close_optional(until=self.root)
        return self.root

    # -- tokenizer callbacks ------------------------------------------------

    def handle_starttag(self, tag: str, attrs: list[tuple[str, Optional[str]]]) -> None:
        closes = _IMPLIED_CLOSE.get(tag, ())
        while len(self._stack) > 1 and self._stack[-1].tag in closes:
            self._stack.pop()
        node = self._append_element(tag, attrs)
        if tag not in VOID_ELEMENTS:
            self._stack.append(node)
            if len(self._stack) - 1 > self.limits.max_depth:
                raise PathologicalInputError(
                    f"nesting deeper than {self.limits.max_depth} levels"
                )

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, Optional[str]]]) -> None:
        if tag in VOID_ELEMENTS or self._in_foreign_content(tag):
            self._append_element(tag, attrs)
        else:
            # HTML ignores the slash in <div/>; the element stays open.
            self.handle_starttag(tag, attrs)

    def handle_endtag(self, tag: str) -> None:
        if tag in VOID_ELEMENTS:
            # </br> and friends carry nothing to close.
            return
        for idx in range(len(self._stack) - 1, 0, -1):
            if self._stack[idx].tag == tag:
                self._close_optional(until=self._stack[idx])
                self._stack.pop()
                return
        raise MalformedMarkupError(f"unexpected </{tag}> end tag")

    def handle_data(self, data: str) -> None:
        parent = self._stack[-1]
        # Merge with a preceding text node so one run of text stays one node.
        if parent.children and parent.children[-1].type is NodeType.TEXT:
            parent.children[-1].text += data
        else:
            parent.children.append(MarkupNode(type=NodeType.TEXT, text=data))

    def handle_comment(self, data: str) -> None:
        self._stack[-1].children.append(MarkupNode(type=NodeType.COMMENT, text=data))

    # Doctype, processing instructions and <![CDATA[...]]> are not kept.

    def handle_decl(self, decl: str) -> None:
        pass

    def handle_pi(self, data: str) -> None:
        pass

    def unknown_decl(self, data: str) -> None:
        pass

    # -- helpers ------------------------------------------------------------

    def _append_element(self, tag: str, attrs: list[tuple[str, Optional[str]]]) -> MarkupNode:
        node = MarkupNode(type=NodeType.ELEMENT, tag=tag.lower(), attrs=list(attrs))
        self._stack[-1].children.append(node)
        return node

    def _in_foreign_content(self, tag: str) -> bool:
        if tag in FOREIGN_ELEMENTS:
            return True
        return any(node.tag in FOREIGN_ELEMENTS for node in self._stack[1:])

    def _close_optional(self, until: MarkupNode) -> None:
        """Pop open elements above *until*, all of which must allow an omitted end tag."""
        while self._stack[-1] is not until:
            top = self._stack[-1]
            if top.tag not in OPTIONAL_END_ELEMENTS:
                raise MalformedMarkupError(f"unterminated <{top.tag}> element")
            self._stack.pop()


def parse_fragment(html: str, limits: Optional[RenderLimits] = None) -> MarkupNode:
    """Parse *html* into a *FRAGMENT* :class:`MarkupNode`."""
    return FragmentParser(limits).parse(html)

