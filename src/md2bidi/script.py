"""Script classification and run segmentation for mixed Arabic/Latin text.

The classification is deliberately coarse: a run is right-to-left when it
contains a code point from the Arabic block (U+0600-U+06FF) and
left-to-right otherwise.  Everything that is not Arabic, including digits,
punctuation and whitespace, belongs to the left-to-right side.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_ARABIC_RANGE = "\u0600-\u06ff"

_ARABIC_RE = re.compile(f"[{_ARABIC_RANGE}]")

# Maximal runs of Arabic code points, or of anything else.
_RUN_RE = re.compile(f"[{_ARABIC_RANGE}]+|[^{_ARABIC_RANGE}]+")


class ScriptTag(Enum):
    RTL = "rtl"
    LTR = "ltr"


@dataclass(frozen=True)
class TextChunk:
    """A maximal same-script slice of a text run."""

    text: str
    script: ScriptTag

    @property
    def is_blank(self) -> bool:
        """True for chunks made only of whitespace (or nothing at all)."""
        return not self.text.strip()


def has_rtl(text: str) -> bool:
    """Return True if *text* contains at least one Arabic-block code point."""
    return _ARABIC_RE.search(text) is not None


def classify(text: str) -> ScriptTag:
    """Classify *text* as RTL or LTR.  The empty string is LTR."""
    return ScriptTag.RTL if has_rtl(text) else ScriptTag.LTR


def segment(text: str) -> list[TextChunk]:
    """Split *text* into ordered chunks that alternate between scripts.

    Joining the ``text`` of the returned chunks gives back *text* exactly.
    Whitespace next to an Arabic run stays with the neighbouring non-Arabic
    run, so ``"Hello مرحبا world"`` yields ``"Hello "``, ``"مرحبا"`` and
    ``" world"``.
    """
    return [TextChunk(run, classify(run)) for run in _RUN_RE.findall(text)]
