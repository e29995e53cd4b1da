"""Wrapper element presets for direction-tagged text chunks.

A preset decides which element surrounds each text chunk and which inline
style hint it carries.  The ``dir`` attribute is always emitted; the preset
only controls the rest.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from html import escape


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass
class WrapperStyle:
    """Element and style hint used to wrap a text chunk."""

    name: str
    tag: str = "span"
    style: str = "display: inline-block;"

    def derive(self, **overrides) -> WrapperStyle:
        """Return a copy with selected fields overridden."""
        clone = deepcopy(self)
        for k, v in overrides.items():
            if hasattr(clone, k):
                setattr(clone, k, v)
        return clone

    def open_tag(self, direction: str) -> str:
        """Start tag for a chunk rendered in *direction* (``ltr``/``rtl``)."""
        if self.style:
            return f'<{self.tag} dir="{direction}" style="{escape(self.style)}">'
        return f'<{self.tag} dir="{direction}">'

    @property
    def close_tag(self) -> str:
        return f"</{self.tag}>"


# ---------------------------------------------------------------------------
# Preset definitions
# ---------------------------------------------------------------------------

def _build_presets() -> dict[str, WrapperStyle]:
    # inline-block keeps each chunk as one box in mixed-direction lines.
    base = WrapperStyle(name="inline-block")
    return {
        "inline-block": base,
        "isolate": base.derive(name="isolate", style="unicode-bidi: isolate;"),
        "bdi": base.derive(name="bdi", tag="bdi", style=""),
        "plain": base.derive(name="plain", style=""),
    }


_PRESETS = _build_presets()


# ---------------------------------------------------------------------------
# Manager
# ---------------------------------------------------------------------------

class StyleManager:
    """Resolve a preset name to its :class:`WrapperStyle`."""

    PRESETS: list[str] = list(_PRESETS)

    def __init__(self, preset: str = "inline-block") -> None:
        if preset not in _PRESETS:
            raise ValueError(
                f"Unknown style preset {preset!r}; choose from {', '.join(self.PRESETS)}"
            )
        self.preset = preset

    @property
    def wrapper(self) -> WrapperStyle:
        return _PRESETS[self.preset]

    def describe(self) -> str:
        """One-line human readable summary of the active preset."""
        w = self.wrapper
        style = f' style="{w.style}"' if w.style else ""
        return f"{w.name}: <{w.tag} dir=...{style}>"
