"""Tests for script classification and segmentation."""

from __future__ import annotations

import pytest

from md2bidi.script import ScriptTag, TextChunk, classify, has_rtl, segment

SAMPLES = [
    "",
    "Hello world",
    "مرحبا",
    "Hello مرحبا world",
    "مرحبا بالعالم",
    "سعر 100 دولار",
    "  leading and trailing  ",
    "\n\tمرحبا\n",
    "a،b؟c",
    "emoji 🙂 مرحبا 🙂",
]


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------

class TestClassify:
    def test_latin_is_ltr(self) -> None:
        assert classify("Hello world") is ScriptTag.LTR

    def test_arabic_is_rtl(self) -> None:
        assert classify("مرحبا") is ScriptTag.RTL

    def test_empty_is_ltr(self) -> None:
        assert classify("") is ScriptTag.LTR

    def test_single_arabic_code_point_makes_rtl(self) -> None:
        assert classify("mostly latin ا text") is ScriptTag.RTL

    @pytest.mark.parametrize("ch", ["\u0600", "\u06ff"])
    def test_block_boundaries_are_rtl(self, ch: str) -> None:
        assert classify(ch) is ScriptTag.RTL

    @pytest.mark.parametrize("ch", ["\u05d0", "\u0700", "\ufe8d"])
    def test_outside_arabic_block_is_ltr(self, ch: str) -> None:
        # Hebrew, Syriac and Arabic presentation forms are not in the block.
        assert classify(ch) is ScriptTag.LTR

    def test_has_rtl(self) -> None:
        assert has_rtl("abc مرحبا")
        assert not has_rtl("abc 123")
        assert not has_rtl("")


# ---------------------------------------------------------------------------
# Segmenter
# ---------------------------------------------------------------------------

class TestSegment:
    def test_empty_gives_no_chunks(self) -> None:
        assert segment("") == []

    def test_latin_only_is_one_chunk(self) -> None:
        assert segment("Hello world") == [TextChunk("Hello world", ScriptTag.LTR)]

    def test_arabic_only_is_one_chunk(self) -> None:
        assert segment("مرحبا") == [TextChunk("مرحبا", ScriptTag.RTL)]

    def test_mixed_spaces_attach_to_latin_runs(self) -> None:
        assert segment("Hello مرحبا world") == [
            TextChunk("Hello ", ScriptTag.LTR),
            TextChunk("مرحبا", ScriptTag.RTL),
            TextChunk(" world", ScriptTag.LTR),
        ]

    def test_space_between_arabic_words_is_its_own_chunk(self) -> None:
        assert segment("مرحبا بالعالم") == [
            TextChunk("مرحبا", ScriptTag.RTL),
            TextChunk(" ", ScriptTag.LTR),
            TextChunk("بالعالم", ScriptTag.RTL),
        ]

    def test_digits_group_with_ltr(self) -> None:
        chunks = segment("سعر 100 دولار")
        assert [c.text for c in chunks] == ["سعر", " 100 ", "دولار"]
        assert chunks[1].script is ScriptTag.LTR

    def test_arabic_punctuation_stays_in_rtl_run(self) -> None:
        assert [c.text for c in segment("a،b؟c")] == ["a", "،", "b", "؟", "c"]

    @pytest.mark.parametrize("text", SAMPLES)
    def test_concatenation_reproduces_input(self, text: str) -> None:
        assert "".join(c.text for c in segment(text)) == text

    @pytest.mark.parametrize("text", SAMPLES)
    def test_adjacent_chunks_alternate_script(self, text: str) -> None:
        chunks = segment(text)
        for left, right in zip(chunks, chunks[1:]):
            assert left.script is not right.script

    @pytest.mark.parametrize("text", [s for s in SAMPLES if s and not has_rtl(s)])
    def test_ltr_text_is_single_chunk(self, text: str) -> None:
        assert segment(text) == [TextChunk(text, ScriptTag.LTR)]

    def test_blank_chunk_detection(self) -> None:
        assert TextChunk(" \n", ScriptTag.LTR).is_blank
        assert not TextChunk(" x ", ScriptTag.LTR).is_blank
