"""
Tests for patch notes page parser (patchdiff/parser/html_parser.py)

Tests cover:
- Section / subsection / lead-in label context tracking
- Ignored sections
- Nested lists and inline markup
- Classification of every extracted line
"""

import pytest

from patchdiff.consolidation.change_model import (
    AbsoluteChange,
    ChangeRecord,
    OtherChange,
    RelativeChange,
)
from patchdiff.parser.html_parser import ChangeLine, PatchNotesParser, parse_patch_document


def _page(body: str) -> str:
    return f'<html><body><div class="mw-parser-output">{body}</div></body></html>'


class TestPatchNotesParserInit:
    """Tests for PatchNotesParser initialization."""

    def test_init_default(self):
        parser = PatchNotesParser()
        assert parser.ignored_sections == {"General", "Additional Content"}
        assert parser.content_selector == ".mw-parser-output > *"
        assert parser.classifier is not None

    def test_init_custom_sections(self):
        parser = PatchNotesParser(ignored_sections=["Heroes"])
        assert parser.ignored_sections == {"Heroes"}


class TestIterChangeLines:
    """Tests for iter_change_lines."""

    def test_sample_page_lines(self, patch_7_32_html):
        """Test lines, contexts and versions of a full page."""
        parser = PatchNotesParser()
        lines = list(parser.iter_change_lines(patch_7_32_html, "7.32"))

        assert lines == [
            ChangeLine("Duration increased from 4.5s to 5.5s", "Items > Blade Mail", "7.32"),
            ChangeLine("Armor increased from 4 to 5 (from 7.31d)", "Items > Blade Mail", "7.32"),
            ChangeLine("Base armor increased by 2", "Heroes > Zeus", "7.32"),
            ChangeLine(
                "Cooldown decreased from 6/5.5/5/4.5s to 5/4.5/4/3.5s",
                "Heroes > Zeus > Lightning Bolt",
                "7.32",
            ),
            ChangeLine(
                "Level 10 Talent OP replaced with +20 Damage",
                "Heroes > Dark Willow > Talent",
                "7.32",
            ),
        ]

    def test_ignored_sections_are_skipped(self, patch_7_32a_html):
        parser = PatchNotesParser()
        lines = list(parser.iter_change_lines(patch_7_32a_html, "7.32a"))
        assert all(not line.context_path.startswith("Additional Content") for line in lines)
        assert "New arcana added" not in [line.raw_line for line in lines]

    def test_h2_resets_subsection(self):
        """Test a list directly under a new section has no stale subsection."""
        html = _page(
            "<h2>Items</h2><h3>Blade Mail</h3><ul><li>a</li></ul>"
            "<h2>Neutral Creeps</h2><ul><li>b</li></ul>"
        )
        lines = list(PatchNotesParser().iter_change_lines(html, "7.32"))
        assert [line.context_path for line in lines] == ["Items > Blade Mail", "Neutral Creeps"]

    def test_inline_markup_is_one_line(self):
        """Test links inside an item do not split the line."""
        html = _page(
            '<h2>Items</h2><h3>Blade Mail</h3>'
            '<ul><li><a href="/Damage_Return">Damage Return</a> increased from 20% to 25%</li></ul>'
        )
        lines = list(PatchNotesParser().iter_change_lines(html, "7.32"))
        assert lines == [
            ChangeLine("Damage Return increased from 20% to 25%", "Items > Blade Mail", "7.32"),
        ]

    def test_label_with_inline_text(self):
        """Test text following a lead-in label on the same item."""
        html = _page(
            "<h2>Heroes</h2><h3>Zeus</h3>"
            "<ul><li><b>Nimbus</b>: Cooldown decreased by 5</li><li>Base armor increased by 1</li></ul>"
        )
        lines = list(PatchNotesParser().iter_change_lines(html, "7.32"))
        assert lines == [
            ChangeLine("Cooldown decreased by 5", "Heroes > Zeus > Nimbus", "7.32"),
            ChangeLine("Base armor increased by 1", "Heroes > Zeus", "7.32"),
        ]

    def test_bold_inside_text_is_not_a_label(self):
        html = _page("<h2>Heroes</h2><h3>Zeus</h3><ul><li>Now <b>pierces</b> spell immunity</li></ul>")
        lines = list(PatchNotesParser().iter_change_lines(html, "7.32"))
        assert lines == [ChangeLine("Now pierces spell immunity", "Heroes > Zeus", "7.32")]

    def test_comments_are_ignored(self):
        html = _page("<h2>Heroes</h2><h3>Zeus</h3><ul><li><!-- todo -->Base armor increased by 1</li></ul>")
        lines = list(PatchNotesParser().iter_change_lines(html, "7.32"))
        assert lines == [ChangeLine("Base armor increased by 1", "Heroes > Zeus", "7.32")]

    def test_no_matching_content(self):
        """Test a page without the content container yields nothing."""
        lines = list(PatchNotesParser().iter_change_lines("<html><body><ul><li>a</li></ul></body></html>", "7.32"))
        assert lines == []

    def test_custom_selector(self):
        html = '<main><h2>Items</h2><h3>Blink Dagger</h3><ul><li>Now has a 3s cooldown</li></ul></main>'
        parser = PatchNotesParser(content_selector="main > *")
        lines = list(parser.iter_change_lines(html, "7.32"))
        assert lines == [ChangeLine("Now has a 3s cooldown", "Items > Blink Dagger", "7.32")]


class TestParseDocument:
    """Tests for parse_document."""

    def test_records(self, patch_7_32_html):
        """Test every line is classified with its context."""
        records = PatchNotesParser().parse_document(patch_7_32_html, "7.32")

        assert records == [
            ChangeRecord("Items > Blade Mail > Duration", "7.32", AbsoluteChange("4.5s", "5.5s")),
            ChangeRecord("Items > Blade Mail > Armor", "7.32", AbsoluteChange("4", "5")),
            ChangeRecord("Heroes > Zeus > Base armor", "7.32", RelativeChange(2)),
            ChangeRecord(
                "Heroes > Zeus > Lightning Bolt > Cooldown",
                "7.32",
                AbsoluteChange("6/5.5/5/4.5s", "5/4.5/4/3.5s"),
            ),
            ChangeRecord(
                "Heroes > Dark Willow > Talent > Level 10 Talent",
                "7.32",
                AbsoluteChange("OP", "+20 Damage"),
            ),
        ]

    def test_other_change(self, patch_7_32a_html):
        records = parse_patch_document(patch_7_32a_html, "7.32a")
        assert ChangeRecord(
            "Heroes > Crystal Maiden",
            "7.32a",
            OtherChange("Auto-attacks now take priority when determining kill credit"),
        ) in records

    @pytest.mark.parametrize("html", ["", "<html></html>", "<div class='mw-parser-output'></div>"])
    def test_empty_documents(self, html):
        assert PatchNotesParser().parse_document(html, "7.32") == []
