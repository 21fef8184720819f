"""
Unit tests for the page structural analyzer.
"""

import pytest

from mushaf.core.analyzer import analyze
from mushaf.exceptions import LayoutInvariantError
from mushaf.models import LineSlot


def with_slots(base, *replacements):
    slots = list(base)
    for slot in replacements:
        slots[slot.slot_number - 1] = slot
    return tuple(slots)


class TestAnalyze:
    """Test analyze()."""

    def test_plain_page(self, empty_slots):
        """Test a page without headings."""
        analysis = analyze(empty_slots, 50)

        assert analysis.surah_starts == ()
        assert analysis.available_text_line_count == 15
        assert analysis.structural_slot_numbers == frozenset()
        assert analysis.text_slot_numbers == frozenset(range(1, 16))

    def test_surah_with_basmala(self, empty_slots):
        """Test a mid-page start with banner and basmala."""
        slots = with_slots(empty_slots, LineSlot.banner(5, 19), LineSlot.basmala(6, 19))

        analysis = analyze(slots, 305)

        assert analysis.available_text_line_count == 13
        assert analysis.structural_slot_numbers == frozenset({5, 6})
        start = analysis.surah_starts[0]
        assert start.surah_number == 19
        assert start.verse_key == "19:1"
        assert (start.banner_slot, start.basmala_slot) == (5, 6)
        assert start.first_text_line == 7
        assert start.has_basmala is True

    def test_banner_only_start(self, empty_slots):
        """Test a surah 9 style start costs one line."""
        slots = with_slots(empty_slots, LineSlot.banner(4, 9))

        analysis = analyze(slots, 300)

        assert analysis.available_text_line_count == 14
        assert analysis.surah_starts[0].has_basmala is False

    def test_three_starts(self, empty_slots):
        """Test page 604 style: three headings leave nine text lines."""
        slots = with_slots(
            empty_slots,
            LineSlot.banner(1, 112), LineSlot.basmala(2, 112),
            LineSlot.banner(5, 113), LineSlot.basmala(6, 113),
            LineSlot.banner(10, 114), LineSlot.basmala(11, 114),
        )

        analysis = analyze(slots, 604)

        assert analysis.available_text_line_count == 9
        assert [s.surah_number for s in analysis.surah_starts] == [112, 113, 114]
        assert [s.first_text_line for s in analysis.surah_starts] == [3, 7, 12]

    def test_partial_heading(self, empty_slots):
        """Test a heading whose banner is on the previous page."""
        slots = with_slots(empty_slots, LineSlot.basmala(1, 19))

        analysis = analyze(slots, 305)

        assert analysis.available_text_line_count == 14
        assert analysis.surah_starts[0].banner_slot is None

    def test_heading_on_last_line(self, empty_slots):
        """Test a heading at the foot of the page has no text line after it."""
        slots = with_slots(empty_slots, LineSlot.banner(14, 20), LineSlot.basmala(15, 20))
        analysis = analyze(slots, 311)
        assert analysis.surah_starts[0].first_text_line is None

    @pytest.mark.parametrize("page_number,expected", [(1, 15), (2, 15), (187, 14)])
    def test_override_pages(self, empty_slots, page_number, expected):
        """Test fixed counts on override pages."""
        slots = empty_slots
        if page_number == 187:
            slots = with_slots(empty_slots, LineSlot.banner(1, 9))
        assert analyze(slots, page_number).available_text_line_count == expected

    def test_without_page_number(self, empty_slots):
        """Test that the formula applies when no page number is given."""
        assert analyze(empty_slots).available_text_line_count == 15

    def test_centered_lines_on_opening_pages(self, empty_slots, make_word):
        """Test non-empty lines on pages 1-2 are centred."""
        slots = with_slots(
            empty_slots,
            LineSlot.text(2, [make_word(surah=1, verse_number=1)]),
            LineSlot.text(3, [make_word(surah=1, verse_number=2)]),
        )

        assert analyze(slots, 1).centered_slot_numbers == frozenset({2, 3})
        assert analyze(slots, 50).centered_slot_numbers == frozenset()

    def test_closing_lines(self, empty_slots, make_word, marker):
        """Test lines that end a surah."""
        slots = with_slots(
            empty_slots,
            LineSlot.text(4, [make_word(surah=18, verse_number=110), marker(surah=18, verse_number=110)]),
            LineSlot.banner(5, 19),
            LineSlot.basmala(6, 19),
            LineSlot.text(7, [make_word(surah=19, verse_number=1), marker(surah=19, verse_number=1)]),
        )

        assert analyze(slots, 305).closing_slot_numbers == frozenset({4})

    def test_line_before_banner_closes_surah(self, empty_slots, make_word):
        """Test a text line directly above a banner is a closing line."""
        slots = with_slots(
            empty_slots,
            LineSlot.text(3, [make_word(surah=18, verse_number=109)]),
            LineSlot.banner(4, 19),
        )
        assert 3 in analyze(slots, 305).closing_slot_numbers

    def test_rejects_wrong_slot_count(self, empty_slots):
        """Test that fewer than 15 slots raise."""
        with pytest.raises(LayoutInvariantError, match="Page 50"):
            analyze(empty_slots[:10], 50)
