"""
Unit tests for the line assignment resolver.
"""

import logging

import pytest

from mushaf.core.resolver import (
    assign_lines,
    claim_heading_slots,
    find_surah_starts,
    group_by_line,
    heading_claim,
    resolve,
)
from mushaf.models import SlotKind, SurahStartHint


def kinds(slots):
    return {slot.slot_number: slot.kind for slot in slots if slot.is_structural}


class TestAssignLines:
    """Test the left-to-right line hint fill pass."""

    def test_unhinted_words_inherit(self, make_word):
        """Test that words without a hint follow the previous hinted word."""
        words = [
            make_word(position=1, line_hint=4),
            make_word(position=2),
            make_word(position=3, line_hint=5),
            make_word(position=4),
        ]

        placed = assign_lines(words, 10)

        assert [line for line, _ in placed] == [4, 4, 5, 5]

    def test_leading_unhinted_words_dropped(self, make_word, caplog):
        """Test that words before the first hint cannot be placed."""
        words = [make_word(position=1), make_word(position=2, line_hint=3)]

        with caplog.at_level(logging.WARNING, logger="mushaf.core.resolver"):
            placed = assign_lines(words, 10)

        assert len(placed) == 1
        assert "no line hint" in caplog.text

    def test_group_by_line(self, make_word):
        """Test grouping into 15 lines, sorted by document order."""
        placed = [
            (2, make_word(position=2)),
            (2, make_word(position=1)),
            (15, make_word(verse_number=6)),
        ]

        lines = group_by_line(placed)

        assert len(lines) == 15
        assert [w.position for w in lines[1]] == [1, 2]
        assert len(lines[14]) == 1
        assert all(not lines[i] for i in range(15) if i not in (1, 14))


class TestSurahStarts:
    """Test surah start detection and heading claims."""

    def test_detects_verse_one(self, make_word):
        lines = group_by_line([
            (2, make_word(surah=78, verse_number=40)),
            (5, make_word(surah=79, verse_number=1)),
        ])
        assert find_surah_starts(lines, [], 582) == {79: 5}

    def test_hint_line_overrides_detection(self, make_word):
        """Test that a hint with a line wins over the detected line."""
        lines = group_by_line([(5, make_word(surah=79, verse_number=1))])
        starts = find_surah_starts(lines, [SurahStartHint(surah=79, line=6)], 583)
        assert starts == {79: 6}

    def test_bare_hint_uses_first_line_of_surah(self, make_word):
        """Test a bare hint for a surah whose verse 1 is missing from the data."""
        lines = group_by_line([(8, make_word(surah=19, verse_number=2))])
        assert find_surah_starts(lines, [19], 305) == {19: 8}

    def test_hint_without_words_is_logged(self, caplog):
        lines = group_by_line([])
        with caplog.at_level(logging.WARNING, logger="mushaf.core.resolver"):
            assert find_surah_starts(lines, [19], 305) == {}
        assert "no words on the page" in caplog.text

    def test_tuple_hints(self, make_word):
        lines = group_by_line([(9, make_word(surah=19, verse_number=1))])
        assert find_surah_starts(lines, [(19, 9)], 305) == {19: 9}

    @pytest.mark.parametrize("surah,first_line,expected", [
        (19, 7, {5: SlotKind.SURAH_NAME_BANNER, 6: SlotKind.BASMALA}),
        (9, 2, {1: SlotKind.SURAH_NAME_BANNER}),
        (114, 3, {1: SlotKind.SURAH_NAME_BANNER, 2: SlotKind.BASMALA}),
    ])
    def test_heading_claim(self, surah, first_line, expected):
        """Test banner/basmala slots above the first text line."""
        assert heading_claim(surah, first_line).slots == expected

    def test_heading_above_page_is_partial(self, caplog):
        """Test a heading whose banner falls on the previous page."""
        with caplog.at_level(logging.INFO, logger="mushaf.core.resolver"):
            claimed = claim_heading_slots({19: 2}, 305)

        assert claimed == {1: (SlotKind.BASMALA, 19)}
        assert "previous page" in caplog.text

    def test_conflicting_claims_first_wins(self, caplog):
        """Test that an overlapping later claim is dropped and logged."""
        with caplog.at_level(logging.WARNING, logger="mushaf.core.resolver"):
            claimed = claim_heading_slots({97: 5, 98: 6}, 598)

        assert claimed == {
            3: (SlotKind.SURAH_NAME_BANNER, 97),
            4: (SlotKind.BASMALA, 97),
        }
        assert "98:1" in caplog.text
        assert "keeping first claim" in caplog.text


class TestResolve:
    """Test resolve()."""

    def test_always_fifteen_slots(self):
        """Test an empty word list still yields 15 text slots."""
        slots = resolve([], 50)

        assert [s.slot_number for s in slots] == list(range(1, 16))
        assert all(s.kind == SlotKind.TEXT and s.is_empty for s in slots)

    def test_mid_page_surah_start(self, make_word, marker):
        """Test banner and basmala above a surah starting on line 7."""
        words = [
            make_word(surah=18, verse_number=110, position=1, line_hint=4),
            marker(surah=18, verse_number=110, position=2),
            make_word(surah=19, verse_number=1, position=1, line_hint=7),
            marker(surah=19, verse_number=1, position=2),
        ]

        slots = resolve(words, 305)

        assert kinds(slots) == {5: SlotKind.SURAH_NAME_BANNER, 6: SlotKind.BASMALA}
        assert slots[4].surah_number == 19
        assert [w.verse_key for w in slots[6].words] == ["19:1", "19:1"]
        assert [w.verse_key for w in slots[3].words] == ["18:110", "18:110"]

    def test_tawbah_has_no_basmala(self, make_word):
        """Test surah 9 gets a banner only, outside the override page."""
        words = [make_word(surah=9, verse_number=1, line_hint=5)]

        slots = resolve(words, 300)

        assert kinds(slots) == {4: SlotKind.SURAH_NAME_BANNER}

    @pytest.mark.parametrize("page_number", [1, 2])
    def test_all_text_pages(self, make_word, page_number):
        """Test pages 1 and 2 carry no structural slots, even with hints."""
        surah = 1 if page_number == 1 else 2
        words = [make_word(surah=surah, verse_number=1, line_hint=2)]

        slots = resolve(words, page_number, [SurahStartHint(surah=surah, line=2)])

        assert kinds(slots) == {}
        assert slots[1].words[0].verse_key == f"{surah}:1"

    def test_page_187_banner_first(self, make_word):
        """Test page 187 puts At-Tawbah's banner on line 1."""
        words = [make_word(surah=9, verse_number=1, line_hint=2)]

        slots = resolve(words, 187, [9])

        assert kinds(slots) == {1: SlotKind.SURAH_NAME_BANNER}
        assert slots[0].surah_number == 9

    def test_words_in_heading_slot_ignored(self, make_word, caplog):
        """Test that stray words grouped into a heading slot are dropped."""
        words = [
            make_word(surah=18, verse_number=110, line_hint=5),
            make_word(surah=19, verse_number=1, line_hint=7),
        ]

        with caplog.at_level(logging.WARNING, logger="mushaf.core.resolver"):
            slots = resolve(words, 305)

        assert slots[4].kind == SlotKind.SURAH_NAME_BANNER
        assert "18:110" not in [k for s in slots for k in s.verse_keys]
        assert "heading slot 5" in caplog.text

    def test_markers_stay_with_their_verse(self, make_word, marker):
        """Test an unhinted marker lands on its verse's last line."""
        words = [
            make_word(verse_number=5, position=1, line_hint=10),
            make_word(verse_number=5, position=2, line_hint=11),
            marker(verse_number=5, position=3),
            make_word(verse_number=6, position=1, line_hint=11),
        ]

        slots = resolve(words, 3)

        line = slots[10].words
        assert [w.position for w in line] == [2, 3, 1]
        assert line[1].is_marker
        assert line[1].verse_number == line[0].verse_number
