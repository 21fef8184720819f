"""
Page structural analyzer.

Derives page metadata from the 15 resolved slots: which surahs start on the
page, whether each start carries a basmala, how many lines remain for verse
text, and which slots are structural.
"""

from collections.abc import Sequence

from mushaf.constants import LINES_PER_PAGE
from mushaf.core.overrides import OverrideRule, get_page_override
from mushaf.models import LineSlot, PageAnalysis, SlotKind, SurahStart
from mushaf.models.page import check_slot_sequence
from mushaf.models.surah import SURAH_AYAH_COUNTS


def _surah_starts(slots: Sequence[LineSlot]) -> list[SurahStart]:
    headings: dict[int, dict[str, int]] = {}
    for slot in slots:
        if not slot.is_structural:
            continue
        heading = headings.setdefault(slot.surah_number, {})
        if slot.kind == SlotKind.SURAH_NAME_BANNER:
            heading["banner_slot"] = slot.slot_number
        else:
            heading["basmala_slot"] = slot.slot_number

    starts = []
    for surah, heading in headings.items():
        last = max(heading.values())
        starts.append(
            SurahStart(
                surah_number=surah,
                verse_key=f"{surah}:1",
                first_text_line=last + 1 if last < LINES_PER_PAGE else None,
                **heading,
            )
        )
    return starts


def _closes_surah(slot: LineSlot, next_slot: LineSlot | None) -> bool:
    if not slot.words:
        return False
    if next_slot is not None and next_slot.kind == SlotKind.SURAH_NAME_BANNER:
        return True
    last = slot.words[-1]
    return last.is_marker and last.verse_number == SURAH_AYAH_COUNTS[last.surah]


def analyze(slots: Sequence[LineSlot], page_number: int | None = None) -> PageAnalysis:
    """
    Analyze the structure of a resolved page.

    ``available_text_line_count`` is 15 minus 2 for every surah start with a
    basmala and 1 for a banner-only start (surah 9). Pages with an override
    rule (1, 2 and 187) use the rule's fixed count when ``page_number`` is
    given.

    Args:
        slots: The 15 slots returned by ``resolve``
        page_number: Page number, to apply the page override table

    Returns:
        PageAnalysis

    Raises:
        LayoutInvariantError: If ``slots`` is not 15 slots numbered 1..15
    """
    check_slot_sequence(slots, page_number)

    starts = _surah_starts(slots)
    structural = frozenset(slot.slot_number for slot in slots if slot.is_structural)
    text = frozenset(range(1, LINES_PER_PAGE + 1)) - structural

    override = get_page_override(page_number)
    if override is not None:
        available = override.available_text_lines
    else:
        available = LINES_PER_PAGE - sum(start.heading_lines for start in starts)

    centered: frozenset[int] = frozenset()
    if override is not None and override.rule == OverrideRule.ALL_TEXT:
        centered = frozenset(slot.slot_number for slot in slots if slot.words)

    closing = frozenset(
        slot.slot_number
        for slot, next_slot in zip(slots, list(slots[1:]) + [None])
        if slot.kind == SlotKind.TEXT and _closes_surah(slot, next_slot)
    )

    return PageAnalysis(
        surah_starts=tuple(starts),
        available_text_line_count=available,
        structural_slot_numbers=structural,
        text_slot_numbers=text,
        centered_slot_numbers=centered,
        closing_slot_numbers=closing,
    )
