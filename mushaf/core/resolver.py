"""
Line assignment resolver.

Turns the flat word sequence of a page into exactly 15 line slots: verse
text runs, surah-name banners and basmala lines.

Upstream line hints are partial. A word without a hint sits on the same line
as the nearest hinted word before it; surah headings are inferred from where
each surah's first verse begins. Anomalies are logged and degraded, never
raised. Only a broken 15-slot invariant raises (LayoutInvariantError).
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from mushaf.constants import LINES_PER_PAGE, SURAH_WITHOUT_BASMALA
from mushaf.core.overrides import OverrideRule, PageOverride, get_page_override
from mushaf.models import LineSlot, SlotKind, SurahStartHint, Word
from mushaf.models.page import check_slot_sequence

logger = logging.getLogger(__name__)


@dataclass
class HeadingClaim:
    """Banner/basmala slots requested by one surah start."""

    surah: int
    first_text_line: int
    slots: dict[int, SlotKind]

    @property
    def verse_key(self) -> str:
        return f"{self.surah}:1"


# ============ Line assignment ============


def assign_lines(words: Sequence[Word], page_number: int = 0) -> list[tuple[int, Word]]:
    """
    Left-to-right fill pass giving every word a physical line.

    A word without a line hint inherits the line of the nearest preceding
    hinted word. Words before the first hinted word cannot be placed and are
    dropped with a warning.

    Args:
        words: Words in document order
        page_number: Page being resolved (for log messages)

    Returns:
        (line, word) pairs in document order
    """
    placed: list[tuple[int, Word]] = []
    current: int | None = None
    for word in words:
        if word.line_hint is not None:
            current = word.line_hint
        if current is None:
            logger.warning(
                "Page %d: dropping %s, no line hint at or before it",
                page_number, word,
            )
            continue
        placed.append((current, word))
    return placed


def group_by_line(placed: Iterable[tuple[int, Word]]) -> list[list[Word]]:
    """
    Group placed words into the 15 physical lines.

    Returns:
        A list of 15 word lists; index 0 is line 1. Each list is ordered by
        ``(surah, verse_number, position)``.
    """
    lines: list[list[Word]] = [[] for _ in range(LINES_PER_PAGE)]
    for line, word in placed:
        lines[line - 1].append(word)
    return [sorted(words, key=lambda w: w.sort_key) for words in lines]


# ============ Surah headings ============


def _as_hint(hint: SurahStartHint | int | tuple) -> SurahStartHint:
    if isinstance(hint, SurahStartHint):
        return hint
    if isinstance(hint, int):
        return SurahStartHint(surah=hint)
    surah, line = hint
    return SurahStartHint(surah=surah, line=line)


def find_surah_starts(
    lines: Sequence[Sequence[Word]],
    surah_start_hints: Iterable[SurahStartHint | int | tuple] = (),
    page_number: int = 0,
) -> dict[int, int]:
    """
    Locate the first text line of every surah that begins on the page.

    A surah begins on the page when its verse 1 has words here. Hints with an
    explicit line override the detected line; bare hints (surah number only)
    use the first line holding any word of that surah.

    Returns:
        Mapping of surah number to first text line, ascending by surah
    """
    first_line: dict[int, int] = {}
    for index, words in enumerate(lines, start=1):
        for word in words:
            if word.verse_number == 1 and word.surah not in first_line:
                first_line[word.surah] = index

    for hint in map(_as_hint, surah_start_hints):
        if hint.line is not None:
            first_line[hint.surah] = hint.line
            continue
        if hint.surah in first_line:
            continue
        for index, words in enumerate(lines, start=1):
            if any(word.surah == hint.surah for word in words):
                first_line[hint.surah] = index
                break
        else:
            logger.warning(
                "Page %d: surah start hint for %d has no words on the page",
                page_number, hint.surah,
            )

    return dict(sorted(first_line.items()))


def heading_claim(surah: int, first_text_line: int) -> HeadingClaim:
    """Slots a surah heading needs above its first text line."""
    if surah == SURAH_WITHOUT_BASMALA:
        slots = {first_text_line - 1: SlotKind.SURAH_NAME_BANNER}
    else:
        slots = {
            first_text_line - 2: SlotKind.SURAH_NAME_BANNER,
            first_text_line - 1: SlotKind.BASMALA,
        }
    return HeadingClaim(surah=surah, first_text_line=first_text_line, slots=slots)


def claim_heading_slots(
    starts: dict[int, int],
    page_number: int = 0,
) -> dict[int, tuple[SlotKind, int]]:
    """
    Reserve banner/basmala slots for each surah start.

    Claims are granted in verse-key order. A claim overlapping an earlier one
    is dropped with a logged conflict (first claim wins). Heading slots that
    would fall above line 1 belong to the previous page and are skipped.

    Returns:
        Mapping of slot number to (kind, surah)
    """
    claimed: dict[int, tuple[SlotKind, int]] = {}
    for surah, first_text_line in starts.items():
        claim = heading_claim(surah, first_text_line)
        on_page = {n: kind for n, kind in claim.slots.items() if n >= 1}
        if len(on_page) < len(claim.slots):
            logger.info(
                "Page %d: heading of surah %d starts on the previous page",
                page_number, surah,
            )
        clash = sorted(n for n in on_page if n in claimed)
        if clash:
            holders = sorted({claimed[n][1] for n in clash})
            logger.warning(
                "Page %d: heading of %s conflicts with surah %s on slots %s; keeping first claim",
                page_number, claim.verse_key, holders, clash,
            )
            continue
        for n, kind in on_page.items():
            claimed[n] = (kind, surah)
    return claimed


# ============ Slot construction ============


def _text_slots(lines: Sequence[Sequence[Word]]) -> list[LineSlot]:
    return [LineSlot.text(n, words) for n, words in enumerate(lines, start=1)]


def _structural_slot(slot_number: int, kind: SlotKind, surah: int) -> LineSlot:
    if kind == SlotKind.SURAH_NAME_BANNER:
        return LineSlot.banner(slot_number, surah)
    return LineSlot.basmala(slot_number, surah)


def _warn_ignored_words(page_number: int, slot_number: int, words: Sequence[Word]) -> None:
    if words:
        logger.warning(
            "Page %d: ignoring %d words grouped into heading slot %d (first: %s)",
            page_number, len(words), slot_number, words[0],
        )


def _apply_override(
    override: PageOverride,
    lines: Sequence[Sequence[Word]],
    page_number: int,
) -> list[LineSlot]:
    if override.rule == OverrideRule.ALL_TEXT:
        return _text_slots(lines)

    # BANNER_FIRST: line 1 is the banner, lines 2-15 carry text
    _warn_ignored_words(page_number, 1, lines[0])
    slots = [LineSlot.banner(1, override.surah_number)]
    slots.extend(LineSlot.text(n, lines[n - 1]) for n in range(2, LINES_PER_PAGE + 1))
    return slots


def resolve(
    words: Sequence[Word],
    page_number: int,
    surah_start_hints: Iterable[SurahStartHint | int | tuple] | None = None,
) -> tuple[LineSlot, ...]:
    """
    Resolve a page's words into its 15 line slots.

    Args:
        words: Normalized words of the page, in document order
        page_number: Page number (1-604)
        surah_start_hints: Optional upstream surah-start hints, as
            SurahStartHint, bare surah numbers or (surah, line) pairs

    Returns:
        Exactly 15 LineSlot values numbered 1..15

    Raises:
        LayoutInvariantError: If the 15-slot structure cannot be produced
    """
    hints = list(surah_start_hints or ())
    lines = group_by_line(assign_lines(words, page_number))

    override = get_page_override(page_number)
    if override is not None:
        if hints and override.rule == OverrideRule.ALL_TEXT:
            logger.debug("Page %d: surah start hints ignored on all-text page", page_number)
        slots = _apply_override(override, lines, page_number)
    else:
        starts = find_surah_starts(lines, hints, page_number)
        claimed = claim_heading_slots(starts, page_number)
        slots = []
        for n in range(1, LINES_PER_PAGE + 1):
            if n in claimed:
                kind, surah = claimed[n]
                _warn_ignored_words(page_number, n, lines[n - 1])
                slots.append(_structural_slot(n, kind, surah))
            else:
                slots.append(LineSlot.text(n, lines[n - 1]))

    check_slot_sequence(slots, page_number)
    logger.debug(
        "Page %d: resolved %d heading slots",
        page_number, sum(slot.is_structural for slot in slots),
    )
    return tuple(slots)
