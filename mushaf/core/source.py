"""
Verse/word source adapter.

Normalizes an upstream page response (verses-with-words, or lines-with-words)
into a flat, ordered list of typed Word records. Pure transform: nothing here
fetches, caches or raises for bad upstream data. Malformed records are skipped
and logged so that one bad word never makes a page unviewable.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from mushaf.constants import LINES_PER_PAGE
from mushaf.exceptions import SourceFormatError
from mushaf.models import CharClass, PageMeta, SurahStartHint, Word

logger = logging.getLogger(__name__)


# Verse numbers written with ASCII, Arabic-Indic or Extended Arabic-Indic digits
VERSE_NUMBER_PATTERN = re.compile(r"^[0-9٠-٩۰-۹]+$")

# Upstream character-type tags
CHAR_TYPE_TAGS: dict[str, CharClass] = {
    "word": CharClass.WORD,
    "end": CharClass.VERSE_END_MARKER,
    "pause": CharClass.PAUSE_MARK,
}

_TEXT_FIELDS = ("text_uthmani", "text")
_TAG_FIELDS = ("char_type_name", "char_type")
_POSITION_FIELDS = ("position", "position_in_verse")
_WRAPPER_FIELDS = ("data", "page", "layout")

# Line types of a lines-shaped response that introduce a surah
HEADING_LINE_TYPES = frozenset({"surah_name", "bismillah", "basmala"})


# ============ Classification ============


def classify_by_tag(tag: Any) -> CharClass | None:
    """
    Rule 1: classify from the upstream character-type tag.

    Returns:
        The tagged class, or None when the tag is absent or unknown
    """
    if not isinstance(tag, str):
        return None
    return CHAR_TYPE_TAGS.get(tag.strip().lower())


def classify_by_content(text: str) -> CharClass | None:
    """
    Rule 2: classify from the word text.

    A text made only of digits is a verse number, i.e. a verse-end marker.

    Returns:
        CharClass.VERSE_END_MARKER, or None when the text says nothing
    """
    if text and VERSE_NUMBER_PATTERN.match(text.strip()):
        return CharClass.VERSE_END_MARKER
    return None


def classify_word(text: str, tag: Any = None) -> CharClass:
    """
    Classify a word record.

    The tag is consulted first. A tag of ``end`` or ``pause`` is final; a
    ``word`` tag, a missing tag or an unknown tag falls through to the
    content rule, since some sources mark verse ends only by content.

    Args:
        text: Word text
        tag: Upstream char-type tag, if any

    Returns:
        The word's CharClass

    Examples:
        >>> classify_word("ٱلۡحَمۡدُ", "word")
        <CharClass.WORD: 'word'>
        >>> classify_word("٧")
        <CharClass.VERSE_END_MARKER: 'end'>
    """
    by_tag = classify_by_tag(tag)
    if by_tag in (CharClass.VERSE_END_MARKER, CharClass.PAUSE_MARK):
        return by_tag

    by_content = classify_by_content(text)
    if by_content is not None:
        return by_content

    return CharClass.WORD


# ============ Field helpers ============


def _first_field(record: Mapping, fields: Iterable[str]) -> Any:
    for name in fields:
        value = record.get(name)
        if value is not None:
            return value
    return None


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def parse_verse_key(verse_key: Any) -> tuple[int, int] | None:
    """
    Parse ``"surah:verse"`` (or ``"surah:verse:position"``) into integers.

    Returns:
        (surah, verse) or None if the key is malformed
    """
    if not isinstance(verse_key, str):
        return None
    parts = verse_key.strip().split(":")
    if len(parts) not in (2, 3):
        return None
    surah, verse = _as_int(parts[0]), _as_int(parts[1])
    if surah is None or verse is None:
        return None
    return surah, verse


def _line_hint(value: Any, page_number: int) -> int | None:
    line = _as_int(value)
    if line is None or line == 0:
        return None
    if not 1 <= line <= LINES_PER_PAGE:
        logger.warning(
            "Page %d: discarding out-of-range line hint %r", page_number, value
        )
        return None
    return line


def _unwrap(raw: Mapping) -> Mapping:
    """Strip ``{"data": ...}``-style envelopes around the page payload."""
    while "verses" not in raw and "lines" not in raw:
        for name in _WRAPPER_FIELDS:
            inner = raw.get(name)
            if isinstance(inner, Mapping):
                raw = inner
                break
        else:
            return raw
    return raw


def _as_list(value: Any, what: str, page_number: int) -> list:
    """Return a JSON array field as a list; anything else is logged and treated as empty."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    logger.warning(
        "Page %d: ignoring %s, expected a list but got %s",
        page_number, what, type(value).__name__,
    )
    return []


def _check_response(raw: Any) -> Mapping | None:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise SourceFormatError(raw)
    return _unwrap(raw)


# ============ Word construction ============


def _build_word(
    record: Any,
    surah: int,
    verse_number: int,
    index: int,
    page_number: int,
    inherited_line: int | None = None,
) -> Word | None:
    """Turn one upstream word record into a Word, or None if unusable."""
    if not isinstance(record, Mapping):
        logger.warning(
            "Page %d: skipping non-object word in verse %d:%d",
            page_number, surah, verse_number,
        )
        return None

    word_page = _as_int(record.get("page_number"))
    if word_page is not None and word_page != page_number:
        logger.warning(
            "Page %d: skipping word of %d:%d that belongs to page %d",
            page_number, surah, verse_number, word_page,
        )
        return None

    text = _first_field(record, _TEXT_FIELDS)
    text = text if isinstance(text, str) else ""
    position = _as_int(_first_field(record, _POSITION_FIELDS)) or index
    line = _line_hint(record.get("line_number"), page_number)
    if line is None:
        line = inherited_line

    try:
        return Word(
            surah=surah,
            verse_number=verse_number,
            position=position,
            text=text,
            char_class=classify_word(text, _first_field(record, _TAG_FIELDS)),
            line_hint=line,
        )
    except ValidationError as e:
        logger.warning(
            "Page %d: skipping invalid word %d:%d:%s (%s)",
            page_number, surah, verse_number, position, e.errors()[0]["msg"],
        )
        return None


def _verse_numbers(verse: Mapping) -> tuple[int, int] | None:
    parsed = parse_verse_key(verse.get("verse_key"))
    if parsed is not None:
        return parsed
    surah = _as_int(verse.get("chapter_id"))
    number = _as_int(verse.get("verse_number"))
    if surah is not None and number is not None:
        return surah, number
    return None


def _normalize_verses(verses: Iterable, page_number: int) -> list[Word]:
    words: list[Word] = []
    for verse in verses:
        if not isinstance(verse, Mapping):
            logger.warning("Page %d: skipping non-object verse entry", page_number)
            continue
        numbers = _verse_numbers(verse)
        if numbers is None:
            logger.warning(
                "Page %d: skipping verse with malformed key %r",
                page_number, verse.get("verse_key"),
            )
            continue
        surah, verse_number = numbers

        verse_words = []
        for index, record in enumerate(
            _as_list(verse.get("words"), "verse words", page_number), start=1
        ):
            word = _build_word(record, surah, verse_number, index, page_number)
            if word is not None:
                verse_words.append(word)

        # Upstream word order inside a verse is not guaranteed stable
        verse_words.sort(key=lambda w: w.sort_key)
        words.extend(verse_words)
    return words


def _normalize_lines(lines: Iterable, page_number: int) -> list[Word]:
    # Group per verse in order of first appearance, then sort inside verses
    by_verse: dict[tuple[int, int], list[Word]] = {}
    order: list[tuple[int, int]] = []
    for line in lines:
        if not isinstance(line, Mapping):
            logger.warning("Page %d: skipping non-object line entry", page_number)
            continue
        line_number = _line_hint(line.get("line_number"), page_number)
        for index, record in enumerate(
            _as_list(line.get("words"), "line words", page_number), start=1
        ):
            if not isinstance(record, Mapping):
                logger.warning("Page %d: skipping non-object word", page_number)
                continue
            numbers = parse_verse_key(record.get("verse_key") or record.get("word_id"))
            if numbers is None:
                logger.warning(
                    "Page %d: skipping word without a verse key on line %s",
                    page_number, line_number,
                )
                continue
            word = _build_word(
                record, numbers[0], numbers[1], index, page_number,
                inherited_line=line_number,
            )
            if word is None:
                continue
            key = (word.surah, word.verse_number)
            if key not in by_verse:
                by_verse[key] = []
                order.append(key)
            by_verse[key].append(word)

    words: list[Word] = []
    for key in order:
        words.extend(sorted(by_verse[key], key=lambda w: w.sort_key))
    return words


def normalize(raw_page_response: Any, page_number: int) -> list[Word]:
    """
    Normalize an upstream page response into ordered Word records.

    Verses are taken in the order given; words inside each verse are re-sorted
    by ``(surah, verse_number, position)``. A missing position defaults to the
    word's 1-based index inside its verse.

    Args:
        raw_page_response: Parsed JSON of one page (``verses`` or ``lines`` shape,
            optionally wrapped in ``data``/``page``)
        page_number: Page the response describes

    Returns:
        Ordered list of Word records; empty when the page has no verses

    Raises:
        SourceFormatError: If the response is not a JSON object
    """
    raw = _check_response(raw_page_response)
    if raw is None:
        return []

    if raw.get("verses"):
        words = _normalize_verses(_as_list(raw["verses"], "verses", page_number), page_number)
    elif raw.get("lines"):
        words = _normalize_lines(_as_list(raw["lines"], "lines", page_number), page_number)
    else:
        logger.debug("Page %d: response carries no verses", page_number)
        return []

    logger.debug("Page %d: normalized %d words", page_number, len(words))
    return words


# ============ Page metadata ============


def _surah_start_hint(entry: Any, page_number: int) -> SurahStartHint | None:
    try:
        if isinstance(entry, Mapping):
            surah = _as_int(entry.get("surah", entry.get("surah_number")))
            line = _as_int(entry.get("line", entry.get("line_number")))
            return SurahStartHint(surah=surah, line=line or None)
        surah = _as_int(entry)
        return SurahStartHint(surah=surah)
    except ValidationError:
        logger.warning("Page %d: ignoring malformed surah start %r", page_number, entry)
        return None


def _meta_number(raw: Mapping, meta: Mapping, field: str, upper: int) -> int | None:
    value = _as_int(meta.get(field))
    if value is None:
        verses = raw.get("verses")
        if isinstance(verses, (list, tuple)) and verses and isinstance(verses[0], Mapping):
            value = _as_int(verses[0].get(field))
    if value is None or not 1 <= value <= upper:
        return None
    return value


def _heading_line_hints(raw: Mapping, page_number: int) -> list[SurahStartHint]:
    """
    Surah starts implied by heading lines of a lines-shaped response.

    Lines typed ``surah_name`` or ``bismillah`` carry the surah they
    introduce; its text starts on the line after the last of them.
    """
    lines = raw.get("lines")
    if not isinstance(lines, (list, tuple)):
        return []

    last_heading_line: dict[int, int] = {}
    for line in lines:
        if not isinstance(line, Mapping) or line.get("line_type") not in HEADING_LINE_TYPES:
            continue
        surah = _as_int(line.get("surah_number"))
        line_number = _line_hint(line.get("line_number"), page_number)
        if surah is None or line_number is None:
            logger.warning(
                "Page %d: ignoring %s line without surah or line number",
                page_number, line.get("line_type"),
            )
            continue
        last_heading_line[surah] = max(line_number, last_heading_line.get(surah, 0))

    hints = []
    for surah, line_number in sorted(last_heading_line.items()):
        if line_number >= LINES_PER_PAGE:
            # Text starts on the next page
            continue
        hint = _surah_start_hint({"surah": surah, "line": line_number + 1}, page_number)
        if hint is not None:
            hints.append(hint)
    return hints


def extract_page_meta(raw_page_response: Any, page_number: int = 0) -> PageMeta:
    """
    Read the companion metadata block of a page response.

    ``meta.surah_starts`` may list bare surah numbers (``[78]``) or objects
    (``[{"surah": 78, "line": 3}]``). In a lines-shaped response, heading
    lines (``line_type`` of ``surah_name`` or ``bismillah``) add a start for
    any surah the block does not name. Juz and hizb fall back to the first
    verse's fields when the block omits them.

    Args:
        raw_page_response: Parsed JSON of one page
        page_number: Page the response describes (for log messages)

    Returns:
        PageMeta; fields the response does not provide are None/empty
    """
    raw = _check_response(raw_page_response)
    if raw is None:
        return PageMeta()

    meta = raw.get("meta")
    if not isinstance(meta, Mapping):
        meta = {}

    hints = []
    for entry in _as_list(meta.get("surah_starts"), "surah_starts", page_number):
        hint = _surah_start_hint(entry, page_number)
        if hint is not None:
            hints.append(hint)

    named = {hint.surah for hint in hints}
    hints.extend(h for h in _heading_line_hints(raw, page_number) if h.surah not in named)

    return PageMeta(
        juz_number=_meta_number(raw, meta, "juz_number", 30),
        hizb_number=_meta_number(raw, meta, "hizb_number", 60),
        surah_starts=tuple(hints),
    )
