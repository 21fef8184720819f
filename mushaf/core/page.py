"""
Page pipeline.

Runs source adapter -> resolver for one page response and assembles the
immutable PageLayout, then composes its text lines and running header for a
renderer.

Example:
    layout = build_page_layout(response_json, 305)
    analysis = analyze(layout.slots, layout.page_number)
    lines = compose_page(layout)
"""

import logging
from typing import Any

from mushaf.config import MushafSettings, get_settings
from mushaf.constants import TOTAL_PAGES
from mushaf.core.composer import compose
from mushaf.core.resolver import resolve
from mushaf.core.source import extract_page_meta, normalize
from mushaf.data import (
    get_hizb_for_page,
    get_juz_for_page,
    get_surah_for_page,
    get_surah_name,
    to_arabic_number,
)
from mushaf.exceptions import InvalidPageError
from mushaf.models import ComposedLine, PageHeader, PageLayout, SurahOnPage
from mushaf.models.surah import SURAHS_WITHOUT_BASMALA_LINE

logger = logging.getLogger(__name__)


def check_page_number(page_number: Any) -> int:
    """
    Validate a page number at the library boundary.

    Raises:
        InvalidPageError: If it is not an integer in 1..604
    """
    if isinstance(page_number, bool) or not isinstance(page_number, int):
        raise InvalidPageError(page_number, TOTAL_PAGES)
    if not 1 <= page_number <= TOTAL_PAGES:
        raise InvalidPageError(page_number, TOTAL_PAGES)
    return page_number


def _surahs_on_page(slots, hinted: set[int]) -> tuple[SurahOnPage, ...]:
    present: set[int] = set()
    starting = set(hinted)
    for slot in slots:
        for word in slot.words:
            present.add(word.surah)
            if word.verse_number == 1:
                starting.add(word.surah)
        if slot.is_structural:
            present.add(slot.surah_number)
            starting.add(slot.surah_number)

    return tuple(
        SurahOnPage(
            surah_number=surah,
            has_basmala_pre=surah in starting and surah not in SURAHS_WITHOUT_BASMALA_LINE,
        )
        for surah in sorted(present)
    )


def build_page_layout(raw_page_response: Any, page_number: int) -> PageLayout:
    """
    Build the PageLayout of one page from its upstream response.

    A response without verses yields a valid layout of 15 empty text slots;
    the caller decides whether to try another source.

    Args:
        raw_page_response: Parsed JSON of the page
        page_number: Page number (1-604)

    Returns:
        Immutable PageLayout

    Raises:
        InvalidPageError: If page_number is outside 1..604
        SourceFormatError: If the response is not a JSON object
    """
    page_number = check_page_number(page_number)

    words = normalize(raw_page_response, page_number)
    meta = extract_page_meta(raw_page_response, page_number)
    slots = resolve(words, page_number, meta.surah_starts)

    layout = PageLayout(
        page_number=page_number,
        juz_number=meta.juz_number or get_juz_for_page(page_number),
        hizb_number=meta.hizb_number or get_hizb_for_page(page_number),
        slots=slots,
        surahs_on_page=_surahs_on_page(slots, {hint.surah for hint in meta.surah_starts}),
    )

    if layout.is_empty:
        logger.info("Page %d: no verse data, returning blank layout", page_number)
    else:
        logger.debug(
            "Page %d: %d words across %d verses",
            page_number, len(layout.words), len(layout.verse_keys),
        )
    return layout


def compose_page(
    layout: PageLayout,
    settings: MushafSettings | None = None,
) -> dict[int, ComposedLine]:
    """
    Compose every text slot of a page.

    Returns:
        Mapping of slot number to ComposedLine, for text slots only
    """
    if settings is None:
        settings = get_settings()
    return {slot.slot_number: compose(slot, settings) for slot in layout.text_slots}


def page_header(layout: PageLayout) -> PageHeader:
    """
    Running header strings of a page.

    The title names the single surah on the page, or the first and last
    surahs when several share it.
    """
    surahs = [s.surah_number for s in layout.surahs_on_page]
    if not surahs:
        surahs = [get_surah_for_page(layout.page_number)]

    if len(surahs) == 1:
        title = f"سُورَةُ {get_surah_name(surahs[0])}"
    else:
        title = f"{get_surah_name(surahs[0])} - {get_surah_name(surahs[-1])}"

    return PageHeader(
        juz_label=f"الجزء {to_arabic_number(layout.juz_number)}",
        surah_title=title,
        hizb_label=f"الحزب {to_arabic_number(layout.hizb_number)}",
        page_label=to_arabic_number(layout.page_number),
    )
