"""
Reference edition data and lookups.

Provides the fixed tables of the 604-page Madinah Mushaf: where every surah
and juz begins, surah names and verse counts. Everything here is read-only.
"""

from mushaf.constants import (
    LINES_PER_PAGE,
    TOTAL_HIZB,
    TOTAL_JUZ,
    TOTAL_PAGES,
    TOTAL_SURAHS,
)
from mushaf.models.surah import (
    MUSHAF_SURAH_NAMES,
    SURAH_AYAH_COUNTS,
    SURAH_NAMES,
    Surah,
)

# First page of every juz
JUZ_START_PAGES: dict[int, int] = {
    1: 1, 2: 22, 3: 42, 4: 62, 5: 82, 6: 102, 7: 121, 8: 142, 9: 162, 10: 182,
    11: 201, 12: 222, 13: 242, 14: 262, 15: 282, 16: 302, 17: 322, 18: 342,
    19: 362, 20: 382, 21: 402, 22: 422, 23: 442, 24: 462, 25: 482, 26: 502,
    27: 522, 28: 542, 29: 562, 30: 582,
}

# First page of every surah
SURAH_START_PAGES: dict[int, int] = {
    1: 1, 2: 2, 3: 50, 4: 77, 5: 106, 6: 128, 7: 151, 8: 177, 9: 187, 10: 208,
    11: 221, 12: 235, 13: 249, 14: 255, 15: 262, 16: 267, 17: 282, 18: 293,
    19: 305, 20: 312, 21: 322, 22: 332, 23: 342, 24: 350, 25: 359, 26: 367,
    27: 377, 28: 385, 29: 396, 30: 404, 31: 411, 32: 415, 33: 418, 34: 428,
    35: 434, 36: 440, 37: 446, 38: 453, 39: 458, 40: 467, 41: 477, 42: 483,
    43: 489, 44: 496, 45: 499, 46: 502, 47: 507, 48: 511, 49: 515, 50: 518,
    51: 520, 52: 523, 53: 526, 54: 528, 55: 531, 56: 534, 57: 537, 58: 542,
    59: 545, 60: 549, 61: 551, 62: 553, 63: 554, 64: 556, 65: 558, 66: 560,
    67: 562, 68: 564, 69: 566, 70: 568, 71: 570, 72: 572, 73: 574, 74: 575,
    75: 577, 76: 578, 77: 580, 78: 582, 79: 583, 80: 585, 81: 586, 82: 587,
    83: 587, 84: 589, 85: 590, 86: 591, 87: 591, 88: 592, 89: 593, 90: 594,
    91: 595, 92: 595, 93: 596, 94: 596, 95: 597, 96: 597, 97: 598, 98: 598,
    99: 599, 100: 599, 101: 600, 102: 600, 103: 601, 104: 601, 105: 601,
    106: 602, 107: 602, 108: 602, 109: 603, 110: 603, 111: 603, 112: 604,
    113: 604, 114: 604,
}

_ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"


def _check_surah_id(surah_id: int) -> None:
    if not isinstance(surah_id, int) or not 1 <= surah_id <= TOTAL_SURAHS:
        raise ValueError(f"Invalid surah_id: {surah_id}. Must be 1-{TOTAL_SURAHS}.")


def _check_page(page_number: int) -> None:
    if not isinstance(page_number, int) or not 1 <= page_number <= TOTAL_PAGES:
        raise ValueError(f"Invalid page_number: {page_number}. Must be 1-{TOTAL_PAGES}.")


def get_surah_name(surah_id: int) -> str:
    """Plain Arabic name of a surah."""
    _check_surah_id(surah_id)
    return SURAH_NAMES[surah_id]


def get_mushaf_surah_name(surah_id: int) -> str:
    """Vocalised name as printed in the surah banner."""
    _check_surah_id(surah_id)
    return MUSHAF_SURAH_NAMES[surah_id]


def get_ayah_count(surah_id: int) -> int:
    """Number of verses in a surah."""
    _check_surah_id(surah_id)
    return SURAH_AYAH_COUNTS[surah_id]


def get_all_surahs() -> list[Surah]:
    """Metadata for all 114 surahs, in order."""
    return [Surah.from_id(surah_id) for surah_id in range(1, TOTAL_SURAHS + 1)]


def get_surah_start_page(surah_id: int) -> int:
    """Page on which a surah begins."""
    _check_surah_id(surah_id)
    return SURAH_START_PAGES[surah_id]


def get_surahs_starting_on_page(page_number: int) -> list[int]:
    """Surahs whose first verse is on the given page, ascending."""
    _check_page(page_number)
    return [s for s, page in SURAH_START_PAGES.items() if page == page_number]


def get_surah_for_page(page_number: int) -> int:
    """The surah in progress at the top of the given page."""
    _check_page(page_number)
    current = 1
    for surah_id in range(1, TOTAL_SURAHS + 1):
        if SURAH_START_PAGES[surah_id] > page_number:
            break
        current = surah_id
    return current


def get_juz_for_page(page_number: int) -> int:
    """Juz in which the given page begins."""
    _check_page(page_number)
    for juz in range(TOTAL_JUZ, 0, -1):
        if page_number >= JUZ_START_PAGES[juz]:
            return juz
    return 1


def get_hizb_for_page(page_number: int) -> int:
    """
    Approximate hizb of a page.

    Splits each juz into two hizbs at its page midpoint. Used only when the
    upstream response does not supply ``hizb_number``.
    """
    juz = get_juz_for_page(page_number)
    start = JUZ_START_PAGES[juz]
    end = JUZ_START_PAGES[juz + 1] if juz < TOTAL_JUZ else TOTAL_PAGES + 1
    second_half = page_number >= start + (end - start) // 2
    return min(TOTAL_HIZB, 2 * juz - 1 + int(second_half))


def to_arabic_number(number: int) -> str:
    """
    Render a non-negative integer with Arabic-Indic digits.

    Examples:
        >>> to_arabic_number(187)
        '١٨٧'
    """
    if number < 0:
        raise ValueError(f"Cannot render negative number: {number}")
    return "".join(_ARABIC_INDIC_DIGITS[int(d)] for d in str(number))


__all__ = [
    "LINES_PER_PAGE",
    "TOTAL_PAGES",
    "TOTAL_SURAHS",
    "JUZ_START_PAGES",
    "SURAH_START_PAGES",
    "get_surah_name",
    "get_mushaf_surah_name",
    "get_ayah_count",
    "get_all_surahs",
    "get_surah_start_page",
    "get_surahs_starting_on_page",
    "get_surah_for_page",
    "get_juz_for_page",
    "get_hizb_for_page",
    "to_arabic_number",
]
