"""
Pages whose layout does not follow the general heading formula.

The whole exception set of the reference edition lives in PAGE_OVERRIDES so
it can be read (and revised) in one place.
"""

from dataclasses import dataclass
from enum import Enum

from mushaf.constants import LINES_PER_PAGE, SURAH_WITHOUT_BASMALA


class OverrideRule(str, Enum):
    """How an overridden page is laid out."""

    ALL_TEXT = "all_text"  # every line is verse text, no headings
    BANNER_FIRST = "banner_first"  # banner on line 1, text on lines 2-15


@dataclass(frozen=True)
class PageOverride:
    """Fixed layout rule for one page."""

    rule: OverrideRule
    available_text_lines: int
    surah_number: int | None = None
    note: str = ""

    def __str__(self) -> str:
        return (
            f"PageOverride(rule={self.rule.value}, "
            f"available={self.available_text_lines}, surah={self.surah_number})"
        )


PAGE_OVERRIDES: dict[int, PageOverride] = {
    1: PageOverride(
        OverrideRule.ALL_TEXT,
        LINES_PER_PAGE,
        note="Al-Fatiha; its basmala is verse text",
    ),
    2: PageOverride(
        OverrideRule.ALL_TEXT,
        LINES_PER_PAGE,
        note="Opening of Al-Baqarah, decorated like page 1",
    ),
    187: PageOverride(
        OverrideRule.BANNER_FIRST,
        LINES_PER_PAGE - 1,
        surah_number=SURAH_WITHOUT_BASMALA,
        note="At-Tawbah opens with a banner and no basmala",
    ),
}


def get_page_override(page_number: int | None) -> PageOverride | None:
    """Return the override rule for a page, if it has one."""
    if page_number is None:
        return None
    return PAGE_OVERRIDES.get(page_number)
