"""
Pydantic data models for the mushaf library.

These models represent the core data structures used throughout the library:
- Word: A single word or glyph of a verse, with its line hint
- LineSlot: One of the 15 physical lines of a page
- PageLayout: The reconstructed page (aggregate root)
- PageAnalysis: Structural metadata derived from a page
- ComposedLine: Display string and font scale of a text line
- Surah: Surah metadata
"""

from mushaf.models.word import CharClass, Word
from mushaf.models.slot import LineSlot, SlotKind
from mushaf.models.page import (
    ComposedLine,
    PageAnalysis,
    PageHeader,
    PageLayout,
    PageMeta,
    SurahOnPage,
    SurahStart,
    SurahStartHint,
)
from mushaf.models.surah import Surah

__all__ = [
    "CharClass",
    "Word",
    "LineSlot",
    "SlotKind",
    "ComposedLine",
    "PageAnalysis",
    "PageHeader",
    "PageLayout",
    "PageMeta",
    "SurahOnPage",
    "SurahStart",
    "SurahStartHint",
    "Surah",
]
