"""
Page-level data models: the PageLayout aggregate and the values derived from it.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from mushaf.constants import LINES_PER_PAGE, TOTAL_HIZB, TOTAL_JUZ, TOTAL_PAGES
from mushaf.exceptions import LayoutInvariantError
from mushaf.models.slot import LineSlot, SlotKind
from mushaf.models.word import Word


def check_slot_sequence(slots, page_number: int | None = None) -> None:
    """
    Fail fast unless ``slots`` holds exactly 15 slots numbered 1..15 in order.

    Raises:
        LayoutInvariantError: If the sequence is malformed
    """
    if len(slots) != LINES_PER_PAGE:
        raise LayoutInvariantError(
            page_number, f"expected {LINES_PER_PAGE} slots, got {len(slots)}"
        )
    numbers = [slot.slot_number for slot in slots]
    if numbers != list(range(1, LINES_PER_PAGE + 1)):
        raise LayoutInvariantError(
            page_number, f"slots must be numbered 1..{LINES_PER_PAGE}, got {numbers}"
        )


class SurahStartHint(BaseModel):
    """
    Upstream hint that a surah begins on the page.

    ``line`` is the first physical line of verse text. When absent the
    resolver infers it from the first line holding a word of the surah.
    """

    surah: int = Field(..., ge=1, le=114)
    line: Optional[int] = Field(default=None, ge=1, le=LINES_PER_PAGE)

    model_config = {"frozen": True}


class PageMeta(BaseModel):
    """Companion metadata block of a page response."""

    juz_number: Optional[int] = Field(default=None, ge=1, le=TOTAL_JUZ)
    hizb_number: Optional[int] = Field(default=None, ge=1, le=TOTAL_HIZB)
    surah_starts: tuple[SurahStartHint, ...] = Field(default=())

    model_config = {"frozen": True}


class SurahOnPage(BaseModel):
    """A surah that has at least one word on the page."""

    surah_number: int = Field(..., ge=1, le=114)
    has_basmala_pre: bool = Field(
        default=False,
        description="Whether the surah starts on this page with a basmala line",
    )

    model_config = {"frozen": True}


class PageLayout(BaseModel):
    """
    The reconstructed layout of one page of the reference edition.

    Built fresh per request and immutable afterwards. Exactly 15 slots,
    numbered 1..15 with no gaps or duplicates.

    Attributes:
        page_number: Page number (1-604)
        juz_number: Juz (1-30)
        hizb_number: Hizb (1-60)
        slots: The 15 line slots in order
        surahs_on_page: Surahs with words on the page, ascending
    """

    page_number: int = Field(..., ge=1, le=TOTAL_PAGES)
    juz_number: int = Field(..., ge=1, le=TOTAL_JUZ)
    hizb_number: int = Field(..., ge=1, le=TOTAL_HIZB)
    slots: tuple[LineSlot, ...]
    surahs_on_page: tuple[SurahOnPage, ...] = Field(default=())

    @model_validator(mode="after")
    def fifteen_contiguous_slots(self) -> "PageLayout":
        check_slot_sequence(self.slots, self.page_number)
        return self

    @property
    def text_slots(self) -> list[LineSlot]:
        """Slots carrying verse text (including blank ones)."""
        return [slot for slot in self.slots if slot.kind == SlotKind.TEXT]

    @property
    def words(self) -> list[Word]:
        """All words placed on the page, in line order."""
        return [word for slot in self.slots for word in slot.words]

    @property
    def verse_keys(self) -> list[str]:
        """Distinct verse keys on the page, in order of appearance."""
        seen: dict[str, None] = {}
        for word in self.words:
            seen.setdefault(word.verse_key, None)
        return list(seen)

    @property
    def is_empty(self) -> bool:
        return not any(slot.words for slot in self.slots)

    def slot(self, slot_number: int) -> LineSlot:
        """Return the slot with the given 1-based number."""
        if not 1 <= slot_number <= LINES_PER_PAGE:
            raise IndexError(f"slot_number must be 1-{LINES_PER_PAGE}, got {slot_number}")
        return self.slots[slot_number - 1]

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"PageLayout(page={self.page_number}, juz={self.juz_number})"


class SurahStart(BaseModel):
    """A surah heading found on the page."""

    surah_number: int = Field(..., ge=1, le=114)
    verse_key: str = Field(..., description="Key of the surah's first verse")
    banner_slot: Optional[int] = Field(default=None, ge=1, le=LINES_PER_PAGE)
    basmala_slot: Optional[int] = Field(default=None, ge=1, le=LINES_PER_PAGE)
    first_text_line: Optional[int] = Field(
        default=None,
        description="First line of verse text after the heading, if on this page",
    )

    @property
    def has_basmala(self) -> bool:
        return self.basmala_slot is not None

    @property
    def heading_lines(self) -> int:
        """Lines the heading occupies on this page (2 with basmala, 1 without)."""
        return (self.banner_slot is not None) + (self.basmala_slot is not None)

    model_config = {"frozen": True}


class PageAnalysis(BaseModel):
    """Structural metadata derived from a page's 15 slots."""

    surah_starts: tuple[SurahStart, ...] = Field(default=())
    available_text_line_count: int = Field(..., ge=0, le=LINES_PER_PAGE)
    structural_slot_numbers: frozenset[int] = Field(default=frozenset())
    text_slot_numbers: frozenset[int] = Field(default=frozenset())
    centered_slot_numbers: frozenset[int] = Field(
        default=frozenset(),
        description="Text slots rendered centred instead of justified",
    )
    closing_slot_numbers: frozenset[int] = Field(
        default=frozenset(),
        description="Text slots holding the last line of a surah",
    )

    model_config = {"frozen": True}


class ComposedLine(BaseModel):
    """Display string and font scale for one text slot."""

    slot_number: int = Field(..., ge=1, le=LINES_PER_PAGE)
    display_text: str
    character_count: int = Field(..., ge=0)
    font_scale: float = Field(..., gt=0.0)

    model_config = {"frozen": True}


class PageHeader(BaseModel):
    """Running header and footer strings of a page."""

    juz_label: str
    surah_title: str
    hizb_label: str
    page_label: str

    model_config = {"frozen": True}
