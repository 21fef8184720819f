"""
Word data model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from mushaf.models.surah import SURAH_AYAH_COUNTS


class CharClass(str, Enum):
    """Character classification of a word record."""

    WORD = "word"
    VERSE_END_MARKER = "end"  # ۝ / verse number glyph
    PAUSE_MARK = "pause"  # waqf signs


class Word(BaseModel):
    """
    The atomic unit of a page: one word (or glyph) of a verse.

    Words are totally ordered by ``(surah, verse_number, position)``.
    ``position`` is unique within a verse but not across the page.

    Attributes:
        surah: Surah number (1-114)
        verse_number: Verse number within the surah (1-based)
        position: Position of the word inside its verse (1-based)
        text: Display text as supplied upstream
        char_class: Word, verse-end marker or pause mark
        line_hint: Physical line number supplied upstream, if any
    """

    surah: int = Field(
        ...,
        description="Surah number (1-114)",
        ge=1,
        le=114,
    )
    verse_number: int = Field(
        ...,
        description="Verse number within the surah (1-based)",
        ge=1,
    )
    position: int = Field(
        ...,
        description="Position of the word inside its verse (1-based)",
        ge=1,
    )
    text: str = Field(
        ...,
        description="Qur'anic orthography as supplied upstream",
    )
    char_class: CharClass = Field(
        default=CharClass.WORD,
        description="Character classification",
    )
    line_hint: Optional[int] = Field(
        default=None,
        description="Upstream physical line number (1-15)",
        ge=1,
        le=15,
    )

    @model_validator(mode="after")
    def verse_within_surah(self) -> "Word":
        """Ensure the verse number exists in the surah."""
        total = SURAH_AYAH_COUNTS[self.surah]
        if self.verse_number > total:
            raise ValueError(
                f"verse {self.verse_number} out of range for surah {self.surah} "
                f"(1-{total})"
            )
        return self

    @property
    def verse_key(self) -> str:
        """Join key ``"surah:verse"`` used to group words into verses."""
        return f"{self.surah}:{self.verse_number}"

    @property
    def sort_key(self) -> tuple[int, int, int]:
        """Total document order of the word."""
        return (self.surah, self.verse_number, self.position)

    @property
    def is_marker(self) -> bool:
        """Whether this is a verse-end marker."""
        return self.char_class == CharClass.VERSE_END_MARKER

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "surah": 19,
                    "verse_number": 1,
                    "position": 1,
                    "text": "كٓهيعٓصٓ",
                    "char_class": "word",
                    "line_hint": 3,
                }
            ]
        },
    }

    def __str__(self) -> str:
        return f"Word({self.verse_key}:{self.position})"
