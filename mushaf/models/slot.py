"""
Line slot data model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from mushaf.models.word import Word


class SlotKind(str, Enum):
    """What occupies one of the 15 physical lines of a page."""

    TEXT = "text"
    SURAH_NAME_BANNER = "surah_name"
    BASMALA = "basmala"


class LineSlot(BaseModel):
    """
    One of the fixed line positions on a page.

    Text slots carry an ordered run of words (possibly empty, which renders
    as a blank line). Banner and basmala slots carry the number of the surah
    they introduce and no words.

    Attributes:
        slot_number: Physical line number (1-15)
        kind: Text, surah-name banner or basmala
        words: Words on the line (text slots only)
        surah_number: Surah introduced by a banner/basmala slot
    """

    slot_number: int = Field(
        ...,
        description="Physical line number (1-15)",
        ge=1,
        le=15,
    )
    kind: SlotKind = Field(
        default=SlotKind.TEXT,
        description="Slot kind",
    )
    words: tuple[Word, ...] = Field(
        default=(),
        description="Ordered words of a text line",
    )
    surah_number: Optional[int] = Field(
        default=None,
        description="Surah introduced by a banner or basmala slot",
        ge=1,
        le=114,
    )

    @model_validator(mode="after")
    def kind_matches_payload(self) -> "LineSlot":
        """Text slots hold words; structural slots hold a surah number."""
        if self.kind == SlotKind.TEXT:
            if self.surah_number is not None:
                raise ValueError("text slots do not carry a surah_number")
        else:
            if self.surah_number is None:
                raise ValueError(f"{self.kind.value} slots require a surah_number")
            if self.words:
                raise ValueError(f"{self.kind.value} slots cannot carry words")
        return self

    @classmethod
    def text(cls, slot_number: int, words=()) -> "LineSlot":
        return cls(slot_number=slot_number, kind=SlotKind.TEXT, words=tuple(words))

    @classmethod
    def banner(cls, slot_number: int, surah_number: int) -> "LineSlot":
        return cls(
            slot_number=slot_number,
            kind=SlotKind.SURAH_NAME_BANNER,
            surah_number=surah_number,
        )

    @classmethod
    def basmala(cls, slot_number: int, surah_number: int) -> "LineSlot":
        return cls(
            slot_number=slot_number,
            kind=SlotKind.BASMALA,
            surah_number=surah_number,
        )

    @property
    def is_structural(self) -> bool:
        """Whether the slot is a banner or basmala line."""
        return self.kind != SlotKind.TEXT

    @property
    def is_empty(self) -> bool:
        """Whether this is a text slot with no words."""
        return self.kind == SlotKind.TEXT and not self.words

    @property
    def verse_keys(self) -> list[str]:
        """Distinct verse keys on the line, in order of appearance."""
        keys: list[str] = []
        for word in self.words:
            if not keys or keys[-1] != word.verse_key:
                keys.append(word.verse_key)
        return keys

    model_config = {"frozen": True}

    def __str__(self) -> str:
        if self.is_structural:
            return f"LineSlot({self.slot_number}, {self.kind.value}, surah={self.surah_number})"
        return f"LineSlot({self.slot_number}, text, {len(self.words)} words)"
