"""
Line text composer.

Builds the right-to-left display string of one text line and the font scale
that keeps it inside the page width.

Spacing rules:
- A verse-end marker is glued to the word before it (no space before it).
- A marker is followed by a space only when a non-marker word follows.
- A word is followed by a space unless the next item is a marker or it is
  the last item on the line.
"""

from mushaf.config import MushafSettings, get_settings
from mushaf.core.source import VERSE_NUMBER_PATTERN
from mushaf.models import ComposedLine, LineSlot, Word


def format_verse_end_marker(text: str, settings: MushafSettings | None = None) -> str:
    """
    Wrap a plain-digit verse number in ornamental brackets.

    Texts that are already an end-of-verse glyph are returned unchanged.

    Examples:
        >>> format_verse_end_marker("٥")
        '﴿٥﴾'
        >>> format_verse_end_marker("۝")
        '۝'
    """
    if settings is None:
        settings = get_settings()
    stripped = text.strip()
    if VERSE_NUMBER_PATTERN.match(stripped):
        return f"{settings.verse_end_open}{stripped}{settings.verse_end_close}"
    return text


def compose_text(words: list[Word] | tuple[Word, ...], settings: MushafSettings | None = None) -> str:
    """Join the words of a line following the verse-end marker spacing rules."""
    if settings is None:
        settings = get_settings()

    parts = []
    for i, word in enumerate(words):
        next_word = words[i + 1] if i + 1 < len(words) else None
        if word.is_marker:
            part = format_verse_end_marker(word.text, settings)
            if next_word is not None and not next_word.is_marker:
                part += " "
        else:
            part = word.text
            if next_word is not None and not next_word.is_marker:
                part += " "
        parts.append(part)
    return "".join(parts)


def font_scale(character_count: int, settings: MushafSettings | None = None) -> float:
    """
    Font-size multiplier for a line of the given length.

    Lines up to the breakpoint get the boost; longer lines shrink in inverse
    proportion to their length so they do not overflow the page width. Both
    constants were tuned by eye against one reference font and are settings,
    not derived values.

    Examples:
        >>> font_scale(40)
        1.02
    """
    if settings is None:
        settings = get_settings()
    boost = settings.font_scale_boost
    breakpoint_ = settings.font_scale_breakpoint
    if character_count <= breakpoint_:
        return boost
    return boost * (breakpoint_ / character_count)


def compose(text_slot: LineSlot, settings: MushafSettings | None = None) -> ComposedLine:
    """
    Compose the display string and font scale of a text slot.

    Args:
        text_slot: A TEXT slot (possibly empty)
        settings: Optional settings override

    Returns:
        ComposedLine

    Raises:
        ValueError: If the slot is a banner or basmala slot
    """
    if text_slot.is_structural:
        raise ValueError(
            f"Cannot compose {text_slot.kind.value} slot {text_slot.slot_number}; "
            "only text slots carry words"
        )
    if settings is None:
        settings = get_settings()

    display_text = compose_text(text_slot.words, settings)
    count = len(display_text)
    return ComposedLine(
        slot_number=text_slot.slot_number,
        display_text=display_text,
        character_count=count,
        font_scale=font_scale(count, settings),
    )
