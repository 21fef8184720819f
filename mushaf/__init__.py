"""
mushaf - reconstructs the 15-line pages of the printed Mushaf.

Takes flat verse/word data from a Qur'an API and rebuilds the exact
line-by-line pagination of the 604-page Madinah edition, including surah
banners and basmala lines, ready for a renderer.

Example:
    from mushaf import build_page_layout, analyze, compose_page

    layout = build_page_layout(response_json, 187)
    analysis = analyze(layout.slots, layout.page_number)
    for slot_number, line in compose_page(layout).items():
        print(slot_number, line.display_text, line.font_scale)
"""

from mushaf.config import MushafSettings, configure, get_settings
from mushaf.constants import LINES_PER_PAGE, TOTAL_PAGES
from mushaf.core import (
    analyze,
    build_page_layout,
    compose,
    compose_page,
    normalize,
    page_header,
    resolve,
)
from mushaf.cache import PageLayoutCache
from mushaf.exceptions import (
    InvalidPageError,
    LayoutInvariantError,
    MushafError,
    SourceFormatError,
)
from mushaf.models import (
    CharClass,
    ComposedLine,
    LineSlot,
    PageAnalysis,
    PageLayout,
    SlotKind,
    Word,
)

__version__ = "0.1.0"

__all__ = [
    "MushafSettings",
    "configure",
    "get_settings",
    "LINES_PER_PAGE",
    "TOTAL_PAGES",
    "analyze",
    "build_page_layout",
    "compose",
    "compose_page",
    "normalize",
    "page_header",
    "resolve",
    "PageLayoutCache",
    "InvalidPageError",
    "LayoutInvariantError",
    "MushafError",
    "SourceFormatError",
    "CharClass",
    "ComposedLine",
    "LineSlot",
    "PageAnalysis",
    "PageLayout",
    "SlotKind",
    "Word",
]
