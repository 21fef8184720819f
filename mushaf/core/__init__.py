"""
Core modules for the mushaf library.

This package contains the page reconstruction pipeline:
- Source adapter: upstream response -> ordered Word records
- Resolver: words -> 15 line slots (text, surah banner, basmala)
- Analyzer: slots -> surah starts, available text lines, structural slots
- Composer: text slot -> display string and font scale

Primary API:
    from mushaf.core import build_page_layout, analyze, compose_page

    layout = build_page_layout(response_json, 187)
    analysis = analyze(layout.slots, layout.page_number)
    lines = compose_page(layout)
"""

# Primary API - what most users need
from mushaf.core.page import build_page_layout, compose_page, page_header

# Pipeline components
from mushaf.core.source import normalize, extract_page_meta, classify_word
from mushaf.core.resolver import resolve
from mushaf.core.analyzer import analyze
from mushaf.core.composer import compose, font_scale, format_verse_end_marker

# Page exception table
from mushaf.core.overrides import PAGE_OVERRIDES, OverrideRule, PageOverride

__all__ = [
    # Primary API
    "build_page_layout",
    "compose_page",
    "page_header",
    # Components
    "normalize",
    "extract_page_meta",
    "classify_word",
    "resolve",
    "analyze",
    "compose",
    "font_scale",
    "format_verse_end_marker",
    # Overrides
    "PAGE_OVERRIDES",
    "OverrideRule",
    "PageOverride",
]
