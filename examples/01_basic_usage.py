"""
Basic Usage Example for mushaf

This example demonstrates the simplest way to lay out one page:
1. Load a saved page response
2. Build the 15-slot layout
3. Analyze its structure
4. Compose the text lines
"""

import json
import sys

from mushaf import analyze, build_page_layout, compose_page, page_header
from mushaf.data import get_mushaf_surah_name
from mushaf.models import SlotKind


def main():
    # Path to a saved quran.com `verses/by_page` response
    response_path = sys.argv[1] if len(sys.argv) > 1 else "page_305.json"
    page_number = int(sys.argv[2]) if len(sys.argv) > 2 else 305

    print(f"Laying out page {page_number}...\n")

    # Step 1: Load the response
    with open(response_path, encoding="utf-8") as f:
        response = json.load(f)

    # Step 2: Resolve words into 15 line slots
    layout = build_page_layout(response, page_number)
    print(f"  {len(layout.verse_keys)} verses, {len(layout.words)} words\n")

    # Step 3: Structural analysis
    analysis = analyze(layout.slots, layout.page_number)
    for start in analysis.surah_starts:
        print(f"  Surah {start.surah_number} starts here "
              f"(banner: {start.banner_slot}, basmala: {start.basmala_slot})")
    print(f"  Text lines available: {analysis.available_text_line_count}\n")

    # Step 4: Compose and print each line
    header = page_header(layout)
    lines = compose_page(layout)

    print(f"{header.juz_label}  {header.surah_title}  {header.hizb_label}")
    print("-" * 80)
    for slot in layout.slots:
        if slot.kind == SlotKind.SURAH_NAME_BANNER:
            print(f"{slot.slot_number:2d}  [{get_mushaf_surah_name(slot.surah_number)}]")
        elif slot.kind == SlotKind.BASMALA:
            print(f"{slot.slot_number:2d}  [basmala]")
        else:
            line = lines[slot.slot_number]
            print(f"{slot.slot_number:2d}  {line.display_text}  (x{line.font_scale:.2f})")
    print("-" * 80)
    print(header.page_label)


if __name__ == "__main__":
    main()
