"""
Cached Navigation Example for mushaf

Pages are rebuilt from scratch on every call. A reader that flips back and
forth holds a PageLayoutCache so each page is resolved once.
"""

import json
import logging
from pathlib import Path

from mushaf import PageLayoutCache, configure

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


def load_page(directory: Path, page_number: int):
    """Load page_<n>.json from a directory of saved responses, or None."""
    path = directory / f"page_{page_number}.json"
    if not path.exists():
        return None
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def main():
    directory = Path("pages")

    # Narrower lines for a small screen
    settings = configure(font_scale_breakpoint=60, cache_size=8)
    cache = PageLayoutCache(settings=settings)

    for page_number in (304, 305, 306, 305, 304):
        layout = cache.get_or_build(page_number, lambda: load_page(directory, page_number))
        status = "blank" if layout.is_empty else f"{len(layout.verse_keys)} verses"
        print(f"Page {page_number}: {status}")

    print(f"\nCache: {len(cache)} pages, {cache.hits} hits, {cache.misses} misses")


if __name__ == "__main__":
    main()
