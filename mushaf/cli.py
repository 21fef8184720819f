"""
Command line inspection of a saved page response.

    mushaf 187 page_187.json
    curl ... | mushaf 305 --json
"""

import argparse
import json
import logging
import sys

from mushaf.config import get_settings
from mushaf.core import analyze, build_page_layout, compose_page, page_header
from mushaf.data import get_mushaf_surah_name
from mushaf.exceptions import MushafError
from mushaf.models import SlotKind

BASMALA_TEXT = "بِسۡمِ ٱللَّهِ ٱلرَّحۡمَـٰنِ ٱلرَّحِیمِ"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mushaf",
        description="Reconstruct the 15-line layout of a Mushaf page from a saved API response",
    )
    parser.add_argument("page", type=int, help="Page number (1-604)")
    parser.add_argument(
        "response",
        nargs="?",
        default="-",
        help="Path to the page response JSON (default: stdin)",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: MUSHAF_LOG_LEVEL or WARNING)",
    )
    return parser


def _load_response(source: str):
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as f:
        return json.load(f)


def _print_layout(layout, analysis, lines, header) -> None:
    print(f"{header.juz_label} | {header.surah_title} | {header.hizb_label}")
    print("-" * 80)
    for slot in layout.slots:
        if slot.kind == SlotKind.SURAH_NAME_BANNER:
            content = f"[سُورَةُ {get_mushaf_surah_name(slot.surah_number)}]"
        elif slot.kind == SlotKind.BASMALA:
            content = f"[{BASMALA_TEXT}]"
        else:
            line = lines[slot.slot_number]
            content = f"{line.display_text}  (x{line.font_scale:.3f})" if line.display_text else ""
        print(f"{slot.slot_number:2d} {slot.kind.value:<10} {content}")
    print("-" * 80)
    print(f"Page {header.page_label} | available text lines: {analysis.available_text_line_count}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level or get_settings().log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        raw = _load_response(args.response)
        layout = build_page_layout(raw, args.page)
    except (OSError, json.JSONDecodeError, MushafError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    analysis = analyze(layout.slots, layout.page_number)
    lines = compose_page(layout)
    header = page_header(layout)

    if args.json:
        payload = {
            "layout": layout.model_dump(mode="json"),
            "analysis": analysis.model_dump(mode="json"),
            "lines": {n: line.model_dump(mode="json") for n, line in lines.items()},
            "header": header.model_dump(mode="json"),
        }
        json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
        print()
    else:
        _print_layout(layout, analysis, lines, header)
    return 0


if __name__ == "__main__":
    sys.exit(main())
