"""
Print the trace of one layout pass over the demo tree.

Usage: layout-measurement-trace --width 200 --height 100 [--json]
"""

import argparse
import json
import sys
from typing import Optional, Sequence

from .core import Console
from .demo import DEFAULT_TEXT, trace_pass
from .utils.logger import info


def _non_negative(value: str) -> float:
    number = float(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="layout-measurement-trace",
        description="Log the propose/report sequence of one layout pass.",
    )
    parser.add_argument("--width", type=_non_negative, default=200.0)
    parser.add_argument("--height", type=_non_negative, default=100.0)
    parser.add_argument("--text", default=DEFAULT_TEXT, help="Label between the boxes")
    parser.add_argument(
        "--spacing", type=_non_negative, default=0.0, help="HStack spacing"
    )
    parser.add_argument("--json", action="store_true", help="Print rows as JSON")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    entries = trace_pass(
        Console(),
        args.width,
        args.height,
        text=args.text,
        spacing=args.spacing,
    )
    info(f"[CLI] Traced {len(entries)} entries for {args.width}x{args.height}")

    if args.json:
        rows = [{"label": e.label, "value": e.value} for e in entries]
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return 0

    label_width = max((len(e.label) for e in entries), default=0)
    for entry in entries:
        print(f"{entry.label.ljust(label_width)}  {entry.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
