from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from src.config import Config
from src.errors import SinkUnavailable, SourceUnavailable
from src.exporter import export
from src.loader import ENCODING_ERRORS, load
from src.reporter import make_renderer
from src.session import Session


def build_parser(cfg: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count item purchases from a daily log and explore them from a menu.",
    )
    parser.add_argument(
        "--input",
        default=cfg.input_path,
        help="Purchase log, whitespace-separated item names (default: %(default)s)",
    )
    parser.add_argument(
        "--backup",
        default=cfg.backup_path,
        help="Where to write the item/count backup (default: %(default)s)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Plain text output without terminal colors",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    cfg = Config()  # reads GROCER_* settings from env or defaults
    args = build_parser(cfg).parse_args(argv)

    # Item names that are not valid UTF-8 must still print and be queryable
    for stream in (sys.stdin, sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors=ENCODING_ERRORS)

    renderer = make_renderer(cfg.use_color and not args.no_color, cfg.bar_mark)

    # Load -> backup -> menu. Either of the first two failing stops here.
    try:
        table = load(args.input)
    except SourceUnavailable as e:
        print(renderer.alert(f"Fatal error: {e}"), file=sys.stderr)
        return 1
    print(f"Loaded {len(table)} distinct items ({table.total()} purchases) from {args.input}")

    try:
        export(table, args.backup)
    except SinkUnavailable as e:
        print(renderer.alert(f"Fatal error: {e}"), file=sys.stderr)
        return 1
    print(f"Saved backup: {args.backup}")

    Session(table, renderer).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
