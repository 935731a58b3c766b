from __future__ import annotations

import argparse
import logging
import sys

from textual.logging import TextualHandler

from hexgrid.app import HexgridApp
from hexgrid.config import LOG_LEVELS, ConfigError, load_config
from hexgrid.core.session import analyze_structure
from hexgrid.ui.palette import PALETTES, get_palette


def configure_logging(level: int) -> None:
    # TextualHandler writes to the devtools console while the app runs, stderr otherwise
    logging.basicConfig(level=level, handlers=[TextualHandler()], force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexgrid", description="Paired hex/ASCII file viewer (Textual)"
    )
    parser.add_argument("-f", "--file", help="A file to open and parse")
    parser.add_argument("--config", help="Path to a config YAML (default: user config dir)")
    parser.add_argument("--palette", choices=sorted(PALETTES), help="Colour theme")
    parser.add_argument(
        "--no-structure",
        dest="parse_structure",
        action="store_false",
        default=None,
        help="Skip the ELF structure report",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config).with_overrides(
            palette=args.palette,
            parse_structure=args.parse_structure,
            log_level=args.log_level,
        )
    except ConfigError as e:
        for err in e.errors:
            print(f"hexgrid: config: {err}", file=sys.stderr)
        return 2

    configure_logging(config.log_level_value)

    if args.file is not None and config.parse_structure:
        print("Analyzing your file...")
        outcome = analyze_structure(args.file)
        if outcome.report is not None:
            print(outcome.text())
        else:
            print(f"hexgrid: {outcome.text()}", file=sys.stderr)

    app = HexgridApp(args.file, palette=get_palette(config.palette))
    app.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
