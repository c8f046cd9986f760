#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorcast/main.py

import argparse
import sys
from typing import List, Optional

from colorcast import __version__
from colorcast.logic.color import engine
from colorcast.shared.logger import ColorcastArgumentParser


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the color command."""
    parser = ColorcastArgumentParser(
        prog="colorcast",
        description="colorcast: detect a color notation and print its equivalents",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
        epilog=(
            "supported notations (tried in this order):\n"
            '  hex   "#ff0000", "#f00", "#ff000080", "transparent"\n'
            '  rgb   "rgb(255, 0, 0)", "rgba(255, 0, 0, 0.5)", "255 0 0"\n'
            '  hsl   "hsl(0, 100%, 50%)", "hsla(0 100% 50% / 0.5)"\n'
            '  cmyk  "cmyk(0, 100, 100, 0)", "0% 100% 100% 0%"'
        ),
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"colorcast {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "color",
        nargs="*",
        help="color string to convert, in quotes (or 'help')",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for colorcast CLI"""
    parser = get_color_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    engine.run(args, parser)


if __name__ == "__main__":
    main()
