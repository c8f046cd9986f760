#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorcast/logic/color/engine.py

import argparse
from typing import Any, Dict

from colorcast.core import config as c
from colorcast.core.colors import ParsedColor
from .resolver import classify_and_convert
from .renderer import render_color_info


def get_color_data(parsed: ParsedColor) -> Dict[str, Any]:
    """Builds every notation block for a parsed color, keeping the input's own value."""
    rgb = parsed.value.to_rgb()
    data = {
        "hex": rgb.to_hex(),
        "rgb": rgb,
        "hsl": rgb.to_hsl(),
        "cmyk": rgb.to_cmyk(),
    }
    # The matched notation shows exactly what was parsed
    data[parsed.notation] = parsed.value
    return data


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the color command"""
    text = " ".join(args.color).strip() if args.color else ""

    if not text or text.lower() == c.HELP_KEYWORD:
        if parser is not None:
            parser.print_help()
        return

    parsed = classify_and_convert(text)
    if not parsed:
        print(c.INVALID_MESSAGE)
        return

    render_color_info(parsed.notation, get_color_data(parsed))
