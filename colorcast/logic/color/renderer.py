#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorcast/logic/color/renderer.py

import sys
from typing import Any, Dict

from colorcast.core import config as c
from colorcast.shared.formatting import format_colorspace
from colorcast.shared.preview import print_color_block


def _line(label: str, value: str, styled: bool) -> str:
    padded = f"{label:<{c.LABEL_WIDTH}}"
    if styled:
        return f"{c.MSG_BOLD_COLORS['info']}{padded}{c.RESET}{c.BOLD_WHITE}: {value}{c.RESET}"
    return f"{padded}: {value}"


def render_color_info(notation: str, data: Dict[str, Any]) -> None:
    """Strictly prints color information. Data must be pre-calculated by the engine."""
    styled = sys.stdout.isatty()
    rgb = data["rgb"]
    hsl = data["hsl"]
    cmyk = data["cmyk"]

    if styled:
        print_color_block(rgb.r, rgb.g, rgb.b, "preview")

    print(_line("notation", notation, styled))
    print(_line("hex", format_colorspace("hex", data["hex"]), styled))
    print(_line("rgb", format_colorspace("rgb", rgb.r, rgb.g, rgb.b, rgb.a), styled))
    print(_line("hsl", format_colorspace("hsl", hsl.h, hsl.s, hsl.l, hsl.a), styled))
    print(_line("cmyk", format_colorspace("cmyk", cmyk.c, cmyk.m, cmyk.y, cmyk.k), styled))
