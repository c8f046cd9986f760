#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorcast/shared/preview.py

from colorcast.core import config as c


def print_color_block(r: int, g: int, b: int, title: str = "color", end: str = "\n") -> None:
    """Prints a truecolor swatch. Only meant for terminals."""
    padding = " " * max(0, c.LABEL_WIDTH - len(title))
    print(f"{c.MSG_BOLD_COLORS['info']}{title}{c.RESET}{padding}{c.BOLD_WHITE}:{c.RESET} \033[48;2;{r};{g};{b}m                {c.RESET}", end=end)
