#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorcast/shared/formatting.py

from colorcast.core import config as c


def format_number(v) -> str:
    """Whole numbers print without a fraction; others keep up to 2 decimals."""
    if float(v).is_integer():
        return str(int(v))
    return f"{v:.2f}".rstrip("0").rstrip(".")


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'hex':
        return args[0].value
    elif fmt == 'rgb':
        r, g, b, a = args
        if a < c.ALPHA_MAX:
            return f"rgba({r}, {g}, {b}, {format_number(a)})"
        return f"rgb({r}, {g}, {b})"
    elif fmt == 'hsl':
        h, s, l, a = args
        body = f"{h}, {format_number(s)}%, {format_number(l)}%"
        if a < c.ALPHA_MAX:
            return f"hsla({body}, {format_number(a)})"
        return f"hsl({body})"
    elif fmt == 'cmyk':
        cy, m, y, k = args
        return f"cmyk({cy}%, {m}%, {y}%, {k}%)"

    return ""
