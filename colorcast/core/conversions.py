#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorcast/core/conversions.py

import math
from typing import Tuple

from . import config as c
from .errors import DecodeError
from colorcast.shared.clamping import _clamp01


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def _ceil(v: float) -> int:
    return int(math.ceil(v - c.CEIL_EPS))


# ==========================================
# Hex
# ==========================================

def hex_to_u8(text: str) -> int:
    """
    Decode a 1 or 2 character hex fragment into a byte.
    A single digit is doubled first, so 'f' decodes as 'ff'.
    """
    if text is None or not c.HEX_PAIR_REGEX.fullmatch(text):
        raise DecodeError(str(text))
    if len(text) == 1:
        text = text * 2
    return int(text, 16)


def hex_to_rgba(hex_code: str) -> Tuple[int, int, int, float]:
    """Convert a 3, 4, 6 or 8 digit hex string (optional '#') to RGBA."""
    digits = str(hex_code).strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if len(digits) not in c.HEX_LENGTHS:
        raise DecodeError(digits)

    width = 1 if len(digits) in (3, 4) else 2
    parts = [digits[i:i + width] for i in range(0, len(digits), width)]
    values = [hex_to_u8(p) for p in parts]

    alpha = c.ALPHA_MAX
    if len(values) == 4:
        alpha = values[3] / c.RGB_MAX
    return values[0], values[1], values[2], alpha


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert hex string to RGB tuple, ignoring any alpha digits."""
    r, g, b, _ = hex_to_rgba(hex_code)
    return r, g, b


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB components to a lower-case 6 digit hex string."""
    return f"{int(r):02x}{int(g):02x}{int(b):02x}"


def rgba_to_hex(r: int, g: int, b: int, a: float) -> str:
    """Convert RGBA components to a lower-case 8 digit hex string."""
    alpha_byte = _round_half_up(_clamp01(a) * c.RGB_MAX)
    return f"{rgb_to_hex(r, g, b)}{alpha_byte:02x}"


# ==========================================
# HSL
# ==========================================

def rgb_to_hsl_exact(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to HSL without rounding. Saturation and lightness are 0-100."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        s = delta / (c.UNIT - abs(c.DIV_2 * L - c.UNIT))
        if cmax == r_f:
            h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
        elif cmax == g_f:
            h = c.HUE_SECTOR * ((b_f - r_f) / delta + 2.0)
        else:
            h = c.HUE_SECTOR * ((r_f - g_f) / delta + 4.0)
        if h < 0:
            h += c.HUE_MAX
    return h, s * c.PERCENT_MAX, L * c.PERCENT_MAX


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[int, float, float]:
    """
    Convert RGB to HSL, rounding every component up.

    Hue is whole degrees; saturation and lightness are whole percentages
    carried as floats. Ceiling rounding makes the trip back through
    hsl_to_rgb lossy; use rgb_to_hsl_exact when precision matters.
    """
    h, s, L = rgb_to_hsl_exact(r, g, b)
    return _ceil(h), float(_ceil(s)), float(_ceil(L))


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[int, int, int]:
    """Convert HSL (hue in degrees, s and L as 0-100 percentages) to RGB bytes."""
    s_f = _clamp01(s / c.PERCENT_MAX)
    l_f = _clamp01(L / c.PERCENT_MAX)

    chroma = (c.UNIT - abs(c.DIV_2 * l_f - c.UNIT)) * s_f
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % 2) - c.UNIT))
    m = l_f - chroma / c.DIV_2

    if 0 <= h < 60:
        r_p, g_p, b_p = chroma, x, 0.0
    elif 60 <= h < 120:
        r_p, g_p, b_p = x, chroma, 0.0
    elif 120 <= h < 180:
        r_p, g_p, b_p = 0.0, chroma, x
    elif 180 <= h < 240:
        r_p, g_p, b_p = 0.0, x, chroma
    elif 240 <= h < 300:
        r_p, g_p, b_p = x, 0.0, chroma
    else:
        r_p, g_p, b_p = chroma, 0.0, x

    return (
        _round_half_up(_clamp01(r_p + m) * c.RGB_MAX),
        _round_half_up(_clamp01(g_p + m) * c.RGB_MAX),
        _round_half_up(_clamp01(b_p + m) * c.RGB_MAX),
    )


# ==========================================
# CMYK
# ==========================================

def cmyk_to_rgb(cy: int, m: int, y: int, k: int) -> Tuple[int, int, int]:
    """Convert CMYK percentages to RGB bytes, truncating toward zero."""
    # 255 * (1 - C/100) * (1 - K/100) in exact integer arithmetic
    scale = c.PERCENT_MAX * c.PERCENT_MAX
    r = c.RGB_MAX * (c.PERCENT_MAX - cy) * (c.PERCENT_MAX - k) // scale
    g = c.RGB_MAX * (c.PERCENT_MAX - m) * (c.PERCENT_MAX - k) // scale
    b = c.RGB_MAX * (c.PERCENT_MAX - y) * (c.PERCENT_MAX - k) // scale
    return r, g, b


def rgb_to_cmyk(r: int, g: int, b: int) -> Tuple[int, int, int, int]:
    """Convert RGB to whole CMYK percentages."""
    if r == 0 and g == 0 and b == 0:
        return 0, 0, 0, c.PERCENT_MAX
    r_norm, g_norm, b_norm = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    k = c.UNIT - max(r_norm, g_norm, b_norm)
    denom = c.UNIT - k
    cy = (c.UNIT - r_norm - k) / denom
    m = (c.UNIT - g_norm - k) / denom
    y = (c.UNIT - b_norm - k) / denom
    return tuple(_round_half_up(v * c.PERCENT_MAX) for v in (cy, m, y, k))
