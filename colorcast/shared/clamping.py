#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorcast/shared/clamping.py

from colorcast.core import config as c


def clamp(low, high, value):
    """Bound value into [low, high]. Works for any ordered numeric type."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return clamp(0.0, 1.0, v)


def _clamp_alpha(a: float) -> float:
    if a != a:
        return c.ALPHA_MAX
    return float(clamp(c.ALPHA_MIN, c.ALPHA_MAX, a))


def _clamp255(v: int) -> int:
    return int(clamp(0, c.RGB_MAX, v))


def _clamp_percent(v):
    if v != v:
        return 0.0
    return clamp(0, c.PERCENT_MAX, v)
