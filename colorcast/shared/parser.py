#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorcast/shared/parser.py

from typing import Callable, List, Optional, Tuple

from colorcast.core import config as c
from colorcast.core import conversions as conv
from colorcast.core.colors import CMYKColor, HexColor, HSLColor, RGBColor
from colorcast.core.errors import DecodeError, ParseError
from .sanitizer import _strip_and_unquote, tokenize


# ==========================================
# Field Helpers
# ==========================================

def _strip_percent(field: str) -> Tuple[str, bool]:
    if field.endswith("%"):
        return field[:-1].strip(), True
    return field, False


def _parse_int(field: str, high: int) -> int:
    """Parses an unsigned integer no larger than high."""
    if not c.INT_REGEX.fullmatch(field):
        raise ValueError(f"'{field}' is not an integer")
    v = int(field)
    if v > high:
        raise ValueError(f"{v} exceeds {high}")
    return v


def _parse_percent(field: str) -> float:
    """Parses a 0-100 percentage; the trailing '%' is optional."""
    s, _ = _strip_percent(field)
    if not c.FLOAT_REGEX.fullmatch(s):
        raise ValueError(f"'{field}' is not a percentage")
    v = float(s)
    if v > c.PERCENT_MAX:
        raise ValueError(f"{field} exceeds {c.PERCENT_MAX}%")
    return v


def _parse_alpha(field: str, allow_percent: bool = False) -> float:
    """
    Parses an alpha fraction (0.0-1.0). An opacity percentage is only
    accepted inside a functional wrapper, so bare lists like
    '0% 100% 100% 0%' are left for CMYK.
    """
    s, is_percent = _strip_percent(field)
    if is_percent and not allow_percent:
        raise ValueError(f"'{field}' is not an alpha fraction")
    if not c.FLOAT_REGEX.fullmatch(s):
        raise ValueError(f"'{field}' is not an alpha value")
    v = float(s)
    if is_percent:
        v = v / c.PERCENT_MAX
    if v > c.ALPHA_MAX:
        raise ValueError(f"alpha {field} is out of range")
    return v


def _parse_hue(field: str) -> int:
    """Takes the leading digit run only, so '120deg' and '120°' are accepted."""
    m = c.LEADING_DIGITS_REGEX.match(field)
    if not m:
        raise ValueError(f"'{field}' is not a hue")
    h = int(m.group(1))
    if h > c.HUE_MAX:
        raise ValueError(f"hue {h} exceeds {c.HUE_MAX}")
    return h


def _split_for(notation: str, text: str, counts: Tuple[int, ...]) -> Tuple[Optional[str], List[str]]:
    """Tokenizes text and checks the wrapper name and field count for a notation."""
    name, fields = tokenize(text)
    if name is not None and name not in c.NOTATION_WRAPPERS[notation]:
        raise ParseError(notation, text, f"unexpected '{name}' wrapper")
    if len(fields) not in counts:
        expected = " or ".join(str(n) for n in counts)
        raise ParseError(notation, text, f"expected {expected} fields, got {len(fields)}")
    return name, fields


# ==========================================
# Notation Parsers
# ==========================================

def parse_hex(text: str) -> HexColor:
    """
    Parses '#RRGGBB', '#RGB', '#RRGGBBAA', '#RGBA' (the '#' is optional)
    or the keyword 'transparent'.
    """
    s = _strip_and_unquote(text)
    if s.lower() == c.TRANSPARENT_KEYWORD:
        return HexColor("000000", 0.0)

    m = c.HEX_REGEX.fullmatch(s)
    if not m:
        raise ParseError("hex", text, "not a hex code")
    digits = m.group(1)
    if len(digits) not in c.HEX_LENGTHS:
        raise ParseError("hex", text, f"unsupported digit count {len(digits)}")

    try:
        r, g, b, a = conv.hex_to_rgba(digits)
    except DecodeError as e:
        raise ParseError("hex", text, str(e)) from e
    return HexColor(conv.rgb_to_hex(r, g, b), a)


def parse_rgb(text: str) -> RGBColor:
    """Parses 'rgb(r, g, b)', 'rgba(r, g, b, a)' or a bare triple/quadruple."""
    name, fields = _split_for("rgb", text, (3, 4))
    try:
        r, g, b = (_parse_int(f, c.RGB_MAX) for f in fields[:3])
        a = _parse_alpha(fields[3], name is not None) if len(fields) == 4 else c.ALPHA_MAX
    except ValueError as e:
        raise ParseError("rgb", text, str(e)) from e
    return RGBColor(r, g, b, a)


def parse_hsl(text: str) -> HSLColor:
    """Parses 'hsl(h, s%, l%)', 'hsla(h, s%, l%, a)' or a bare triple/quadruple."""
    name, fields = _split_for("hsl", text, (3, 4))
    try:
        h = _parse_hue(fields[0])
        s = _parse_percent(fields[1])
        l_hsl = _parse_percent(fields[2])
        a = _parse_alpha(fields[3], name is not None) if len(fields) == 4 else c.ALPHA_MAX
    except ValueError as e:
        raise ParseError("hsl", text, str(e)) from e
    return HSLColor(h, s, l_hsl, a)


def parse_cmyk(text: str) -> CMYKColor:
    """Parses 'cmyk(c, m, y, k)' or a bare quadruple of whole percentages."""
    _, fields = _split_for("cmyk", text, (4,))
    try:
        values = [_parse_int(_strip_percent(f)[0], c.PERCENT_MAX) for f in fields]
    except ValueError as e:
        raise ParseError("cmyk", text, str(e)) from e
    return CMYKColor(*values)


# Central dictionary to map notation names to their parsing functions
STRING_PARSERS = {
    'hex': parse_hex,
    'rgb': parse_rgb,
    'hsl': parse_hsl,
    'cmyk': parse_cmyk,
}


def matches(notation: str, text: str) -> bool:
    """True when text parses under the given notation."""
    try:
        STRING_PARSERS[notation](text)
    except ParseError:
        return False
    return True


def _predicate(notation: str) -> Callable[[str], bool]:
    def check(text: str) -> bool:
        return matches(notation, text)
    check.__name__ = f"is_{notation}_string"
    return check


is_hex_string = _predicate("hex")
is_rgb_string = _predicate("rgb")
is_hsl_string = _predicate("hsl")
is_cmyk_string = _predicate("cmyk")
