#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorcast/core/colors.py

from dataclasses import dataclass, replace
from typing import NamedTuple, Tuple, Union

from . import config as c
from . import conversions as conv
from colorcast.shared.clamping import (
    _clamp255,
    _clamp_alpha,
    _clamp_percent,
    clamp,
)


@dataclass(frozen=True)
class RGBColor:
    """8-bit red, green and blue channels with a 0.0-1.0 alpha."""

    r: int
    g: int
    b: int
    a: float = c.ALPHA_MAX

    @classmethod
    def new(cls, r: int, g: int, b: int, a: float = c.ALPHA_MAX) -> "RGBColor":
        """Build a color, clamping every field into range."""
        return cls(_clamp255(int(r)), _clamp255(int(g)), _clamp255(int(b)), _clamp_alpha(a))

    def with_alpha(self, a: float) -> "RGBColor":
        return replace(self, a=_clamp_alpha(a))

    @property
    def channels(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b

    def to_rgb(self) -> "RGBColor":
        return self

    def to_hex(self) -> "HexColor":
        return HexColor(conv.rgb_to_hex(self.r, self.g, self.b), self.a)

    def to_hsl(self) -> "HSLColor":
        h, s, l_hsl = conv.rgb_to_hsl(self.r, self.g, self.b)
        return HSLColor(h, s, l_hsl, self.a)

    def to_cmyk(self) -> "CMYKColor":
        return CMYKColor(*conv.rgb_to_cmyk(self.r, self.g, self.b))


@dataclass(frozen=True)
class HSLColor:
    """Hue in whole degrees (0-360), saturation and lightness as 0-100 percentages."""

    h: int
    s: float
    l: float
    a: float = c.ALPHA_MAX

    @classmethod
    def new(cls, h: int, s: float, l: float, a: float = c.ALPHA_MAX) -> "HSLColor":
        return cls(
            int(clamp(0, c.HUE_MAX, int(h))),
            float(_clamp_percent(s)),
            float(_clamp_percent(l)),
            _clamp_alpha(a),
        )

    def with_alpha(self, a: float) -> "HSLColor":
        return replace(self, a=_clamp_alpha(a))

    def to_rgb(self) -> RGBColor:
        return RGBColor(*conv.hsl_to_rgb(self.h, self.s, self.l), self.a)


@dataclass(frozen=True)
class HexColor:
    """
    Six lower-case hex digits for the RGB bytes plus an alpha fraction.

    Reduced codes ('fff') are expanded on construction; an alpha byte from
    the 4 and 8 digit forms is stored as a fraction of 255.
    """

    code: str
    a: float = c.ALPHA_MAX

    @classmethod
    def new(cls, code: str, a: float = c.ALPHA_MAX) -> "HexColor":
        """Build from any 3 or 6 digit code. Raises DecodeError on bad digits."""
        r, g, b = conv.hex_to_rgb(code)
        return cls(conv.rgb_to_hex(r, g, b), _clamp_alpha(a))

    def with_alpha(self, a: float) -> "HexColor":
        return replace(self, a=_clamp_alpha(a))

    @property
    def value(self) -> str:
        """The '#'-prefixed form, with an alpha byte only when not fully opaque."""
        if self.a < c.ALPHA_MAX:
            r, g, b = conv.hex_to_rgb(self.code)
            return f"#{conv.rgba_to_hex(r, g, b, self.a)}"
        return f"#{self.code}"

    def to_rgb(self) -> RGBColor:
        return RGBColor(*conv.hex_to_rgb(self.code), self.a)


@dataclass(frozen=True)
class CMYKColor:
    """Whole cyan, magenta, yellow and key percentages (0-100)."""

    c: int
    m: int
    y: int
    k: int

    @classmethod
    def new(cls, cy: int, m: int, y: int, k: int) -> "CMYKColor":
        return cls(*(int(_clamp_percent(int(v))) for v in (cy, m, y, k)))

    def to_rgb(self) -> RGBColor:
        return RGBColor(*conv.cmyk_to_rgb(self.c, self.m, self.y, self.k))


Color = Union[RGBColor, HSLColor, HexColor, CMYKColor]


class ParsedColor(NamedTuple):
    """A successfully parsed string, tagged with the notation that matched."""

    notation: str
    value: Color


@dataclass(frozen=True)
class NoMatch:
    """Dispatcher outcome when no notation accepts the text."""

    text: str

    def __bool__(self) -> bool:
        return False
