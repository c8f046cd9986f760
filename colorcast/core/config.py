#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorcast/core/config.py

import re

# ==========================================
# Numeric Limits
# ==========================================

RGB_MAX = 255                      # 8-bit channel limit
HUE_MAX = 360                      # Full circle degrees (360 itself is a valid hue)
HUE_SECTOR = 60.0                  # Degrees per HSL hue segment
HSL_HUE_MOD = 6.0                  # Number of hue segments
PERCENT_MAX = 100                  # Upper bound for saturation, lightness and CMYK inks
ALPHA_MIN = 0.0                    # Fully transparent
ALPHA_MAX = 1.0                    # Fully opaque
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
CEIL_EPS = 1e-9                    # Slack applied before ceiling to absorb float noise

# ==========================================
# Grammar
# ==========================================

# Notation priority used by the dispatcher
NOTATION_ORDER = ("hex", "rgb", "hsl", "cmyk")

# Functional wrappers recognised by the tokenizer
KNOWN_WRAPPERS = ("rgb", "rgba", "hsl", "hsla", "cmyk")

# Which wrappers each notation accepts (bare field lists are always accepted)
NOTATION_WRAPPERS = {
    "rgb": ("rgb", "rgba"),
    "hsl": ("hsl", "hsla"),
    "cmyk": ("cmyk",),
}

TRANSPARENT_KEYWORD = "transparent"

# Hex digit counts: 3/4 are reduced (one nibble per channel), 6/8 are full
HEX_LENGTHS = (3, 4, 6, 8)

WRAPPER_REGEX = re.compile(r"\s*([A-Za-z]+)\s*\((.*)\)\s*", re.DOTALL)
HEX_REGEX = re.compile(r"#?([0-9A-Fa-f]+)")
HEX_PAIR_REGEX = re.compile(r"[0-9A-Fa-f]{1,2}")
INT_REGEX = re.compile(r"\+?[0-9]+")
FLOAT_REGEX = re.compile(r"\+?([0-9]+\.?[0-9]*|\.[0-9]+)")
LEADING_DIGITS_REGEX = re.compile(r"^([0-9]+)")

QUOTE_CHARS = "\"'`"

# ==========================================
# Output
# ==========================================

INVALID_MESSAGE = "Invalid color string"
HELP_KEYWORD = "help"

# Column width of the label in rendered output
LABEL_WIDTH = 9

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
