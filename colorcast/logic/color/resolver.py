#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorcast/logic/color/resolver.py

from typing import Union

from colorcast.core import config as c
from colorcast.core.colors import NoMatch, ParsedColor
from colorcast.core.errors import ParseError
from colorcast.shared.parser import STRING_PARSERS


def classify_and_convert(text: str) -> Union[ParsedColor, NoMatch]:
    """
    Tries every notation in priority order (hex, rgb, hsl, cmyk) and
    returns the first one that accepts the whole string. There is no
    partial matching; when nothing accepts it a NoMatch is returned.
    """
    for notation in c.NOTATION_ORDER:
        try:
            value = STRING_PARSERS[notation](text)
        except ParseError:
            continue
        return ParsedColor(notation, value)
    return NoMatch(text)
