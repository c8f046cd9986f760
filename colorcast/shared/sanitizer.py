#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorcast/shared/sanitizer.py

from typing import List, Optional, Tuple

from colorcast.core import config as c


def _strip_and_unquote(s: str) -> str:
    """Trims the string and removes matching surrounding quotes or backticks."""
    if s is None:
        return ""
    s = str(s).strip()
    while len(s) >= 2 and s[0] == s[-1] and s[0] in c.QUOTE_CHARS:
        s = s[1:-1].strip()
    return s


def strip_wrapper(text: str) -> Tuple[Optional[str], str]:
    """
    Removes a known functional wrapper such as 'rgb( ... )'.

    Returns the lower-cased wrapper name (or None when the text is bare)
    and the body between the parentheses. Unknown names like 'foo(1, 2)'
    are left untouched so that they fail field validation later.
    """
    s = _strip_and_unquote(text)
    m = c.WRAPPER_REGEX.fullmatch(s)
    if m:
        name = m.group(1).lower()
        if name in c.KNOWN_WRAPPERS:
            return name, m.group(2).strip()
    return None, s


def split_fields(body: str) -> List[str]:
    """
    Splits a color body into its fields.

    Comma-separated bodies are split on commas and every field is trimmed,
    so empty fields survive and fail validation. Otherwise the body is split
    on runs of whitespace, with '/' accepted as the CSS alpha separator
    (e.g. '255 0 0 / 0.5').
    """
    if body is None:
        return []
    if "," in body:
        return [field.strip() for field in body.strip().split(",")]
    return body.replace("/", " ").split()


def tokenize(text: str) -> Tuple[Optional[str], List[str]]:
    """Strips the wrapper and splits the remaining body in one step."""
    name, body = strip_wrapper(text)
    return name, split_fields(body)
