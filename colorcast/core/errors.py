#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorcast/core/errors.py


class ColorError(ValueError):
    """Base class for every color string failure."""


class ParseError(ColorError):
    """A string does not satisfy the grammar of one notation."""

    def __init__(self, notation: str, text: str, reason: str = ""):
        self.notation = notation
        self.text = text
        self.reason = reason
        message = f"can't parse {notation} string '{text}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DecodeError(ColorError):
    """A hexadecimal fragment is malformed."""

    def __init__(self, fragment: str):
        self.fragment = fragment
        super().__init__(f"invalid hex fragment '{fragment}'")
