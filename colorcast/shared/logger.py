#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorcast/shared/logger.py

import sys
import argparse

from colorcast.core import config as c


def _supports_color(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    if _supports_color(stream):
        tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
        msg_color = c.MSG_COLORS.get(level, c.RESET)
        print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)
    else:
        print(f"[{level}] {message}", file=stream)


class ColorcastArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Overrides the default error method to use our color-coded logger,
        then exits the program with the standard CLI error code 2.
        """
        log('error', message)
        sys.exit(2)
