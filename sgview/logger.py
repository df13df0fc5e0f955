"""Minimal console logger with an optional debug channel."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass
class Logger:
    """Writes space-separated messages to standard output."""

    debug: bool = False

    def enable_debug(self) -> None:
        """Turn on output from :meth:`debug_print`."""
        self.debug = True

    def print(self, *args: object) -> None:
        """Write the arguments separated by single spaces, then a newline."""
        sys.stdout.write(" ".join(str(arg) for arg in args) + "\n")

    def debug_print(self, *args: object) -> None:
        """Write the arguments prefixed with ``DEBUG:`` when debugging is on."""
        if self.debug:
            sys.stdout.write("DEBUG: ")
            self.print(*args)