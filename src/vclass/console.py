"""
Konsolen-Ein-/Ausgabe

Minimale Schnittstelle für die View:
- read_line: eine Zeile lesen
- write_line: eine Zeile schreiben
- clear: Bildschirm leeren
"""

from __future__ import annotations

import os
import sys
from typing import Protocol, TextIO, Optional


class Console(Protocol):
    """Schnittstelle für Ein- und Ausgabe."""

    def read_line(self, prompt: str = "") -> str:
        ...

    def write_line(self, text: str = "") -> None:
        ...

    def clear(self) -> None:
        ...


class TerminalConsole:
    """
    Echte Konsole über input/print.
    EOFError und KeyboardInterrupt werden nicht abgefangen, das macht main.
    """

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out or sys.stdout

    def read_line(self, prompt: str = "") -> str:
        return input(prompt)

    def write_line(self, text: str = "") -> None:
        print(text, file=self._out)

    def clear(self) -> None:
        """Leert das Terminal (cls unter Windows, sonst clear)."""
        if not self._out.isatty():
            return
        os.system("cls" if os.name == "nt" else "clear")
