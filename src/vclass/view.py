"""
UI layer für die Console

Diese View zeigt das Roster in der Konsole.
- Karten als Rahmen-Blöcke bauen (reine Funktionen)
- Karten im Raster (2 pro Zeile) anordnen
- Menü, Meldungen und Eingaben anzeigen

Breiten werden immer am reinen Text gemessen.
Farben/Fettdruck kommen erst danach dazu.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .config import APP_TITLE, CARD_BODY_ROWS, CARD_WIDTH, CARDS_PER_ROW, GUTTER
from .console import Console
from .domain import Card, normalize_name

ELLIPSIS = "..."


@dataclass(frozen=True, slots=True)
class TextStyle:
    """
    ANSI-Codes für die Hervorhebung.
    Leere Codes = keine Farbe.
    """
    bold_code: str = ""
    muted_code: str = ""
    reset_code: str = ""

    def bold(self, text: str) -> str:
        if not self.bold_code:
            return text
        return f"{self.bold_code}{text}{self.reset_code}"

    def muted(self, text: str) -> str:
        if not self.muted_code:
            return text
        return f"{self.muted_code}{text}{self.reset_code}"


PLAIN = TextStyle()
# #6b7280 neutral gray
ANSI = TextStyle(bold_code="\033[1m", muted_code="\033[38;2;107;114;128m", reset_code="\033[0m")


def truncate(text: str, limit: int) -> str:
    """
    Kürzt Text auf limit Zeichen.
    Zu lang -> die ersten limit-3 Zeichen + "...".
    """
    if len(text) <= limit:
        return text
    return text[: max(0, limit - len(ELLIPSIS))] + ELLIPSIS


def center_padding(length: int, inner: int) -> tuple[int, int]:
    """
    Padding links/rechts für zentrierten Text.
    - Bei ungerader Differenz bekommt rechts das größere Stück.
    - Nie negativ.
    """
    total = max(0, inner - length)
    left = total // 2
    return left, total - left


def render_card(card: Card, width: int = CARD_WIDTH, style: TextStyle = PLAIN) -> List[str]:
    """
    Baut eine Karte mit genau 7 Zeilen.

    Aufbau:
    - Rahmen oben
    - Titel (zentriert, fett)
    - Leerzeile
    - 3 Zeilen Beschreibung (zu lange Zeilen werden gekürzt)
    - Rahmen unten
    """
    inner = width - 2
    body_width = width - 3

    top = style.muted("╭" + "_" * inner + "╮")
    bottom = style.muted("╰" + "_" * inner + "╯")
    blank = "│" + " " * inner + "│"

    # Zu lange Titel werden wie Beschreibungen gekürzt.
    title = truncate(card.title, inner)
    left, right = center_padding(len(title), inner)
    title_row = "│" + " " * left + style.bold(title) + " " * right + "│"

    rows = [top, title_row, blank]
    for i in range(CARD_BODY_ROWS):
        if i < len(card.body):
            content = truncate(card.body[i], body_width)
            rows.append("│ " + content.ljust(body_width) + "│")
        else:
            rows.append(blank)
    rows.append(bottom)
    return rows


def render_grid(
    cards: Sequence[Card],
    width: int = CARD_WIDTH,
    style: TextStyle = PLAIN,
    per_row: int = CARDS_PER_ROW,
) -> List[str]:
    """
    Ordnet Karten im Raster an.
    - Reihenfolge bleibt wie übergeben.
    - Karten einer Gruppe stehen nebeneinander, getrennt durch 4 Leerzeichen.
    - Nach jeder Gruppe folgt eine Leerzeile.
    - Eine letzte, halbe Gruppe bekommt keine Platzhalter-Karte.
    """
    gutter = " " * GUTTER
    lines: List[str] = []

    for start in range(0, len(cards), per_row):
        group = [render_card(c, width, style) for c in cards[start:start + per_row]]
        for row_parts in zip(*group):
            lines.append(gutter.join(row_parts))
        lines.append("")

    return lines


class ConsoleRosterView:
    """
    View für die Konsole.
    Nutzt eine Console für Ein- und Ausgabe.
    """

    def __init__(self, console: Console, card_width: int = CARD_WIDTH, style: TextStyle = ANSI) -> None:
        self._console = console
        self._card_width = card_width
        self._style = style

    def render_hero(self) -> None:
        """Begrüßung beim Start."""
        self._write(self._style.bold("\n======================== WELCOME TO VCLASS ========================\n"))
        self._write(self._style.muted("Create and manage your virtual classes and students with ease.\n"))

    def render_header(self) -> None:
        """Leert den Bildschirm und zeigt Titel und Menü."""
        self._console.clear()
        self._write(self._style.bold(
            "=============================================\n"
            f"{APP_TITLE:^45}\n"
            "============================================="
        ))
        self._write()
        self._write(self._style.muted(
            "1. Add Class     2. Add Student     3. View Classes\n"
            "4. View Students 5. Quit"
        ))
        self._write()

    def render_footer(self) -> None:
        """Abschluss beim Beenden."""
        self._write(self._style.muted(
            "====================================================================\n"
            "                   © 2024 VClass Virtual Classroom                  \n"
            "===================================================================="
        ))
        self._write()

    def render_cards(self, heading: str, cards: Sequence[Card]) -> None:
        """Zeigt eine Überschrift und das Karten-Raster."""
        self._write(f"\n--- {heading} ---")
        self.write_lines(render_grid(cards, self._card_width, self._style))

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._write(line)

    def prompt_menu_choice(self, low: int = 1, high: int = 5) -> int:
        """
        Fragt die Menü-Auswahl ab.
        Wiederholt, bis eine Zahl im Bereich kommt.
        """
        raw = self._console.read_line(f"Choose an option ({low}-{high}): ")
        while True:
            try:
                choice = int(raw.strip())
            except ValueError:
                choice = None
            if choice is not None and low <= choice <= high:
                return choice
            raw = self._console.read_line(f"Invalid input. Enter {low}-{high}: ")

    def prompt_name(self, frage: str) -> str:
        """
        Fragt einen nicht-leeren Namen ab.
        Das Ergebnis ist getrimmt.
        """
        while True:
            name = normalize_name(self._console.read_line(frage))
            if name:
                return name
            self._write("Input cannot be empty. Try again.")

    def confirm(self, frage: str) -> bool:
        """Ja/Nein-Frage."""
        antwort = self._console.read_line(frage).strip().lower()
        return antwort in ("y", "yes", "j", "ja")

    def pause(self) -> None:
        self._console.read_line("Press Enter to continue...")

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        self._write(text)

    def _write(self, text: str = "") -> None:
        self._console.write_line(text)
