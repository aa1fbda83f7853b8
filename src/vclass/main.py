"""
Entry point für VClass.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import logging
import sys

from .config import AppConfig
from .console import TerminalConsole
from .controller import RosterController
from .persistence import TextRosterRepository
from .service import RosterService
from .view import ANSI, PLAIN, ConsoleRosterView


def setup_logging(level: str) -> None:
    """
    Logging auf stderr, damit es die Karten nicht stört.
    level ist ein gültiger Name aus AppConfig.
    """
    logging.basicConfig(
        level=logging.getLevelName(level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Konfiguration lesen
    - Komponenten erstellen
    - Controller starten
    """
    config = AppConfig.from_env()
    setup_logging(config.log_level)

    try:
        # Bausteine der App erstellen.
        repo = TextRosterRepository(config.paths)
        service = RosterService(repo)
        view = ConsoleRosterView(
            TerminalConsole(),
            card_width=config.card_width,
            style=ANSI if config.color else PLAIN,
        )
        controller = RosterController(service, view)

        # App starten.
        controller.starte_app()

    except (KeyboardInterrupt, EOFError):
        # Sauberer Abbruch per Strg+C oder Ende der Eingabe.
        print("\nApplication closed.")
        sys.exit(0)

    except Exception as e:
        # Unerwarteter Fehler.
        logging.getLogger(__name__).exception("Unexpected error")
        print(f"\nERROR: {e}")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
