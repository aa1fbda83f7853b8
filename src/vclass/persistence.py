"""
Persistence layer (Textdateien)

Das Roster wird in zwei einfachen Textdateien gespeichert, ein Name pro Zeile.
Die Domain selbst bleibt frei von Datei-Details.
- RosterRepository: Schnittstelle (lade / speichere)
- FileStorage: Zeilenweises Lesen und Schreiben
- TextRosterRepository: Datei-Repository für classes + students

Fehlerbehandlung:
- Fehlende oder unlesbare Datei beim Laden -> leere Liste.
- Fehler beim Schreiben -> PersistenceError.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Protocol

from .config import RosterPaths
from .domain import PersistenceError, Roster, normalize_name

logger = logging.getLogger(__name__)


class RosterRepository(Protocol):
    """
    Schnittstelle für Persistenz.
    """
    def lade(self) -> Roster:
        """Lädt das Roster."""
        ...

    def speichere(self, roster: Roster) -> None:
        """Speichert das Roster."""
        ...


class FileStorage:
    """
    Klasse für Dateihandling beim Laden und Speichern.
    - Nur lesen/schreiben.
    - UTF-8 wird fest genutzt.
    """

    def read_all_lines(self, pfad: str) -> List[str]:
        """
        Liest eine Datei zeilenweise.
        Fehlerbehandlung:
        - FileNotFoundError, wenn Datei fehlt
        - OSError bei Leseproblemen
        Getrennt wird nur an LF, andere Umbrüche (\\x0c, \\u2028, ...) bleiben Teil des Namens.
        """
        with open(pfad, "r", encoding="utf-8", newline="\n") as f:
            return f.read().split("\n")

    def write_all_lines(self, pfad: str, lines: Iterable[str]) -> None:
        """
        Schreibt alle Zeilen neu (truncate + rewrite).
        Jede Zeile endet mit einem Zeilenumbruch.
        """
        with open(pfad, "w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line + "\n")


class TextRosterRepository:
    """
    Repository für die beiden Textdateien.
    - FileStorage für Datei-Zugriff
    - RosterPaths für die Dateinamen
    """

    def __init__(self, paths: RosterPaths, storage: Optional[FileStorage] = None) -> None:
        """
        Erstellt das Repository.
        """
        self._paths = paths
        self._storage = storage or FileStorage()

    def lade(self) -> Roster:
        """
        Lädt beide Dateien.
        Keine Duplikatprüfung, die Daten wurden schon beim Schreiben geprüft.
        """
        roster = Roster(
            classes=self._lade_liste(self._paths.classes_path),
            students=self._lade_liste(self._paths.students_path),
        )
        logger.debug(
            "Loaded %d classes and %d students",
            len(roster.classes),
            len(roster.students),
        )
        return roster

    def speichere(self, roster: Roster) -> None:
        """
        Schreibt beide Dateien komplett neu.
        Kein atomares Umbenennen: ein abgebrochener Schreibvorgang kann eine Datei halb leer lassen.
        """
        self._schreibe_liste(self._paths.classes_path, roster.classes)
        self._schreibe_liste(self._paths.students_path, roster.students)

    def _lade_liste(self, pfad: str) -> List[str]:
        """Liest eine Datei, trimmt jede Zeile und überspringt leere Zeilen."""
        try:
            raw_lines = self._storage.read_all_lines(pfad)
        except FileNotFoundError:
            logger.debug("Source %s not found, starting empty", pfad)
            return []
        except (OSError, UnicodeDecodeError) as e:
            # Unlesbar zählt wie fehlend.
            logger.warning("Could not read %s (%s), starting empty", pfad, e)
            return []

        names: List[str] = []
        for line in raw_lines:
            name = normalize_name(line)
            if name:
                names.append(name)
        return names

    def _schreibe_liste(self, pfad: str, names: List[str]) -> None:
        """Schreibt eine Liste. OSError wird zu PersistenceError."""
        try:
            self._storage.write_all_lines(pfad, names)
        except OSError as e:
            logger.error("Could not write %s: %s", pfad, e)
            raise PersistenceError(pfad, e) from e
