"""
Domain beinhaltet die Entities + Fehler

Dieses Modul enthält nur die Fachlogik.
Es enthält keine UI- oder Datei-Logik.

- Roster und Card sind Dataclasses.
- Namen werden immer über normalize_name getrimmt.
- Duplikate sind kein Fehler, sondern ein False-Ergebnis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class VClassError(Exception):
    """Basis für alle Fehler der Anwendung."""


class EmptyNameError(VClassError, ValueError):
    """Ein Name ist nach dem Trimmen leer."""


class PersistenceError(VClassError):
    """
    Schreiben einer Datei ist fehlgeschlagen.
    Das Roster im Speicher bleibt trotzdem gültig.
    """

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        self.path = path
        self.cause = cause
        msg = f"Could not save '{path}'"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)


def normalize_name(raw: str) -> str:
    """
    Entfernt Leerzeichen am Anfang und Ende.
    Wird von Laden, Hinzufügen und Eingabe gemeinsam genutzt.
    """
    return raw.strip()


@dataclass(slots=True)
class Roster:
    """
    Die beiden Namenslisten.
    - Reihenfolge = Reihenfolge beim Hinzufügen
    - Keine Duplikate innerhalb einer Liste (Groß/Klein wird unterschieden)
    """
    classes: List[str] = field(default_factory=list)
    students: List[str] = field(default_factory=list)

    def add_class(self, name: str) -> bool:
        """Hängt eine Klasse an. False, wenn sie schon existiert."""
        return self._append_unique(self.classes, name)

    def add_student(self, name: str) -> bool:
        """Hängt einen Schüler an. False, wenn er schon existiert."""
        return self._append_unique(self.students, name)

    @staticmethod
    def _append_unique(target: List[str], name: str) -> bool:
        """
        Prüft und hängt an.
        - Leerer Name -> EmptyNameError
        - Name vorhanden -> False, keine Änderung
        """
        clean = normalize_name(name)
        if not clean:
            raise EmptyNameError("Name must not be empty.")
        if clean in target:
            return False
        target.append(clean)
        return True


@dataclass(frozen=True, slots=True)
class Card:
    """
    Eine Karte für die Anzeige.
    Wird für jede Ansicht neu gebaut und nie gespeichert.
    """
    title: str
    body: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Maximal 3 Beschreibungszeilen."""
        if len(self.body) > 3:
            raise ValueError(f"body darf höchstens 3 Zeilen haben, hat aber {len(self.body)}.")
