"""
Application/Use-Case layer

Der RosterService verwaltet das Roster für eine Sitzung.
Er lädt einmal beim Start und speichert nach jeder erfolgreichen Änderung.
Außerdem baut er die Karten (ViewModel) für die Ansicht.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .config import CLASS_DESCRIPTION, STUDENT_DESCRIPTION
from .domain import Card, Roster, normalize_name
from .persistence import RosterRepository

logger = logging.getLogger(__name__)


class RosterService:
    """
    Roster Store.

    - Das Roster im Speicher ist die Wahrheit für die Sitzung.
    - Schlägt das Speichern fehl, bleibt der neue Name im Speicher und
      PersistenceError geht an den Aufrufer.
    """

    def __init__(self, repo: RosterRepository) -> None:
        self._repo = repo
        self._roster: Optional[Roster] = None

    def load(self) -> Roster:
        """
        Lädt das Roster aus dem Repository.
        """
        self._roster = self._repo.lade()
        return self._roster

    @property
    def roster(self) -> Roster:
        """Das aktuelle Roster. Lädt beim ersten Zugriff."""
        if self._roster is None:
            return self.load()
        return self._roster

    def add_class(self, name: str) -> bool:
        """
        Fügt eine Klasse hinzu.
        - True: neu angelegt und gespeichert
        - False: existiert schon, nichts geändert
        """
        return self._add(self.roster.add_class, "class", name)

    def add_student(self, name: str) -> bool:
        """
        Fügt einen Schüler hinzu.
        Gleiche Regeln wie add_class.
        """
        return self._add(self.roster.add_student, "student", name)

    def list_classes(self) -> Tuple[str, ...]:
        """Snapshot der Klassen in Einfügereihenfolge."""
        return tuple(self.roster.classes)

    def list_students(self) -> Tuple[str, ...]:
        """Snapshot der Schüler in Einfügereihenfolge."""
        return tuple(self.roster.students)

    def save(self) -> None:
        """
        Schreibt beide Listen komplett.
        Wird nach jeder Änderung und beim erneuten Versuch genutzt.
        """
        self._repo.speichere(self.roster)

    def _add(self, append, kind: str, name: str) -> bool:
        """Gemeinsamer Ablauf für beide Listen."""
        if not append(name):
            logger.debug("Duplicate %s %r rejected", kind, name)
            return False

        logger.info("Added %s %r", kind, normalize_name(name))
        self.save()
        return True


def build_cards(names: Sequence[str], description: str) -> List[Card]:
    """
    Baut eine Karte pro Name.
    Alle Karten bekommen dieselbe Beschreibung.
    """
    return [Card(title=n, body=(description,)) for n in names]


def class_cards(service: RosterService) -> List[Card]:
    """Karten für die Klassen-Ansicht."""
    return build_cards(service.list_classes(), CLASS_DESCRIPTION)


def student_cards(service: RosterService) -> List[Card]:
    """Karten für die Schüler-Ansicht."""
    return build_cards(service.list_students(), STUDENT_DESCRIPTION)
