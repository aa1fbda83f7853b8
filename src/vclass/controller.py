"""
Controller layer

Der RosterController steuert die App. Er verbindet RosterService und View.

Aufgaben:
- Roster laden
- Menü anzeigen und Eingaben verarbeiten
- Klassen/Schüler hinzufügen
- Karten über die View anzeigen
"""

from __future__ import annotations

import logging
from typing import Callable, List

from .domain import Card, PersistenceError
from .service import RosterService, class_cards, student_cards
from .view import ConsoleRosterView

logger = logging.getLogger(__name__)

QUIT = 5


class RosterController:
    """
    Hauptcontroller.

    Aufgaben:
    - Menü-Schleife
    - Aufrufe an Service und View
    - Speicherfehler melden und erneut versuchen
    """

    def __init__(self, service: RosterService, view: ConsoleRosterView) -> None:
        """
        Erstellt den Controller.

        - service: Roster laden/ändern/speichern
        - view: Ein-/Ausgabe
        """
        self._service = service
        self._view = view

    def starte_app(self) -> None:
        """
        Startet die Anwendung.

        - Daten laden
        - Menü-Schleife bis Auswahl 5
        - Footer anzeigen
        """
        self._service.load()
        self._view.render_hero()

        aktionen = {
            1: self.add_class_flow,
            2: self.add_student_flow,
            3: self.view_classes_flow,
            4: self.view_students_flow,
        }

        while True:
            self._view.render_header()
            choice = self._view.prompt_menu_choice(1, QUIT)
            if choice == QUIT:
                break
            aktionen[choice]()

        self._view.render_footer()

    def add_class_flow(self) -> None:
        """Fragt einen Klassennamen ab und legt ihn an."""
        name = self._view.prompt_name("Enter new class name: ")
        self._add("Class", self._service.add_class, name)
        self._view.pause()

    def add_student_flow(self) -> None:
        """Fragt einen Schülernamen ab und legt ihn an."""
        name = self._view.prompt_name("Enter new student name: ")
        self._add("Student", self._service.add_student, name)
        self._view.pause()

    def view_classes_flow(self) -> None:
        """Zeigt alle Klassen als Karten."""
        self._show("Classes", class_cards(self._service), "No classes available.")
        self._view.pause()

    def view_students_flow(self) -> None:
        """Zeigt alle Schüler als Karten."""
        self._show("Students", student_cards(self._service), "No students enrolled.")
        self._view.pause()

    def _add(self, label: str, add: Callable[[str], bool], name: str) -> None:
        """
        Gemeinsamer Ablauf beim Hinzufügen.
        Ein Speicherfehler beendet die Sitzung nicht.
        """
        try:
            added = add(name)
        except PersistenceError as e:
            self._view.show_message(f'\n{label} "{name}" added, but saving failed: {e}')
            self._retry_save()
            return

        if added:
            self._view.show_message(f'\n{label} "{name}" added successfully.\n')
        else:
            self._view.show_message(f'\n{label} "{name}" already exists.\n')

    def _retry_save(self) -> None:
        """
        Fragt, ob erneut gespeichert werden soll.
        Wiederholt, bis es klappt oder der Nutzer ablehnt.
        """
        while self._view.confirm("Retry saving? (y/n): "):
            try:
                self._service.save()
            except PersistenceError as e:
                self._view.show_message(f"Saving failed again: {e}")
                continue
            self._view.show_message("Data saved.\n")
            return
        logger.warning("Continuing with unsaved changes")
        self._view.show_message("Changes are kept for this session only.\n")

    def _show(self, heading: str, cards: List[Card], leer_text: str) -> None:
        if not cards:
            self._view.show_message(f"\n{leer_text}\n")
            return
        self._view.render_cards(heading, cards)
