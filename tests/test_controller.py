"""Tests for vclass.controller — menu flows end to end."""

from __future__ import annotations

from pathlib import Path

from vclass.config import RosterPaths
from vclass.controller import RosterController
from vclass.domain import PersistenceError, Roster
from vclass.service import RosterService
from vclass.view import PLAIN, ConsoleRosterView

from conftest import ScriptedConsole


def run(service: RosterService, inputs) -> ScriptedConsole:
    console = ScriptedConsole(inputs)
    RosterController(service, ConsoleRosterView(console, style=PLAIN)).starte_app()
    return console


class FlakyRepository:
    """Fails the first ``failures`` saves."""

    def __init__(self, failures: int) -> None:
        self.failures = failures
        self.saves = 0

    def lade(self) -> Roster:
        return Roster()

    def speichere(self, roster: Roster) -> None:
        if self.failures:
            self.failures -= 1
            raise PersistenceError("students.txt", OSError("disk full"))
        self.saves += 1


class TestMenu:

    def test_quit_shows_footer(self, service: RosterService) -> None:
        console = run(service, ["5"])
        assert "WELCOME TO VCLASS" in console.output
        assert "VClass Virtual Classroom" in console.output

    def test_add_class_and_duplicate(self, service: RosterService, paths: RosterPaths) -> None:
        console = run(service, ["1", "Algebra I", "", "1", " Algebra I ", "", "5"])

        assert 'Class "Algebra I" added successfully.' in console.lines
        assert 'Class "Algebra I" already exists.' in console.lines
        assert Path(paths.classes_path).read_text(encoding="utf-8") == "Algebra I\n"

    def test_add_student_reprompts_on_empty(self, service: RosterService) -> None:
        console = run(service, ["2", "", "Ada", "", "5"])

        assert "Input cannot be empty. Try again." in console.lines
        assert service.list_students() == ("Ada",)

    def test_view_empty_lists(self, service: RosterService) -> None:
        console = run(service, ["3", "", "4", "", "5"])

        assert "No classes available." in console.lines
        assert "No students enrolled." in console.lines

    def test_view_classes_grid(self, service: RosterService) -> None:
        for name in ("Math", "Art", "Music"):
            service.add_class(name)

        console = run(service, ["3", "", "5"])

        assert "--- Classes ---" in console.lines
        start = console.lines.index("--- Classes ---") + 1
        assert "Math" in console.lines[start + 1] and "Art" in console.lines[start + 1]
        assert "Music" in console.lines[start + 9]
        assert "Manage and track your class activities." in console.output

    def test_view_students_description(self, service: RosterService) -> None:
        service.add_student("Grace")
        console = run(service, ["4", "", "5"])
        assert "Active participant in your classes." in console.output

    def test_loads_existing_data(self, paths: RosterPaths, repo) -> None:
        Path(paths.classes_path).write_text("Biology\n", encoding="utf-8")
        service = RosterService(repo)

        console = run(service, ["3", "", "5"])

        assert "Biology" in console.output


class TestSaveFailure:

    def test_retry_succeeds(self) -> None:
        repo = FlakyRepository(failures=1)
        service = RosterService(repo)

        console = run(service, ["2", "Ada", "y", "", "5"])

        assert any("saving failed" in line for line in console.lines)
        assert "Data saved." in console.lines
        assert repo.saves == 1
        assert service.list_students() == ("Ada",)

    def test_decline_retry_keeps_session(self) -> None:
        repo = FlakyRepository(failures=5)
        service = RosterService(repo)

        console = run(service, ["2", "Ada", "n", "", "4", "", "5"])

        assert "Changes are kept for this session only." in console.lines
        assert "Ada" in console.output
        assert repo.saves == 0
