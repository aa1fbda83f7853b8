"""Shared fixtures for the vclass tests."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pytest

from vclass.config import RosterPaths
from vclass.persistence import TextRosterRepository
from vclass.service import RosterService


class ScriptedConsole:
    """Console that replays scripted input and records every written line."""

    def __init__(self, inputs: Iterable[str] = ()) -> None:
        self._inputs = list(inputs)
        self.prompts: List[str] = []
        self.lines: List[str] = []
        self.clears = 0

    def read_line(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._inputs:
            raise EOFError("script exhausted")
        return self._inputs.pop(0)

    def write_line(self, text: str = "") -> None:
        self.lines.extend(text.split("\n"))

    def clear(self) -> None:
        self.clears += 1

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def paths(tmp_path: Path) -> RosterPaths:
    return RosterPaths(
        classes_path=str(tmp_path / "classes.txt"),
        students_path=str(tmp_path / "students.txt"),
    )


@pytest.fixture
def repo(paths: RosterPaths) -> TextRosterRepository:
    return TextRosterRepository(paths)


@pytest.fixture
def service(repo: TextRosterRepository) -> RosterService:
    svc = RosterService(repo)
    svc.load()
    return svc
