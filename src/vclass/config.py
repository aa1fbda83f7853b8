"""
Konfiguration

Zentrale Konstanten und Pfade.
- Standard-Dateien liegen im Arbeitsverzeichnis (classes.txt, students.txt).
- Umgebungsvariablen können die Werte überschreiben.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

APP_TITLE = "VCLASS 1.0"

CLASSES_FILENAME = "classes.txt"
STUDENTS_FILENAME = "students.txt"

# Layout der Karten
CARD_WIDTH = 50
MIN_CARD_WIDTH = 10
CARDS_PER_ROW = 2
GUTTER = 4
CARD_BODY_ROWS = 3

CLASS_DESCRIPTION = "Manage and track your class activities."
STUDENT_DESCRIPTION = "Active participant in your classes."

ENV_CLASSES_FILE = "VCLASS_CLASSES_FILE"
ENV_STUDENTS_FILE = "VCLASS_STUDENTS_FILE"
ENV_CARD_WIDTH = "VCLASS_CARD_WIDTH"
ENV_LOG_LEVEL = "VCLASS_LOG_LEVEL"
ENV_NO_COLOR = "VCLASS_NO_COLOR"

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class RosterPaths:
    """Die beiden Quelldateien des Rosters."""
    classes_path: str = CLASSES_FILENAME
    students_path: str = STUDENTS_FILENAME


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Alle Einstellungen für einen Programmlauf."""
    paths: RosterPaths = RosterPaths()
    card_width: int = CARD_WIDTH
    log_level: str = DEFAULT_LOG_LEVEL
    color: bool = True

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> AppConfig:
        """
        Baut die Konfiguration aus Umgebungsvariablen.
        Fehlende Werte bekommen die Defaults.
        """
        if env is None:
            env = os.environ

        paths = RosterPaths(
            classes_path=env.get(ENV_CLASSES_FILE) or CLASSES_FILENAME,
            students_path=env.get(ENV_STUDENTS_FILE) or STUDENTS_FILENAME,
        )
        return cls(
            paths=paths,
            card_width=_parse_width(env.get(ENV_CARD_WIDTH)),
            log_level=_parse_log_level(env.get(ENV_LOG_LEVEL)),
            color=not env.get(ENV_NO_COLOR),
        )


def _parse_log_level(raw: Optional[str]) -> str:
    """
    Liest den Log-Level-Namen.
    Unbekannte Namen -> WARNING mit Warnung.
    """
    if not raw:
        return DEFAULT_LOG_LEVEL
    name = raw.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        logger.warning("Invalid %s=%r, using %s", ENV_LOG_LEVEL, raw, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return name


def _parse_width(raw: Optional[str]) -> int:
    """
    Liest die Kartenbreite.
    Ungültige Werte -> Default mit Warnung.
    """
    if not raw:
        return CARD_WIDTH
    try:
        width = int(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using %d", ENV_CARD_WIDTH, raw, CARD_WIDTH)
        return CARD_WIDTH
    if width < MIN_CARD_WIDTH:
        logger.warning("%s=%d is below minimum %d, using %d", ENV_CARD_WIDTH, width, MIN_CARD_WIDTH, CARD_WIDTH)
        return CARD_WIDTH
    return width
