"""
On-disk cache of the calendar artifacts.

Both the PDF and the extracted JSON are keyed by year and semester. A file that
exists is reused as-is; there is no staleness check.
"""
from __future__ import annotations

import json
import typing as t
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from shared.errors import ParseError
from shared.models import Calendar

DocumentState = t.Literal["absent", "downloaded", "extracted"]


def get_year_semester(now: t.Optional[datetime] = None) -> tuple[int, str]:
    """Return the current year and semester ("1" for Jan-Jun, "2" for Jul-Dec).

    Semester boundaries are the calendar halves of the year, not the
    institution's actual term dates.
    """
    now = now or datetime.now()
    semester = "1" if now.month <= 6 else "2"
    return now.year, semester


@dataclass(frozen=True)
class CalendarDocument:
    """The cached PDF/JSON pair for one semester."""
    year: int
    semester: str
    directory: str = "."

    @classmethod
    def for_date(cls, now: t.Optional[datetime] = None, directory: str = ".") -> "CalendarDocument":
        year, semester = get_year_semester(now)
        return cls(year=year, semester=semester, directory=directory)

    @property
    def identifier(self) -> str:
        return f"calendario_academico_{self.year}-{self.semester}"

    @property
    def pdf_path(self) -> Path:
        return Path(self.directory) / f"{self.identifier}.pdf"

    @property
    def json_path(self) -> Path:
        return Path(self.directory) / f"{self.identifier}.json"

    @property
    def state(self) -> DocumentState:
        if self.json_path.is_file():
            return "extracted"
        if self.pdf_path.is_file():
            return "downloaded"
        return "absent"


def load_calendar(path: t.Union[str, Path]) -> Calendar:
    """Parse a cached calendar JSON file."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return Calendar.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise ParseError(f"Arquivo de calendário inválido {path}: {e}") from e
