"""
Pydantic models for the structured academic calendar.

The JSON schema generated from ``Calendar`` is what the generative model is
constrained to, and the cached ``calendario_academico_*.json`` files are parsed
back into these models before tasks are created.
"""
from __future__ import annotations

import typing as t

from pydantic import BaseModel, Field


EventCategory = t.Literal[
    "feriado",
    "sem_aula",
    "avaliacao",
    "matricula",
    "evento_institucional",
    "reposicao",
    "outro",
]
Semester = t.Literal["1", "2"]


class CalendarEvent(BaseModel):
    """One dated entry of the academic calendar."""
    start_date: t.Optional[str] = Field(None, description="Data de início do evento (YYYY-MM-DD)")
    end_date: t.Optional[str] = Field(None, description="Data de término do evento, se for um intervalo")
    dates: t.Optional[list[str]] = Field(None, description="Lista de datas específicas")
    description: str = Field(..., description="Descrição detalhada do evento acadêmico")
    category: EventCategory = Field(..., description="Classificação do tipo de evento")
    has_class: bool = Field(..., description="Indica se há aula neste dia")
    notes: t.Optional[str] = Field(None, description="Campo opcional para observações")


class Month(BaseModel):
    month: str = Field(..., description="Nome do mês")
    events: list[CalendarEvent] = Field(..., description="Eventos ocorridos no mês")


class Summary(BaseModel):
    total_school_days: t.Optional[int] = Field(None, description="Total de dias letivos")


class Calendar(BaseModel):
    """
    Top-level extraction result for one semester.
    Months and their events keep the order in which they appear in the PDF.
    """
    institution: t.Optional[str] = Field(None, description="Nome da instituição")
    year: int = Field(..., ge=2000, le=2100, description="Ano letivo")
    semester: Semester = Field(..., description="Semestre do calendário (1 ou 2)")
    months: list[Month] = Field(..., description="Lista dos meses cobertos")
    summary: t.Optional[Summary] = None

    def iter_events(self) -> t.Iterator[CalendarEvent]:
        """Yield every event in document order."""
        for month in self.months:
            yield from month.events


def calendar_json_schema() -> dict[str, t.Any]:
    """Return the JSON schema the extraction response must conform to."""
    return Calendar.model_json_schema()
