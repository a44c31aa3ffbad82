"""Shared fixtures for the calendar sync tests."""
import json
import typing as t

import pytest

from orchestrator.config import Settings
from tests.helpers import build_minimal_pdf


@pytest.fixture
def minimal_pdf() -> bytes:
    return build_minimal_pdf()


@pytest.fixture
def calendar_data() -> dict[str, t.Any]:
    """One month with one past and two upcoming events relative to 2025-06-10."""
    return {
        "institution": "Fatec Itapira",
        "year": 2025,
        "semester": "1",
        "months": [
            {
                "month": "Junho",
                "events": [
                    {
                        "start_date": "2025-06-09",
                        "description": "Prova P1",
                        "category": "avaliacao",
                        "has_class": True,
                    },
                    {
                        "start_date": "2025-06-10",
                        "description": "Prova P2",
                        "category": "avaliacao",
                        "has_class": True,
                    },
                    {
                        "start_date": "2025-07-01",
                        "end_date": "2025-07-31",
                        "description": "Férias escolares",
                        "category": "sem_aula",
                        "has_class": False,
                        "notes": "Recesso de julho",
                    },
                ],
            }
        ],
        "summary": {"total_school_days": 100},
    }


@pytest.fixture
def calendar_json(calendar_data) -> str:
    return json.dumps(calendar_data, indent=2, ensure_ascii=False)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        todoist_api_key="todoist-test-key",
        todoist_section_id="section-1",
        todoist_project_id="project-1",
        openai_api_key="sk-test",
        base_url="https://faculdade.example.edu/",
        cache_dir=str(tmp_path),
        schema_file=str(tmp_path / "agent.json"),
    )
