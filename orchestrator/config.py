"""Process configuration, read once from the environment at startup."""
from __future__ import annotations

import os
import typing as t
from dataclasses import dataclass

from dotenv import load_dotenv

from shared.errors import ConfigError

DEFAULT_BASE_URL = "https://fatecitapira.cps.sp.gov.br/"
DEFAULT_MODEL = "gpt-5"
DEFAULT_SCHEMA_FILE = "agent.json"

REQUIRED_VARIABLES = ("TODOIST_API_KEY", "TODOIST_SECTION_ID", "TODOIST_PROJECT_ID")


@dataclass(frozen=True)
class Settings:
    """Validated configuration passed explicitly to every step."""
    todoist_api_key: str
    todoist_section_id: str
    todoist_project_id: str
    openai_api_key: t.Optional[str] = None
    openai_model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    cache_dir: str = "."
    schema_file: str = DEFAULT_SCHEMA_FILE


def load_settings(env: t.Optional[t.Mapping[str, str]] = None) -> Settings:
    """Build ``Settings`` from the environment.

    Args:
        env: Mapping to read from. Defaults to ``os.environ`` after loading a
            ``.env`` file from the working directory, if present.

    Raises:
        ConfigError: If any required variable is missing or blank.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    missing = [name for name in REQUIRED_VARIABLES if not (env.get(name) or "").strip()]
    if missing:
        raise ConfigError(f"Variáveis de ambiente obrigatórias ausentes: {', '.join(missing)}")

    return Settings(
        todoist_api_key=env["TODOIST_API_KEY"].strip(),
        todoist_section_id=env["TODOIST_SECTION_ID"].strip(),
        todoist_project_id=env["TODOIST_PROJECT_ID"].strip(),
        openai_api_key=env.get("OPENAI_API_KEY") or None,
        openai_model=env.get("OPENAI_MODEL") or DEFAULT_MODEL,
        base_url=env.get("CALENDAR_BASE_URL") or DEFAULT_BASE_URL,
        cache_dir=env.get("CALENDAR_CACHE_DIR") or ".",
        schema_file=env.get("CALENDAR_SCHEMA_FILE") or DEFAULT_SCHEMA_FILE,
    )
