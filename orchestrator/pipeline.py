"""
The extraction-and-sync pipeline.

Steps run strictly in sequence; blocking calls (HTTP via requests, the model
call, file I/O) are pushed to a worker thread so the event loop only ever
waits on one thing at a time.
"""
from __future__ import annotations

import asyncio
import typing as t
from datetime import datetime

from calendar_server.extractor import load_json_schema, query_model, save_calendar_json
from calendar_server.pdf_utils import download_calendar
from shared.errors import CalendarSyncError
from tasks_server.client import TodoistClient
from .cache import CalendarDocument, load_calendar
from .config import Settings
from .reconciler import ReconcileResult, reconcile_tasks
from .utils import console, error_console, summary_line


async def extract_academic_calendar(
        settings: Settings,
        now: t.Optional[datetime] = None,
) -> CalendarDocument:
    """Make sure the current semester's calendar is downloaded and extracted.

    Returns:
        The document; its JSON artifact exists when this returns.
    """
    console.print("Iniciando processo de extração do calendário...")

    document = CalendarDocument.for_date(now, settings.cache_dir)
    console.print(f"Ano: {document.year}, Semestre: {document.semester}")

    if document.pdf_path.is_file():
        console.print(f"Arquivo PDF já existente: {document.pdf_path}")
    else:
        console.print(f"PDF não encontrado. Baixando de {settings.base_url}...")
        try:
            calendar_url, page_count = await asyncio.to_thread(
                download_calendar, settings.base_url, str(document.pdf_path)
            )
        except CalendarSyncError:
            error_console.print(f"[red]Falha ao baixar o calendário de {settings.base_url}[/red]")
            raise
        console.print(f"Link do calendário encontrado: {calendar_url}")
        console.print(f"Calendário salvo como: {document.pdf_path} ({page_count} páginas)")

    if document.json_path.is_file():
        console.print(f"Arquivo JSON do calendário já existe: {document.json_path}")
        return document

    try:
        schema = load_json_schema(settings.schema_file)
    except CalendarSyncError:
        error_console.print(f"[red]Falha ao carregar o schema {settings.schema_file}[/red]")
        raise
    console.print(f"JSON schema carregado de {settings.schema_file}.")

    console.print("Enviando PDF para o modelo. Isso pode levar um momento...")
    try:
        content = await asyncio.to_thread(
            query_model,
            str(document.pdf_path),
            schema,
            settings.openai_api_key,
            settings.openai_model,
        )
    except CalendarSyncError:
        error_console.print(f"[red]Falha na extração de {document.pdf_path}[/red]")
        raise
    console.print("Dados extraídos pelo modelo.")

    await asyncio.to_thread(save_calendar_json, str(document.json_path), content)
    console.print(f"Dados do calendário salvos em: {document.json_path}")
    console.print("Processo concluído com sucesso!")
    return document


async def sync_calendar(
        settings: Settings,
        now: t.Optional[datetime] = None,
        client: t.Optional[TodoistClient] = None,
) -> ReconcileResult:
    """Run the whole pipeline: extract (or reuse) the calendar, then rebuild the section."""
    now = now or datetime.now()
    document = await extract_academic_calendar(settings, now)
    calendar = load_calendar(document.json_path)

    client = client or TodoistClient(settings.todoist_api_key)
    async with client:
        result = await reconcile_tasks(
            client,
            calendar,
            project_id=settings.todoist_project_id,
            section_id=settings.todoist_section_id,
            today=now.date(),
        )

    console.print(summary_line(result.created_count))
    return result
