# -*- coding: utf-8 -*-
"""
Structured extraction of the academic calendar with a generative model.

The PDF is sent inline (base64) together with a fixed instruction, and the
response is constrained to the JSON schema read from ``agent.json``.
"""
from __future__ import annotations

import json
import typing as t
from pathlib import Path

from openai import OpenAI, OpenAIError
from pydantic import ValidationError

from prompts import load_prompt
from shared.errors import ExternalApiError, ParseError
from shared.models import Calendar
from .pdf_utils import encode_pdf_base64

DEFAULT_MODEL = "gpt-5"
SCHEMA_NAME = "academic_calendar"

EXTRACTION_PROMPT = load_prompt("calendar_extraction_prompt")


def load_json_schema(schema_file: str) -> dict[str, t.Any]:
    """Load the JSON schema the model output is constrained to."""
    try:
        return json.loads(Path(schema_file).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ParseError(f"Falha ao ler ou parsear o arquivo de schema {schema_file}: {e}") from e


def build_messages(pdf_path: str) -> list[dict[str, t.Any]]:
    """Build the single user message carrying the instruction and the PDF."""
    pdf_base64 = encode_pdf_base64(pdf_path)
    return [
        {
            "role": "user",
            "content": [
                {"type": "text", "text": EXTRACTION_PROMPT},
                {
                    "type": "file",
                    "file": {
                        "filename": Path(pdf_path).name,
                        "file_data": f"data:application/pdf;base64,{pdf_base64}",
                    },
                },
            ],
        }
    ]


def query_model(
        pdf_path: str,
        schema: dict[str, t.Any],
        api_key: t.Optional[str],
        model: str = DEFAULT_MODEL,
        client: t.Optional[OpenAI] = None,
) -> str:
    """
    Send the PDF and the schema to the model and return its answer as pretty JSON.

    :param pdf_path: Local path of the calendar PDF.
    :param schema: JSON schema for the response.
    :param api_key: OpenAI API key; checked here rather than at startup.
    :param model: Model name.
    :param client: Optional preconfigured client (used by tests).
    :return: The response re-serialized with 2-space indentation.
    :raises ParseError: If the answer is not JSON or does not fit the calendar
        models, so nothing is cached for a malformed answer.
    """
    if client is None:
        if not api_key:
            raise ExternalApiError("A variável de ambiente OPENAI_API_KEY não está definida.")
        client = OpenAI(api_key=api_key)

    try:
        completion = client.chat.completions.create(
            model=model,
            response_format={
                "type": "json_schema",
                "json_schema": {"name": SCHEMA_NAME, "schema": schema},
            },
            messages=build_messages(pdf_path),
        )
    except OpenAIError as e:
        raise ExternalApiError(f"Erro ao chamar a API do modelo: {e}") from e

    raw = completion.choices[0].message.content
    if not raw:
        raise ParseError("A resposta do modelo veio vazia.")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseError(f"A resposta do modelo não é um JSON válido: {e}") from e
    try:
        Calendar.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"A resposta do modelo não segue o formato do calendário: {e}") from e

    return json.dumps(data, indent=2, ensure_ascii=False)


def save_calendar_json(output_file: str, content: str) -> None:
    """Write the extracted calendar to its cache file."""
    Path(output_file).write_text(content, encoding="utf-8")
