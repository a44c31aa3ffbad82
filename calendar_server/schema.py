# -*- coding: utf-8 -*-
"""Writes the extraction JSON schema (``agent.json``) from the calendar models."""
import json
from pathlib import Path

import click
from rich.console import Console

from shared.models import calendar_json_schema

DEFAULT_SCHEMA_FILE = "agent.json"

console = Console()


def write_schema_file(output_file: str) -> Path:
    """Serialize the ``Calendar`` schema to ``output_file``, pretty-printed."""
    path = Path(output_file)
    path.write_text(json.dumps(calendar_json_schema(), indent=2, ensure_ascii=False), encoding="utf-8")
    return path


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("output_file", default=DEFAULT_SCHEMA_FILE, type=click.Path(dir_okay=False))
def main(output_file: str) -> None:
    """Generate the JSON schema used to constrain calendar extraction.

    OUTPUT_FILE: Where to write the schema (defaults to agent.json).
    """
    write_schema_file(output_file)
    console.print(f"[green]{output_file} gerado com sucesso![/green]")


if __name__ == "__main__":
    main()
