"""Console helpers shared by the orchestrator modules."""
import json
import typing as t

from rich.console import Console
from rich.json import JSON
from rich.panel import Panel

console = Console()
error_console = Console(stderr=True)


def display_json(title: str, data: t.Any) -> None:
    """Print JSON data inside a titled panel."""
    console.print(Panel(JSON(json.dumps(data, indent=2, ensure_ascii=False)), title=title, border_style="blue"))


def summary_line(created: int) -> str:
    return f"{created} tasks criadas no Todoist!"
