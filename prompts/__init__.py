"""Instruction texts sent to the generative model, stored as ``<name>.txt`` beside this module."""
from pathlib import Path

PROMPTS_DIR = Path(__file__).resolve().parent


def load_prompt(prompt_name: str) -> str:
    """Return the text of ``<prompt_name>.txt``, trailing newline removed.

    Raises:
        FileNotFoundError: If no such prompt ships with the package.
    """
    prompt_file = PROMPTS_DIR / f"{prompt_name}.txt"
    if not prompt_file.is_file():
        raise FileNotFoundError(f"Prompt file not found: {prompt_file}")
    return prompt_file.read_text(encoding="utf-8").rstrip()
