"""
Prompt loader utility for ILearnCom.

Prompt texts (tutor persona, fallback replies, illustration template) live
as YAML files in the packaged prompts/ directory.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any
import yaml


PROMPTS_DIR = Path(__file__).parent.parent / "prompts"


@lru_cache(maxsize=None)
def _read_prompt_file(file_path: Path) -> dict[str, Any]:
    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Prompt file must contain a mapping: {file_path}")
    return data


def load_prompt(
    name: str,
    required: tuple[str, ...] = (),
    prompts_dir: Path | None = None,
) -> dict[str, Any]:
    """
    Load a prompt template by name.

    Args:
        name: Prompt name without .yaml extension (e.g., "tutor_chat")
        required: Top-level keys the caller depends on
        prompts_dir: Optional custom prompts directory

    Returns:
        Parsed YAML mapping (a fresh copy; the file is read once per process)

    Raises:
        FileNotFoundError: If prompt file doesn't exist
        KeyError: If a required key is missing
    """
    file_path = (prompts_dir or PROMPTS_DIR) / f"{name}.yaml"
    if not file_path.exists():
        raise FileNotFoundError(f"Prompt template not found: {file_path}")

    data = dict(_read_prompt_file(file_path))
    missing = [key for key in required if key not in data]
    if missing:
        raise KeyError(f"Prompt '{name}' is missing keys: {missing}")
    return data


def format_prompt(template: str, **kwargs) -> str:
    """Fill {placeholders}, collapsing the YAML block's line breaks."""
    return " ".join(template.format(**kwargs).split())
