"""ILearnCom utilities."""

from .prompt_loader import load_prompt, format_prompt

__all__ = [
    "load_prompt",
    "format_prompt",
]
