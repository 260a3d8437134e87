"""Text prompts for the interactive menus."""

from __future__ import annotations

from typing import Callable, Sequence

InputFunc = Callable[[str], str]


def ask(input_func: InputFunc, prompt: str) -> str:
    return input_func(prompt).strip()


def ask_yes_no(input_func: InputFunc, prompt: str) -> bool:
    """Only 'y' or 'Y' counts as yes."""
    return ask(input_func, f"{prompt} (Y/N): ").lower() == "y"


def parse_choice(raw: str, low: int, high: int) -> int | None:
    """Return raw as an int within [low, high], or None for anything else."""
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    if low <= value <= high:
        return value
    return None


def print_numbered(labels: Sequence[str], start: int = 1) -> None:
    for offset, label in enumerate(labels):
        print(f"{start + offset}. {label}")
