from __future__ import annotations

from adventure.config import package_root


GAME_MASTER_PROMPT = "game_master.txt"


class PromptLoadError(RuntimeError):
    pass


def load_prompt(name: str) -> str:
    """Load a prompt text file shipped in `adventure/prompt_files/`.

    Example:
        load_prompt("game_master.txt")
    """

    path = package_root() / "prompt_files" / name
    try:
        return path.read_text(encoding="utf-8").strip() + "\n"
    except FileNotFoundError as e:
        raise PromptLoadError(f"Prompt not found: {path}") from e
