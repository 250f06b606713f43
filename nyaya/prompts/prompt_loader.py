from pathlib import Path

from nyaya.prompts.exceptions import PromptError

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


def load_prompt_template(name: str, template_dir: Path | None = None) -> str:
    """Load a bundled prompt template by task name.

    Args:
        name: Template name without extension, e.g. ``red_flag_detection``.
        template_dir: Directory holding ``<name>.txt`` files.
                      Defaults to the bundled templates directory.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        PromptError: if the file cannot be read.
    """
    path = (template_dir or _DEFAULT_TEMPLATE_DIR) / f"{name}.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptError(f"Failed to load prompt template '{name}': {exc}") from exc
