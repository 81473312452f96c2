from pathlib import Path

from pdfsummary.summarization.exceptions import SummarizationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the user prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled summary_prompt.txt.

    Returns:
        The raw template string with a ``{text}`` placeholder.

    Raises:
        SummarizationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "summary_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").rstrip("\n")
    except OSError as exc:
        raise SummarizationError(f"Failed to load prompt template: {exc}") from exc


def load_system_prompt(path: Path | None = None) -> str:
    """Load the system instruction from a file.

    Raises:
        SummarizationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "system_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise SummarizationError(f"Failed to load system prompt: {exc}") from exc
