"""Prompt templating helpers."""
from __future__ import annotations
import re
from pathlib import Path

DEFAULT_TEMPLATE_PATH = Path(__file__).resolve().parent / "prompt_template.txt"
_PLACEHOLDER_RE = re.compile(r"\{\{(framework|prompt)\}\}")

def load_template(path: str | Path | None = None) -> str:
    """
    Load a prompt template file.

    Args:
        path: Path to template. Defaults to the packaged HTML instruction template.
    """
    return Path(path or DEFAULT_TEMPLATE_PATH).read_text(encoding="utf-8")

def render_prompt(template: str, prompt: str, framework: str | None = None) -> str:
    """
    Render the user request and framework name into the template.

    Substitution is a single pass, so placeholder-looking text inside the
    user's values is inserted verbatim and never expanded.

    Args:
        template: Template content containing {{framework}} and {{prompt}}.
        prompt: User request text.
        framework: UI framework label; None renders as an empty string.

    Returns:
        Rendered prompt.
    """
    values = {"framework": framework or "", "prompt": prompt}
    return _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], template)
