"""Cleanup for model-provided free text."""

import re

# Control range minus "\n", so multi-paragraph reasoning keeps its breaks
_CONTROL_CHARS = re.compile(r"[\x00-\x09\x0b-\x1f\x7f-\x9f]")


def sanitize_text(text: str | None, max_length: int = 500) -> str | None:
    """
    Drop control characters, trim, and cap at max_length (plus "...").

    None passes through unchanged.
    """
    if text is None:
        return None

    cleaned = _CONTROL_CHARS.sub("", text).strip()
    if len(cleaned) > max_length:
        return cleaned[:max_length] + "..."
    return cleaned
