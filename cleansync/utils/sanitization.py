import re
from typing import Optional

CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


def validate_and_sanitize_input(value: Optional[str], max_length: int = 500) -> str:
    """
    Clean free text a client typed (supply items, booking notes) before storing it.

    Drops control characters and trims whitespace; nothing is HTML-escaped.
    Empty input comes back as "".

    Raises:
        ValueError: If the cleaned text is longer than `max_length`
    """
    text = CONTROL_CHARS.sub("", str(value or "")).strip()
    if len(text) > max_length:
        raise ValueError(f"Text is longer than {max_length} characters")
    return text
