"""Display transform for analysis text."""

import re

HEADING_RE = re.compile(r"^#{1,6}\s+", re.MULTILINE)
BOLD_RE = re.compile(r"\*\*")
BACKTICK_RE = re.compile(r"`")
BLANK_RUN_RE = re.compile(r"\n{3,}")


def _strip_once(text: str) -> str:
    text = HEADING_RE.sub("", text)
    text = BOLD_RE.sub("", text)
    text = BACKTICK_RE.sub("", text)
    text = BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def strip_markdown(text: str) -> str:
    """
    Remove lightweight markdown from model output.

    Drops leading heading markers, bold markers and backticks, collapses
    three or more newlines to two and trims. Every step only deletes
    characters, so repeating until nothing changes terminates and makes the
    transform idempotent.
    """
    while True:
        stripped = _strip_once(text)
        if stripped == text:
            return stripped
        text = stripped
