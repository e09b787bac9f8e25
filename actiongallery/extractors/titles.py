"""Human-friendly titles from connector filenames."""

from __future__ import annotations

import re
from typing import List, Sequence

from .constants import DEFAULT_EXTENSION, TITLE_ACRONYMS

# Private-use code points never appear in filenames, so placeholders cannot
# collide with real text or with the case-insensitive acronym search.
_OPEN = "\ue000"
_CLOSE = "\ue001"
_PLACEHOLDER = f"{_OPEN}\\d+{_CLOSE}"
_PLACEHOLDER_RE = re.compile(_PLACEHOLDER)

_SPLIT_RULES: tuple[re.Pattern[str], ...] = (
    re.compile(r"([a-z])([A-Z])"),
    re.compile(f"({_PLACEHOLDER})([A-Z])"),
    re.compile(f"([a-z])({_PLACEHOLDER})"),
    re.compile(f"([A-Z])({_PLACEHOLDER})"),
)

_CONNECTOR_WORD_RE = re.compile(r"Connectors?")


def strip_extension(file_name: str, extension: str = DEFAULT_EXTENSION) -> str:
    if extension and file_name.endswith(extension):
        return file_name[: -len(extension)]
    return file_name


def format_title(
    file_name: str,
    *,
    extension: str = DEFAULT_EXTENSION,
    acronyms: Sequence[str] = TITLE_ACRONYMS,
) -> str:
    """Split a PascalCase filename into words while keeping acronyms intact."""
    base = strip_extension(file_name, extension)
    protected: List[str] = []

    def _protect(match: re.Match[str]) -> str:
        protected.append(match.group(0))
        return f"{_OPEN}{len(protected) - 1}{_CLOSE}"

    title = base
    for acronym in sorted(acronyms, key=len, reverse=True):
        title = re.sub(re.escape(acronym), _protect, title, flags=re.IGNORECASE)

    for rule in _SPLIT_RULES:
        title = rule.sub(r"\1 \2", title)

    title = _PLACEHOLDER_RE.sub(lambda match: protected[int(match.group(0)[1:-1])], title)

    title = _CONNECTOR_WORD_RE.sub("", title)
    title = title.replace("Increment Fi", "IncrementFi")
    title = " ".join(title.split())

    return title or base or file_name


__all__ = ["format_title", "strip_extension"]
