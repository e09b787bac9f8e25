"""Text heuristics that turn connector sources into display metadata."""

from .metadata import detect_category, extract_metadata, generate_description, is_disqualified
from .titles import format_title

__all__ = [
    "detect_category",
    "extract_metadata",
    "format_title",
    "generate_description",
    "is_disqualified",
]
