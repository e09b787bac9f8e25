"""Heuristic metadata extraction from Cadence connector sources.

The extractor never parses the Cadence grammar. It runs an ordered chain of
line-based text heuristics, each one a fallback for the previous:

1. title from the filename (see :mod:`actiongallery.extractors.titles`)
2. documentation block above a struct declaration
3. preference for structs named after an action role
4. contract-level documentation following the beta warning banner
5. a description synthesised from filename keywords
6. action type and tags from declaration names and content keywords
7. category from filename keywords

Every step degrades gracefully, so the result always carries a non-empty
title, description, type and category.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..models import ActionType, Metadata
from .constants import (
    CATEGORY_RULES,
    CONTENT_TAG_RULES,
    CONTRACT_DOC_SCAN_LINES,
    DEFAULT_CATEGORY,
    DEFAULT_EXTENSION,
    DISQUALIFYING_MARKERS,
    MAX_EXCLAMATION_RATIO,
    MIN_DESCRIPTION_LENGTH,
    PREFERRED_STRUCT_KEYWORDS,
    STRUCT_LOOKBEHIND,
    TYPE_RULES,
    WARNING_MARKER,
    WARNING_MIN_LENGTH,
)
from .titles import format_title

_STRUCT_DECLARATION_RE = re.compile(r"^(?:access\(all\)|pub)\s+struct\s+(?:interface\s+)?(\w+)")
_ACCESS_CONTRACT_RE = re.compile(r"^access\(all\)\s+contract\b")
_PUB_CONTRACT_RE = re.compile(r"^pub\s+contract\b")
_STRUCT_NAME_RE = re.compile(r"\bstruct\s+(?:interface\s+)?(\w+)")
_PUB_CONTRACT_NAME_RE = re.compile(r"\bpub\s+contract\s+(\w+)")
_DOC_PREFIX_RE = re.compile(r"^///\s*")
_BARE_NAME_RE = re.compile(r"^[A-Z][a-zA-Z]+$")


@dataclass(frozen=True)
class StructDescription:
    """Documentation text found above a struct declaration."""

    name: str
    description: str


def detect_category(file_name: str) -> str:
    """Return the first category whose keyword occurs in ``file_name``."""
    for keyword, category in CATEGORY_RULES:
        if keyword in file_name:
            return category
    return DEFAULT_CATEGORY


def extract_metadata(
    content: Optional[str],
    file_name: str,
    *,
    extension: str = DEFAULT_EXTENSION,
) -> Metadata:
    """Infer display metadata for a connector from its filename and source text."""
    metadata = Metadata(
        title=format_title(file_name, extension=extension),
        description="",
        category=detect_category(file_name),
    )

    if content:
        lines = content.split("\n")
        description = _select_struct_description(find_struct_descriptions(lines))
        if description is None:
            description = find_contract_description(lines)
        if description and is_disqualified(description):
            description = None
        metadata.description = description or ""

    # Synthesised text sees the default type; detection runs afterwards.
    if len(metadata.description) < MIN_DESCRIPTION_LENGTH:
        metadata.description = generate_description(file_name, metadata)

    if content:
        _apply_type_and_tags(metadata, content)

    return metadata


def is_disqualified(text: str) -> bool:
    """True when ``text`` looks like a warning banner rather than documentation."""
    if any(marker in text for marker in DISQUALIFYING_MARKERS):
        return True
    return exclamation_ratio(text) > MAX_EXCLAMATION_RATIO


def exclamation_ratio(text: str) -> float:
    if not text:
        return 0.0
    return text.count("!") / len(text)


def find_struct_descriptions(lines: Sequence[str]) -> List[StructDescription]:
    """Collect qualifying doc blocks above struct declarations, in source order."""
    found: List[StructDescription] = []
    for index, raw in enumerate(lines):
        match = _STRUCT_DECLARATION_RE.match(raw.strip())
        if not match:
            continue
        name = match.group(1)
        doc_lines = _doc_block_above(lines, index, name)
        if not doc_lines:
            continue
        description = " ".join(doc_lines).strip()
        if description and not is_disqualified(description):
            found.append(StructDescription(name=name, description=description))
    return found


def _doc_block_above(lines: Sequence[str], index: int, struct_name: str) -> List[str]:
    doc_lines: List[str] = []
    name_echo_seen = False
    lowest = max(0, index - STRUCT_LOOKBEHIND)

    for position in range(index - 1, lowest - 1, -1):
        line = lines[position].strip()

        if line in ("///", "//"):
            continue
        if WARNING_MARKER in line and len(line) > WARNING_MIN_LENGTH:
            break

        if line.startswith("///"):
            text = _strip_doc_prefix(line)
            if not name_echo_seen and _is_name_echo(text, struct_name):
                name_echo_seen = True
                continue
            if len(text) <= 5:
                continue
            # Before the name echo, a bare capitalised word is a heading, not prose.
            if name_echo_seen or not _BARE_NAME_RE.match(text):
                doc_lines.insert(0, text)
        elif line and not line.startswith("//"):
            break

    return doc_lines


def _is_name_echo(text: str, struct_name: str) -> bool:
    return text == struct_name or (len(text) < 30 and " " not in text)


def _select_struct_description(found: Sequence[StructDescription]) -> Optional[str]:
    if not found:
        return None
    for item in found:
        if any(keyword in item.name for keyword in PREFERRED_STRUCT_KEYWORDS):
            return item.description
    return found[0].description


def find_contract_description(lines: Sequence[str]) -> Optional[str]:
    """Return the contract doc block that follows the beta warning banner."""
    after_warning = False
    collected: List[str] = []

    for raw in lines[:CONTRACT_DOC_SCAN_LINES]:
        line = raw.strip()

        if WARNING_MARKER in line and len(line) > WARNING_MIN_LENGTH:
            after_warning = True
            continue

        if after_warning and line.startswith("///"):
            text = _strip_doc_prefix(line)
            if len(text) < 3:
                if collected:
                    break
                continue
            if not collected and _BARE_NAME_RE.match(text):
                continue
            if any(marker in text for marker in DISQUALIFYING_MARKERS):
                continue
            if len(text) > 10:
                collected.append(text)
        elif (after_warning and _ACCESS_CONTRACT_RE.match(line)) or _PUB_CONTRACT_RE.match(line):
            break
        elif collected and line and not line.startswith("//"):
            break

    if not collected:
        return None
    description = " ".join(collected).strip()
    if is_disqualified(description):
        return None
    return description


def _apply_type_and_tags(metadata: Metadata, content: str) -> None:
    # Struct names first, then legacy ``pub contract`` names, so a legacy
    # contract name has the final say on ``type``.
    names = _STRUCT_NAME_RE.findall(content) + _PUB_CONTRACT_NAME_RE.findall(content)
    for name in names:
        for keywords, action_type, tag in TYPE_RULES:
            if any(keyword in name for keyword in keywords):
                metadata.type = action_type
                metadata.add_tag(tag)
                break

    for keywords, tag in CONTENT_TAG_RULES:
        if any(keyword in content for keyword in keywords):
            metadata.add_tag(tag)


def generate_description(file_name: str, metadata: Metadata) -> str:
    """Build a generic description from filename keywords."""
    kind = metadata.type.value.lower()

    if "FungibleToken" in file_name:
        lead = f"Generic {kind} connector for FungibleToken vaults."
    elif "EVM" in file_name:
        if "Native" in file_name and "FLOW" in file_name:
            verb = "deposits" if metadata.type is ActionType.SINK else "withdraws"
            lead = f"DeFiActions connector that {verb} FLOW to/from EVM addresses as EVM-native FLOW."
        else:
            lead = "DeFiActions connector for EVM integration."
    elif "Swap" in file_name:
        lead = "DeFiActions connector for token swapping operations."
    elif "ERC4626" in file_name:
        lead = "DeFiActions connector for ERC4626 vault operations."
    elif "IncrementFi" in file_name:
        lead = "DeFiActions connector for IncrementFi protocol integration."
    elif "Band" in file_name or "Oracle" in file_name:
        lead = "DeFiActions connector for price oracle operations."
    elif "Uniswap" in file_name:
        lead = "DeFiActions connector for Uniswap integration."
    else:
        lead = f"Flow Actions {kind} connector."

    return f"{lead} Part of the {metadata.category} category."


def _strip_doc_prefix(line: str) -> str:
    return _DOC_PREFIX_RE.sub("", line).strip()


__all__ = [
    "StructDescription",
    "detect_category",
    "exclamation_ratio",
    "extract_metadata",
    "find_contract_description",
    "find_struct_descriptions",
    "generate_description",
    "is_disqualified",
]
