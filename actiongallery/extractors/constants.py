"""Fixed lookup tables used by the metadata heuristics."""

from __future__ import annotations

from ..models import ActionType

DEFAULT_EXTENSION = ".cdc"

ACTION_TYPE_LABELS: dict[ActionType, str] = {
    ActionType.SOURCE: "Source",
    ActionType.SINK: "Sink",
    ActionType.SWAPPER: "Swapper",
    ActionType.PRICE_ORACLE: "Price Oracle",
    ActionType.FLASHER: "Flash Loan",
    ActionType.CONNECTOR: "Connector",
    ActionType.UTILS: "Utilities",
}

# Ordered: the first filename substring match wins.
CATEGORY_RULES: tuple[tuple[str, str], ...] = (
    ("FungibleToken", "Token Operations"),
    ("Swap", "Swap Operations"),
    ("ERC4626", "Vault Operations"),
    ("EVM", "EVM Integration"),
    ("IncrementFi", "IncrementFi Protocol"),
    ("BandOracle", "Oracle"),
    ("Uniswap", "Uniswap Integration"),
)

DEFAULT_CATEGORY = "General"

TITLE_ACRONYMS: tuple[str, ...] = (
    "ERC4626",
    "ERC1155",
    "ERC721",
    "ERC20",
    "EVM",
    "FLOW",
    "DeFi",
    "UFix64",
    "Fix64",
    "DEX",
    "NFT",
    "DAO",
    "API",
    "URL",
    "NAV",
    "COA",
    "DFA",
    "HTTP",
    "HTTPS",
    "JSON",
    "XML",
    "HTML",
    "CSS",
)

PREFERRED_STRUCT_KEYWORDS: tuple[str, ...] = (
    "Source",
    "Sink",
    "Swapper",
    "Oracle",
    "Price",
    "Flash",
)

# (name substrings, resulting type, tag); checked in order per declaration.
TYPE_RULES: tuple[tuple[tuple[str, ...], ActionType, str], ...] = (
    (("Source",), ActionType.SOURCE, "Source"),
    (("Sink",), ActionType.SINK, "Sink"),
    (("Swapper", "Swap"), ActionType.SWAPPER, "Swap"),
    (("Oracle", "Price"), ActionType.PRICE_ORACLE, "Oracle"),
    (("Flash",), ActionType.FLASHER, "Flash Loan"),
)

# (content substrings, tag)
CONTENT_TAG_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("FungibleToken",), "FungibleToken"),
    (("ERC4626",), "ERC4626"),
    (("EVM",), "EVM"),
    (("IncrementFi", "Increment"), "IncrementFi"),
    (("Band",), "Band Protocol"),
    (("Uniswap",), "Uniswap"),
)

DISQUALIFYING_MARKERS: tuple[str, ...] = ("BETA", "NOT FINALIZED")
WARNING_MARKER = "!!!"
WARNING_MIN_LENGTH = 50
MAX_EXCLAMATION_RATIO = 0.1
MIN_DESCRIPTION_LENGTH = 20
STRUCT_LOOKBEHIND = 10
CONTRACT_DOC_SCAN_LINES = 50


__all__ = [
    "ACTION_TYPE_LABELS",
    "CATEGORY_RULES",
    "CONTENT_TAG_RULES",
    "CONTRACT_DOC_SCAN_LINES",
    "DEFAULT_CATEGORY",
    "DEFAULT_EXTENSION",
    "DISQUALIFYING_MARKERS",
    "MAX_EXCLAMATION_RATIO",
    "MIN_DESCRIPTION_LENGTH",
    "PREFERRED_STRUCT_KEYWORDS",
    "STRUCT_LOOKBEHIND",
    "TITLE_ACRONYMS",
    "TYPE_RULES",
    "WARNING_MARKER",
    "WARNING_MIN_LENGTH",
]
