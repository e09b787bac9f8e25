"""Core data models shared across actiongallery components."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ActionType(str, Enum):
    """Coarse role classification of a connector."""

    SOURCE = "Source"
    SINK = "Sink"
    SWAPPER = "Swapper"
    PRICE_ORACLE = "PriceOracle"
    FLASHER = "Flasher"
    CONNECTOR = "Connector"
    UTILS = "Utils"


@dataclass(frozen=True)
class DirectoryEntry:
    """Single item of a remote directory listing."""

    name: str
    path: str
    type: str
    size: int
    content_url: Optional[str]
    html_url: Optional[str]

    @property
    def is_file(self) -> bool:
        return self.type == "file"

    @property
    def is_dir(self) -> bool:
        return self.type == "dir"


@dataclass
class Metadata:
    """Display metadata inferred from a connector's filename and text."""

    title: str
    description: str
    type: ActionType = ActionType.CONNECTOR
    category: str = "General"
    tags: List[str] = field(default_factory=list)

    def add_tag(self, tag: str) -> None:
        """Append a tag unless it is already present."""
        if tag not in self.tags:
            self.tags.append(tag)


@dataclass
class ConnectorRecord:
    """A connector source file discovered in the remote tree."""

    name: str
    path: str
    url: Optional[str]
    size: int
    download_url: Optional[str]
    metadata: Optional[Metadata] = None
