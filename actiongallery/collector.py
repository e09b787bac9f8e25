"""Recursive discovery of connector files in the remote tree."""

from __future__ import annotations

from typing import List, Protocol, Sequence

from .logging import get_logger
from .models import ConnectorRecord, DirectoryEntry


class DirectoryLister(Protocol):
    async def list_directory(self, path: str) -> Sequence[DirectoryEntry]:
        ...


class RecursiveCollector:
    """Walks a remote directory tree depth-first and keeps matching files."""

    def __init__(self, lister: DirectoryLister, *, extension: str = ".cdc") -> None:
        self.lister = lister
        self.extension = extension
        self.logger = get_logger("collector")

    async def collect(self, root_path: str) -> List[ConnectorRecord]:
        """Return records for every matching file under ``root_path``.

        Listing errors at the root propagate; errors in a subdirectory are
        logged and that subtree is skipped.
        """
        entries = await self.lister.list_directory(root_path)
        records = await self._walk_entries(entries)
        self.logger.info("Collected %d connector files under %s", len(records), root_path)
        return records

    async def _walk_entries(self, entries: Sequence[DirectoryEntry]) -> List[ConnectorRecord]:
        records: List[ConnectorRecord] = []
        for entry in entries:
            if entry.is_file and entry.name.endswith(self.extension):
                records.append(_to_record(entry))
            elif entry.is_dir:
                records.extend(await self._collect_subdirectory(entry.path))
        return records

    async def _collect_subdirectory(self, path: str) -> List[ConnectorRecord]:
        try:
            entries = await self.lister.list_directory(path)
        except Exception as exc:
            self.logger.warning("Error fetching from %s: %s", path, exc)
            return []
        return await self._walk_entries(entries)


def _to_record(entry: DirectoryEntry) -> ConnectorRecord:
    return ConnectorRecord(
        name=entry.name,
        path=entry.path,
        url=entry.html_url,
        size=entry.size,
        download_url=entry.content_url,
    )


__all__ = ["DirectoryLister", "RecursiveCollector"]
