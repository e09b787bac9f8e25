"""Async client for the GitHub repository contents API."""

from __future__ import annotations

from typing import Any, List, Optional

import httpx

from ..logging import get_logger
from ..models import DirectoryEntry

DEFAULT_API_BASE = "https://api.github.com/repos/onflow/FlowActions/contents"
ACCEPT_HEADER = "application/vnd.github.v3+json"
NETWORK_ERROR_MESSAGE = (
    "Network error: Unable to connect to GitHub. Please check your internet connection."
)


class GalleryError(RuntimeError):
    """Base class for failures that abort a gallery render pass."""


class NetworkError(GalleryError):
    """Raised when the remote host cannot be reached at all."""

    def __init__(self, message: str = NETWORK_ERROR_MESSAGE) -> None:
        super().__init__(message)


class RemoteApiError(GalleryError):
    """Raised when the contents API answers with an unexpected status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


class GitHubContentsClient:
    """Lists directories and downloads raw files from a single repository."""

    def __init__(
        self,
        api_base: str = DEFAULT_API_BASE,
        *,
        timeout: Optional[float] = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_base = api_base.rstrip("/")
        self.logger = get_logger("remote")
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )

    async def __aenter__(self) -> "GitHubContentsClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    def endpoint(self, path: str) -> str:
        return f"{self.api_base}/{path.strip('/')}"

    async def list_directory(self, path: str) -> List[DirectoryEntry]:
        """Return the entries under ``path``; a missing directory lists as empty."""
        url = self.endpoint(path)
        self.logger.debug("Listing %s", url)
        try:
            response = await self._http.get(url, headers={"Accept": ACCEPT_HEADER})
        except httpx.RequestError as exc:
            raise NetworkError() from exc

        if response.status_code == 404:
            self.logger.debug("Directory %s not found; treating as empty", path)
            return []
        if not response.is_success:
            raise RemoteApiError(
                response.status_code,
                f"GitHub API error: {response.status_code} {response.reason_phrase}".rstrip(),
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteApiError(
                response.status_code, "GitHub API returned invalid JSON"
            ) from exc
        return _parse_listing(payload)

    async def fetch_text(self, url: str) -> Optional[str]:
        """Download raw file text, returning ``None`` when it cannot be fetched."""
        try:
            response = await self._http.get(url)
        except httpx.HTTPError as exc:
            self.logger.warning("Error fetching file content from %s: %s", url, exc)
            return None
        if not response.is_success:
            self.logger.debug("Content request for %s returned %d", url, response.status_code)
            return None
        return response.text


def _parse_listing(payload: Any) -> List[DirectoryEntry]:
    # A path naming a single file yields an object instead of a list.
    items = payload if isinstance(payload, list) else [payload]
    entries: List[DirectoryEntry] = []
    for item in items:
        entry = _parse_entry(item)
        if entry is not None:
            entries.append(entry)
    return entries


def _parse_entry(item: Any) -> DirectoryEntry | None:
    if not isinstance(item, dict):
        return None
    name = item.get("name")
    path = item.get("path")
    kind = item.get("type")
    if not isinstance(name, str) or not isinstance(path, str) or not isinstance(kind, str):
        return None
    size = item.get("size")
    return DirectoryEntry(
        name=name,
        path=path,
        type=kind,
        size=size if isinstance(size, int) else 0,
        content_url=_as_url(item.get("download_url")),
        html_url=_as_url(item.get("html_url")),
    )


def _as_url(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


__all__ = [
    "GalleryError",
    "GitHubContentsClient",
    "NetworkError",
    "RemoteApiError",
]
