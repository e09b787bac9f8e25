"""Render pipeline: collect, enrich, build the view and produce the page."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, List, Optional, Sequence

from .collector import RecursiveCollector
from .config import GalleryConfig
from .extractors import extract_metadata
from .logging import get_logger
from .models import ConnectorRecord, Metadata
from .remote.client import GalleryError, GitHubContentsClient
from .render.html import GalleryRenderer
from .render.viewmodel import GalleryView, build_gallery_view

Extractor = Callable[..., Metadata]
Sleeper = Callable[[float], Awaitable[None]]


@dataclass
class RenderOutcome:
    """Result of one render pass."""

    html: str
    state: str
    count: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.state != "error"


class GalleryPipeline:
    """Coordinates one full fetch → enrich → render pass."""

    def __init__(
        self,
        config: GalleryConfig | None = None,
        *,
        client_factory: Callable[[], GitHubContentsClient] | None = None,
        renderer: GalleryRenderer | None = None,
        extractor: Extractor = extract_metadata,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self.config = config or GalleryConfig(root=Path.cwd())
        self._client_factory = client_factory or self._default_client
        self.renderer = renderer or GalleryRenderer(
            self.config.output.templates_dir,
            site_title=self.config.output.title,
            repo_url=self.config.source.repo_url,
        )
        self.extractor = extractor
        self._sleep = sleep
        self.logger = get_logger("pipeline")

    def _default_client(self) -> GitHubContentsClient:
        return GitHubContentsClient(
            self.config.source.api_base,
            timeout=self.config.fetch.request_timeout,
        )

    async def load_records(self) -> List[ConnectorRecord]:
        """Collect every connector and attach metadata to each one."""
        async with self._client_factory() as client:
            collector = RecursiveCollector(client, extension=self.config.source.extension)
            records = await collector.collect(self.config.source.root_path)
            if records:
                await self.enrich(client, records)
        return records

    async def enrich(self, client: GitHubContentsClient, records: Sequence[ConnectorRecord]) -> None:
        """Attach metadata in fixed-size concurrent batches with a pause between them."""
        batch_size = max(1, self.config.fetch.batch_size)
        for start in range(0, len(records), batch_size):
            batch = records[start : start + batch_size]
            self.logger.debug(
                "Enriching records %d-%d of %d", start + 1, start + len(batch), len(records)
            )
            await asyncio.gather(*(self._enrich_one(client, record) for record in batch))
            if start + batch_size < len(records):
                await self._sleep(self.config.fetch.batch_delay)

    async def _enrich_one(self, client: GitHubContentsClient, record: ConnectorRecord) -> None:
        extension = self.config.source.extension
        try:
            content = await client.fetch_text(record.download_url) if record.download_url else None
            record.metadata = self.extractor(content, record.name, extension=extension)
        except Exception as exc:
            self.logger.warning("Failed to extract metadata for %s: %s", record.name, exc)
            record.metadata = self.extractor(None, record.name, extension=extension)

    async def build_view(self) -> GalleryView | None:
        records = await self.load_records()
        if not records:
            return None
        return build_gallery_view(records)

    async def render_page(self) -> RenderOutcome:
        """Render the gallery, or the empty/error page when there is nothing to show."""
        try:
            view = await self.build_view()
        except GalleryError as exc:
            self.logger.error("Error rendering actions: %s", exc)
            return RenderOutcome(
                html=self.renderer.render_error(str(exc)), state="error", error=str(exc)
            )

        if view is None:
            self.logger.info("No connector files found under %s", self.config.source.root_path)
            return RenderOutcome(html=self.renderer.render_empty(), state="empty")

        self.logger.info("Rendered %d connector cards", view.total)
        return RenderOutcome(html=self.renderer.render(view), state="ready", count=view.total)

    def run_build(self, output: Path | None = None) -> tuple[Path, RenderOutcome]:
        """Render the gallery and write it to ``output``."""
        target = output or self.config.output.path
        outcome = asyncio.run(self.render_page())
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(outcome.html, encoding="utf-8")
        self.logger.debug("Wrote %s (%s)", target, outcome.state)
        return target, outcome


__all__ = ["GalleryPipeline", "RenderOutcome"]
