"""HTML page rendering for the connector gallery."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .viewmodel import RESULTS_HEADING, GalleryView

PAGE_TEMPLATE = "gallery.html.j2"
EMPTY_MESSAGE = "No actions found."
DEFAULT_ERROR_MESSAGE = "Unable to load actions. Please try again later."


class GalleryRenderer:
    """Renders a :class:`GalleryView` (or an empty/error state) into a page."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        site_title: str = "Flow Actions",
        repo_url: Optional[str] = None,
    ) -> None:
        self.templates_dir = templates_dir
        self.site_title = site_title
        self.repo_url = repo_url
        self._env = self._create_env(templates_dir)

    def render(self, view: GalleryView) -> str:
        if not view.cards:
            return self.render_empty()
        return self._render_page(state="ready", view=view)

    def render_empty(self) -> str:
        return self._render_page(state="empty", empty_message=EMPTY_MESSAGE)

    def render_error(self, message: str | None = None) -> str:
        return self._render_page(
            state="error",
            error_message=_format_reason(message) or DEFAULT_ERROR_MESSAGE,
        )

    def _render_page(
        self,
        *,
        state: str,
        view: GalleryView | None = None,
        empty_message: str | None = None,
        error_message: str | None = None,
    ) -> str:
        template = self._env.get_template(PAGE_TEMPLATE)
        return template.render(
            state=state,
            site_title=self.site_title,
            repo_url=self.repo_url,
            heading=RESULTS_HEADING,
            cards=view.cards if view else (),
            filter_labels=view.filter_labels if view else (),
            empty_message=empty_message,
            error_message=error_message,
        )

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        default_dir = str(Path(__file__).with_name("templates"))
        if default_dir not in directories:
            directories.append(default_dir)
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )


def _format_reason(reason: str | None) -> str | None:
    if not reason:
        return None
    cleaned = " ".join(reason.strip().split())
    if not cleaned:
        return None
    return cleaned[:200] + ("…" if len(cleaned) > 200 else "")


__all__ = ["GalleryRenderer"]
