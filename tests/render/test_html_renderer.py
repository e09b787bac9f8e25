"""Tests for HTML page rendering."""

from __future__ import annotations

from pathlib import Path

from actiongallery.render.html import GalleryRenderer
from actiongallery.render.viewmodel import CardView, GalleryView

DOM_IDS = (
    'id="actions-grid"',
    'id="loading"',
    'id="error-message"',
    'id="filters-container"',
    'id="filters-list"',
    'id="clear-filters"',
)


def _view() -> GalleryView:
    return GalleryView(
        cards=(
            CardView(
                title="Fungible Token <b>",
                path="connectors/FungibleTokenConnectors.cdc",
                type_label="Sink",
                description="Withdraws tokens from a vault.",
                tags=("Token Operations", "Sink"),
                url="https://github.test/FungibleTokenConnectors.cdc",
            ),
            CardView(
                title="Band Oracle",
                path="connectors/BandOracleConnectors.cdc",
                type_label="Price Oracle",
                description="Reads prices.",
                tags=("Oracle",),
                url=None,
            ),
        ),
        filter_labels=("Price Oracle", "Sink"),
    )


def test_render_contains_dom_contract_and_cards() -> None:
    html = GalleryRenderer(site_title="Flow Actions").render(_view())

    for marker in DOM_IDS:
        assert marker in html
    assert '<div class="marketplace-header">' in html
    assert html.count('class="action-card"') == 2
    assert 'data-tags="Price Oracle"' in html
    assert 'data-tag="Sink"' in html
    assert "Withdraws tokens from a vault." in html
    assert 'href="https://github.test/FungibleTokenConnectors.cdc"' in html
    assert "View on GitHub" in html


def test_render_escapes_card_text() -> None:
    html = GalleryRenderer().render(_view())

    assert "Fungible Token &lt;b&gt;" in html
    assert "Fungible Token <b>" not in html


def test_render_empty_view_shows_empty_state() -> None:
    renderer = GalleryRenderer()
    html = renderer.render(GalleryView(cards=(), filter_labels=()))

    assert "No actions found." in html
    assert 'class="action-card"' not in html
    assert 'id="filters-container" style="display: none;"' in html


def test_render_error_clears_grid_and_shows_message() -> None:
    html = GalleryRenderer().render_error("GitHub API error: 500 Internal Server Error")

    assert 'id="error-message" style="display: block;"' in html
    assert "GitHub API error: 500 Internal Server Error" in html
    assert 'class="action-card"' not in html


def test_custom_templates_dir_overrides_default(tmp_path: Path) -> None:
    (tmp_path / "gallery.html.j2").write_text(
        "{{ state }}:{{ cards | length }}:{{ heading }}", encoding="utf-8"
    )

    html = GalleryRenderer(tmp_path).render(_view())

    assert html == "ready:2:Available Actions"
