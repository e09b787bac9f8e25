"""Tests for the pure gallery view model."""

from __future__ import annotations

from actiongallery.extractors import extract_metadata
from actiongallery.models import ActionType, ConnectorRecord, Metadata
from actiongallery.render.viewmodel import (
    CardView,
    FilterState,
    apply_filters,
    build_card,
    build_gallery_view,
    results_heading,
    truncate_description,
    type_label,
)


def _record(name: str, metadata: Metadata | None = None, path: str | None = None) -> ConnectorRecord:
    return ConnectorRecord(
        name=name,
        path=path or f"connectors/{name}",
        url=f"https://github.test/{name}",
        size=10,
        download_url=None,
        metadata=metadata,
    )


def _card(label: str) -> CardView:
    return CardView(
        title=label,
        path=f"connectors/{label}.cdc",
        type_label=label,
        description="",
        tags=(),
        url=None,
    )


def test_build_gallery_view_sorts_by_category_then_title() -> None:
    records = [
        _record("SwapConnectors.cdc", extract_metadata(None, "SwapConnectors.cdc")),
        _record("ZetaConnectors.cdc", extract_metadata(None, "ZetaConnectors.cdc")),
        _record("alphaConnectors.cdc", extract_metadata(None, "alphaConnectors.cdc")),
        _record("EVMTokenConnectors.cdc", extract_metadata(None, "EVMTokenConnectors.cdc")),
    ]

    view = build_gallery_view(records)

    assert [card.path for card in view.cards] == [
        "connectors/EVMTokenConnectors.cdc",
        "connectors/alphaConnectors.cdc",
        "connectors/ZetaConnectors.cdc",
        "connectors/SwapConnectors.cdc",
    ]
    assert view.total == 4


def test_filter_labels_are_display_mapped_and_sorted() -> None:
    records = [
        _record("A.cdc", Metadata(title="A", description="d", type=ActionType.PRICE_ORACLE)),
        _record("B.cdc", Metadata(title="B", description="d", type=ActionType.SINK)),
        _record("C.cdc", Metadata(title="C", description="d", type=ActionType.FLASHER)),
        _record("D.cdc", Metadata(title="D", description="d", type=ActionType.SINK)),
    ]

    view = build_gallery_view(records)

    assert view.filter_labels == ("Flash Loan", "Price Oracle", "Sink")


def test_build_card_truncates_and_deduplicates_tags() -> None:
    metadata = Metadata(
        title="Swap",
        description="x" * 250,
        type=ActionType.SWAPPER,
        category="Swap Operations",
        tags=["Swap", "Swap Operations", "EVM", "Uniswap"],
    )

    card = build_card(_record("SwapConnectors.cdc", metadata))

    assert len(card.description) == 200
    assert card.description.endswith("...")
    assert card.tags == ("Swap Operations", "Swap", "EVM")
    assert card.type_label == "Swapper"
    assert card.data_tags == "Swapper"


def test_build_card_without_metadata_uses_fallbacks() -> None:
    card = build_card(_record("UniswapV3Connectors.cdc"))

    assert card.title == "Uniswap V3"
    assert card.description == "Flow Action connector for Uniswap V3"
    assert card.tags == ("General",)
    assert card.type_label == "Connector"


def test_truncate_description_keeps_short_text() -> None:
    assert truncate_description("y" * 200) == "y" * 200
    assert truncate_description("y" * 201) == "y" * 197 + "..."


def test_apply_filters_with_no_active_labels_shows_everything() -> None:
    cards = [_card("Sink"), _card("Source"), _card("Swapper")]

    result = apply_filters(FilterState(), cards)

    assert result.visibility == (True, True, True)
    assert result.visible == result.total == 3
    assert result.heading == "Available Actions"


def test_apply_filters_with_one_label_matches_data_tags() -> None:
    cards = [_card("Sink"), _card("Source"), _card("Sink")]

    state = FilterState().toggle("Sink")
    result = apply_filters(state, cards)

    assert result.visibility == (True, False, True)
    assert result.visible == 2
    assert result.heading == "Available Actions (2 of 3)"


def test_filter_state_transitions() -> None:
    state = FilterState()
    assert state.is_empty

    state = state.toggle("Sink").toggle("Source")
    assert state.active == frozenset({"Sink", "Source"})

    state = state.toggle("Sink")
    assert state.active == frozenset({"Source"})

    assert state.clear().is_empty
    assert state.active == frozenset({"Source"})


def test_results_heading_and_type_label() -> None:
    assert results_heading(5, 5) == "Available Actions"
    assert results_heading(0, 5) == "Available Actions (0 of 5)"
    assert type_label(ActionType.UTILS) == "Utilities"
    assert type_label("Custom") == "Custom"
    assert type_label(None) == "Connector"
