"""Display-independent gallery model: ordering, cards and filter state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Sequence

from ..extractors.constants import ACTION_TYPE_LABELS, DEFAULT_CATEGORY
from ..extractors.titles import format_title
from ..models import ActionType, ConnectorRecord, Metadata

MAX_DESCRIPTION_LENGTH = 200
TRUNCATED_DESCRIPTION_LENGTH = 197
MAX_CARD_TAGS = 3
RESULTS_HEADING = "Available Actions"


@dataclass(frozen=True)
class CardView:
    """Fields rendered for a single connector card."""

    title: str
    path: str
    type_label: str
    description: str
    tags: tuple[str, ...]
    url: str | None

    @property
    def data_tags(self) -> str:
        # Filtering matches on the badge label only.
        return self.type_label


@dataclass(frozen=True)
class GalleryView:
    """Everything the display layer needs for one page."""

    cards: tuple[CardView, ...]
    filter_labels: tuple[str, ...]

    @property
    def total(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class FilterState:
    """Active type-filter labels; every transition returns a new state."""

    active: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not self.active

    def toggle(self, label: str) -> "FilterState":
        if label in self.active:
            return FilterState(self.active - {label})
        return FilterState(self.active | {label})

    def clear(self) -> "FilterState":
        return FilterState()


@dataclass(frozen=True)
class FilterResult:
    """Per-card visibility produced by :func:`apply_filters`."""

    visibility: tuple[bool, ...]

    @property
    def visible(self) -> int:
        return sum(1 for shown in self.visibility if shown)

    @property
    def total(self) -> int:
        return len(self.visibility)

    @property
    def heading(self) -> str:
        return results_heading(self.visible, self.total)


def type_label(action_type: ActionType | str | None) -> str:
    """Map an action type onto its badge label."""
    if action_type is None:
        return ACTION_TYPE_LABELS[ActionType.CONNECTOR]
    try:
        return ACTION_TYPE_LABELS[ActionType(action_type)]
    except ValueError:
        return str(action_type)


def sort_key(record: ConnectorRecord) -> tuple[str, str, str, str]:
    """Category first, then title; case-insensitive with exact text as tie-break."""
    metadata = record.metadata
    category = metadata.category if metadata else ""
    title = (metadata.title if metadata else "") or record.name
    return (category.casefold(), category, title.casefold(), title)


def sort_records(records: Iterable[ConnectorRecord]) -> List[ConnectorRecord]:
    return sorted(records, key=sort_key)


def collect_filter_labels(records: Iterable[ConnectorRecord]) -> tuple[str, ...]:
    labels = {type_label(record.metadata.type if record.metadata else None) for record in records}
    return tuple(sorted(labels))


def truncate_description(description: str) -> str:
    if len(description) > MAX_DESCRIPTION_LENGTH:
        return description[:TRUNCATED_DESCRIPTION_LENGTH] + "..."
    return description


def build_card(record: ConnectorRecord) -> CardView:
    metadata = record.metadata or Metadata(title="", description="")
    title = metadata.title or format_title(record.name)
    description = metadata.description or f"Flow Action connector for {title}"
    category = metadata.category or DEFAULT_CATEGORY

    tags: List[str] = []
    for tag in (category, *metadata.tags):
        if tag not in tags:
            tags.append(tag)

    return CardView(
        title=title,
        path=record.path,
        type_label=type_label(metadata.type),
        description=truncate_description(description),
        tags=tuple(tags[:MAX_CARD_TAGS]),
        url=record.url,
    )


def build_gallery_view(records: Sequence[ConnectorRecord]) -> GalleryView:
    """Sort enriched records and derive cards plus filter labels."""
    ordered = sort_records(records)
    return GalleryView(
        cards=tuple(build_card(record) for record in ordered),
        filter_labels=collect_filter_labels(ordered),
    )


def apply_filters(state: FilterState, cards: Sequence[CardView]) -> FilterResult:
    """Compute which cards stay visible for the given filter state."""
    if state.is_empty:
        return FilterResult(visibility=tuple(True for _ in cards))
    return FilterResult(visibility=tuple(card.data_tags in state.active for card in cards))


def results_heading(visible: int, total: int) -> str:
    if visible == total:
        return RESULTS_HEADING
    return f"{RESULTS_HEADING} ({visible} of {total})"


__all__ = [
    "CardView",
    "FilterResult",
    "FilterState",
    "GalleryView",
    "apply_filters",
    "build_card",
    "build_gallery_view",
    "collect_filter_labels",
    "results_heading",
    "sort_records",
    "truncate_description",
    "type_label",
]
