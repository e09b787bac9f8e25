"""Gallery view model and HTML rendering."""

from .html import GalleryRenderer
from .viewmodel import (
    CardView,
    FilterResult,
    FilterState,
    GalleryView,
    apply_filters,
    build_gallery_view,
    results_heading,
)

__all__ = [
    "CardView",
    "FilterResult",
    "FilterState",
    "GalleryRenderer",
    "GalleryView",
    "apply_filters",
    "build_gallery_view",
    "results_heading",
]
