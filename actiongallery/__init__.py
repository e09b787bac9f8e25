"""Browse and describe Flow Actions connectors as a filterable card gallery."""

__version__ = "0.1.0"
