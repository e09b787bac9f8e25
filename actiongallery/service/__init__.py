"""Service mode for serving the gallery over HTTP."""

from .app import create_app, run_service

__all__ = ["create_app", "run_service"]
