"""Remote source adapters."""

from .client import GalleryError, GitHubContentsClient, NetworkError, RemoteApiError

__all__ = ["GalleryError", "GitHubContentsClient", "NetworkError", "RemoteApiError"]
