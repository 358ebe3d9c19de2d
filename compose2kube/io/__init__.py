"""Input loading for the normalized service model."""

from .file_loader import ServiceModelLoader

__all__ = ["ServiceModelLoader"]
