"""Core contracts and exception types shared by the conversion pipeline."""

from .exceptions import (
    ChartGenerationError,
    Compose2KubeError,
    RestartPolicyError,
    SerializationError,
    ServiceModelLoadError,
)
from .protocols import ChartPackager, Serializer

__all__ = [
    "Compose2KubeError",
    "RestartPolicyError",
    "SerializationError",
    "ChartGenerationError",
    "ServiceModelLoadError",
    "Serializer",
    "ChartPackager",
]
