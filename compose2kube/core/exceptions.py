"""
compose2kube Exception Classes

Custom exceptions for error reporting across the conversion pipeline.
"""

from pathlib import Path
from typing import Any


class Compose2KubeError(Exception):
    """Base exception for all compose2kube errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


class RestartPolicyError(Compose2KubeError):
    """Raised when a service declares a restart token with no pod equivalent."""

    def __init__(
        self,
        message: str,
        service_name: str | None = None,
        restart: str | None = None,
    ) -> None:
        context = {}
        if service_name:
            context["service_name"] = service_name
        if restart is not None:
            context["restart"] = restart
        super().__init__(message, "RESTART_POLICY_ERROR", context)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the restart token."""
        return (
            "Use one of the supported restart values: "
            "'always', 'no', 'on-failure' (or leave it empty)"
        )


class SerializationError(Compose2KubeError):
    """Raised when a resource cannot be encoded to JSON or YAML."""

    def __init__(
        self,
        message: str,
        resource_name: str | None = None,
        resource_kind: str | None = None,
    ) -> None:
        context = {}
        if resource_name:
            context["resource_name"] = resource_name
        if resource_kind:
            context["resource_kind"] = resource_kind
        super().__init__(message, "SERIALIZATION_ERROR", context)


class ChartGenerationError(Compose2KubeError):
    """Raised when the Helm chart bundle cannot be written."""

    def __init__(self, message: str, chart_dir: Path | None = None) -> None:
        context = {}
        if chart_dir is not None:
            context["chart_dir"] = str(chart_dir)
        super().__init__(message, "CHART_GENERATION_ERROR", context)


class ServiceModelLoadError(Compose2KubeError):
    """Raised when the normalized service model cannot be read or validated."""

    def __init__(self, message: str, file_path: Path | None = None) -> None:
        context = {}
        if file_path is not None:
            context["file_path"] = str(file_path)
        super().__init__(message, "SERVICE_MODEL_LOAD_ERROR", context)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the input file."""
        return (
            "Check that the input is a YAML or JSON mapping with a "
            "top-level 'services' section"
        )
