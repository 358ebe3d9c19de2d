from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel

if TYPE_CHECKING:
    from compose2kube.models.options import ConvertOptions


class Serializer(Protocol):
    """Defines the contract for encoding a resource model to bytes."""

    def serialize(self, resource: BaseModel, generate_yaml: bool) -> bytes:
        """
        Encode a resource object.

        Args:
            resource: Any resource model (controller or Service)
            generate_yaml: Encode as YAML if True, JSON otherwise

        Returns:
            The encoded document
        """
        ...


class ChartPackager(Protocol):
    """Defines the contract for bundling emitted resources into a chart."""

    def package(
        self,
        input_file: Path | None,
        service_names: list[str],
        options: "ConvertOptions",
        source_dir: Path,
    ) -> Path:
        """
        Build a chart from the resources written for the given services.

        Args:
            input_file: The input model file, used to name the chart
            service_names: Ordered names of the processed services
            options: Run options carrying the per-kind emit flags
            source_dir: Directory holding the emitted resource files

        Returns:
            Path of the generated chart directory
        """
        ...
