"""Emission policy: choose which serialized documents are written, and where."""

import logging
import sys
from pathlib import Path
from typing import TextIO

from compose2kube.core.protocols import ChartPackager
from compose2kube.models.options import ConvertOptions
from compose2kube.transformer.bundle import OutputBundle, ResourceKind

logger = logging.getLogger(__name__)

# Fixed emission order; Services are always emitted when present
EMISSION_ORDER: tuple[tuple[ResourceKind, str | None], ...] = (
    (ResourceKind.SERVICE, None),
    (ResourceKind.DEPLOYMENT, "create_deployment"),
    (ResourceKind.DAEMON_SET, "create_daemon_set"),
    (ResourceKind.REPLICATION_CONTROLLER, "create_replication_controller"),
    (ResourceKind.DEPLOYMENT_CONFIG, "create_deployment_config"),
)


def resource_file_name(name: str, kind: ResourceKind, generate_yaml: bool) -> str:
    """File name used for one resource in per-resource mode."""
    extension = "yaml" if generate_yaml else "json"
    return f"{name}-{kind.value}.{extension}"


class ResourceEmitter:
    """
    Write the documents of an OutputBundle according to the run options.

    Destinations:
    - options.to_stdout: every document on standard output
    - a caller-owned stream (the --out file): every document appended to it
    - otherwise: one file per resource in output_dir
    """

    def __init__(
        self,
        output_dir: Path | None = None,
        chart_packager: ChartPackager | None = None,
    ):
        self._logger = logger.getChild(self.__class__.__name__)
        self.output_dir = output_dir or Path.cwd()
        self._chart_packager = chart_packager

    @staticmethod
    def select(
        bundle: OutputBundle, options: ConvertOptions
    ) -> list[tuple[str, ResourceKind, bytes]]:
        """
        Pick the documents to emit, in emission order.

        Returns:
            (service name, kind, document) tuples
        """
        selected = []
        for kind, flag in EMISSION_ORDER:
            if flag is not None and not getattr(options, flag):
                continue
            for name, data in bundle.kind_mapping(kind).items():
                if data is None:
                    continue
                selected.append((name, kind, data))
        return selected

    def emit(
        self,
        bundle: OutputBundle,
        options: ConvertOptions,
        stream: TextIO | None = None,
    ) -> list[Path]:
        """
        Write the selected documents, then package the chart if requested.

        Args:
            bundle: The serialized resources of the run
            options: Emit flags and destination
            stream: Open text stream for single-file output (owned by caller)

        Returns:
            Paths of the files written in per-resource mode

        Raises:
            ChartGenerationError: If chart packaging fails
            OSError: If a resource file cannot be written
        """
        documents = self.select(bundle, options)
        written: list[Path] = []

        if options.to_stdout:
            self._write_stream(documents, sys.stdout, options.generate_yaml)
        elif stream is not None:
            self._write_stream(documents, stream, options.generate_yaml)
        else:
            written = self._write_files(documents, options.generate_yaml)

        self._logger.info(f"Emitted {len(documents)} resource(s)")

        if options.create_chart:
            self._package_chart(bundle, options)

        return written

    @staticmethod
    def _write_stream(
        documents: list[tuple[str, ResourceKind, bytes]],
        stream: TextIO,
        generate_yaml: bool,
    ) -> None:
        for _name, _kind, data in documents:
            if generate_yaml:
                stream.write("---\n")
            stream.write(data.decode("utf-8"))
            if not data.endswith(b"\n"):
                stream.write("\n")
        stream.flush()

    def _write_files(
        self, documents: list[tuple[str, ResourceKind, bytes]], generate_yaml: bool
    ) -> list[Path]:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        written = []
        for name, kind, data in documents:
            path = self.output_dir / resource_file_name(name, kind, generate_yaml)
            path.write_bytes(data)
            print(f'file "{path}" created')
            written.append(path)
        return written

    def _package_chart(self, bundle: OutputBundle, options: ConvertOptions) -> None:
        if self._chart_packager is None:
            from compose2kube.emitter.chart import HelmChartPackager

            self._chart_packager = HelmChartPackager()

        chart_dir = self._chart_packager.package(
            options.input_file, list(bundle.service_names), options, self.output_dir
        )
        self._logger.info(f"Chart created in {chart_dir}")
