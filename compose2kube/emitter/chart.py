"""Helm chart packaging for emitted resources."""

import logging
import shutil
from io import StringIO
from pathlib import Path

from ruamel.yaml import YAML

from compose2kube.core.exceptions import ChartGenerationError
from compose2kube.core.protocols import ChartPackager
from compose2kube.emitter.emission import EMISSION_ORDER, resource_file_name
from compose2kube.models.options import ConvertOptions
from compose2kube.transformer.bundle import ResourceKind

logger = logging.getLogger(__name__)

CHART_API_VERSION = "v2"
CHART_VERSION = "0.0.1"
DEFAULT_CHART_NAME = "chart"

_README_TEMPLATE = """\
This chart was created by compose2kube.

Install it with:

    helm install {name} ./{name}
"""


class HelmChartPackager(ChartPackager):
    """
    Lay out a Helm chart next to the emitted resources.

    <source_dir>/<chart name>/
        Chart.yaml
        README.md
        templates/<emitted resource files>
    """

    def __init__(self):
        self._logger = logger.getChild(self.__class__.__name__)
        self._yaml = YAML()
        self._yaml.default_flow_style = False

    def package(
        self,
        input_file: Path | None,
        service_names: list[str],
        options: ConvertOptions,
        source_dir: Path,
    ) -> Path:
        """
        Create the chart directory and copy the resource files into it.

        Args:
            input_file: Input model file; its stem names the chart
            service_names: Ordered names of the processed services
            options: Emit flags and format of the run
            source_dir: Directory the resources were written to

        Returns:
            The chart directory

        Raises:
            ChartGenerationError: If the chart cannot be written
        """
        chart_name = input_file.stem if input_file else DEFAULT_CHART_NAME
        chart_dir = source_dir / chart_name
        templates_dir = chart_dir / "templates"

        self._logger.info(f"Creating chart '{chart_name}' in {chart_dir}")

        try:
            templates_dir.mkdir(parents=True, exist_ok=True)
            (chart_dir / "Chart.yaml").write_text(
                self._chart_metadata(chart_name), encoding="utf-8"
            )
            (chart_dir / "README.md").write_text(
                _README_TEMPLATE.format(name=chart_name), encoding="utf-8"
            )

            for source in self._template_sources(service_names, options, source_dir):
                shutil.copy2(source, templates_dir / source.name)
                self._logger.debug(f"Copied {source.name} into chart templates")
        except OSError as e:
            raise ChartGenerationError(
                f"Failed to create chart data: {e}", chart_dir=chart_dir
            ) from e

        return chart_dir

    def _chart_metadata(self, chart_name: str) -> str:
        stream = StringIO()
        self._yaml.dump(
            {
                "apiVersion": CHART_API_VERSION,
                "name": chart_name,
                "description": "A generated Helm Chart from compose2kube",
                "version": CHART_VERSION,
                "keywords": [chart_name],
            },
            stream,
        )
        return stream.getvalue()

    @staticmethod
    def _template_sources(
        service_names: list[str], options: ConvertOptions, source_dir: Path
    ) -> list[Path]:
        if options.out_file is not None:
            return [options.out_file]

        sources = []
        for kind, flag in EMISSION_ORDER:
            if flag is not None and not getattr(options, flag):
                continue
            for name in service_names:
                path = source_dir / resource_file_name(
                    name, kind, options.generate_yaml
                )
                # Services without ports never got a file
                if kind is ResourceKind.SERVICE and not path.exists():
                    continue
                sources.append(path)
        return sources
