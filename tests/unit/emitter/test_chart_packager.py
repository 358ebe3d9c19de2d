from __future__ import annotations

from pathlib import Path

import pytest
from ruamel.yaml import YAML

from compose2kube.core.exceptions import ChartGenerationError
from compose2kube.emitter.chart import HelmChartPackager
from compose2kube.models.options import ConvertOptions


def _write(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).write_text(f"# {name}\n")


class TestHelmChartPackager:
    @pytest.fixture
    def packager(self) -> HelmChartPackager:
        return HelmChartPackager()

    def test_chart_layout(self, packager: HelmChartPackager, tmp_path: Path) -> None:
        _write(
            tmp_path,
            "web-svc.yaml",
            "web-deployment.yaml",
            "worker-deployment.yaml",
        )
        options = ConvertOptions(
            create_chart=True,
            generate_yaml=True,
            input_file=Path("docker-compose.yml"),
        )

        chart_dir = packager.package(
            options.input_file, ["web", "worker"], options, tmp_path
        )

        assert chart_dir == tmp_path / "docker-compose"
        metadata = YAML(typ="safe").load((chart_dir / "Chart.yaml").read_text())
        assert metadata["name"] == "docker-compose"
        assert metadata["apiVersion"] == "v2"
        assert metadata["version"] == "0.0.1"
        assert "helm install docker-compose" in (chart_dir / "README.md").read_text()
        assert sorted(p.name for p in (chart_dir / "templates").iterdir()) == [
            "web-deployment.yaml",
            "web-svc.yaml",
            "worker-deployment.yaml",
        ]

    def test_default_chart_name(
        self, packager: HelmChartPackager, tmp_path: Path
    ) -> None:
        _write(tmp_path, "web-deployment.json")
        options = ConvertOptions(create_chart=True)

        chart_dir = packager.package(None, ["web"], options, tmp_path)

        assert chart_dir.name == "chart"
        assert (chart_dir / "templates" / "web-deployment.json").exists()

    def test_single_out_file_copied(
        self, packager: HelmChartPackager, tmp_path: Path
    ) -> None:
        out_file = tmp_path / "all.json"
        out_file.write_text("{}\n")
        options = ConvertOptions(create_chart=True, out_file=out_file)

        chart_dir = packager.package(Path("app.yaml"), ["web"], options, tmp_path)

        assert [p.name for p in (chart_dir / "templates").iterdir()] == ["all.json"]

    def test_missing_resource_file_raises(
        self, packager: HelmChartPackager, tmp_path: Path
    ) -> None:
        options = ConvertOptions(create_chart=True, create_daemon_set=True)

        with pytest.raises(ChartGenerationError) as exc_info:
            packager.package(Path("app.yaml"), ["web"], options, tmp_path)
        assert exc_info.value.error_code == "CHART_GENERATION_ERROR"
