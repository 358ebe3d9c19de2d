from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from compose2kube.models.options import ConvertOptions


class TestConvertOptions:
    def test_deployment_enabled_by_default(self) -> None:
        options = ConvertOptions()
        assert options.create_deployment is True
        assert options.controller_flags_enabled == 1
        assert options.replicas == 1

    def test_explicit_kind_does_not_enable_deployment(self) -> None:
        options = ConvertOptions(create_daemon_set=True)
        assert options.create_deployment is False
        assert options.create_daemon_set is True

    def test_multiple_kinds_allowed_for_per_file_output(self) -> None:
        options = ConvertOptions(
            create_deployment=True,
            create_replication_controller=True,
            create_deployment_config=True,
        )
        assert options.controller_flags_enabled == 3

    def test_stdout_and_file_are_exclusive(self) -> None:
        with pytest.raises(ValidationError, match="same time"):
            ConvertOptions(to_stdout=True, out_file=Path("all.json"))

    def test_chart_with_stdout_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Chart"):
            ConvertOptions(to_stdout=True, create_chart=True)

    @pytest.mark.parametrize(
        "destination",
        [{"to_stdout": True}, {"out_file": Path("all.yaml")}],
    )
    def test_single_destination_allows_one_kind(
        self, destination: dict[str, object]
    ) -> None:
        with pytest.raises(ValidationError, match="Only one controller kind"):
            ConvertOptions(
                create_deployment=True, create_daemon_set=True, **destination
            )

    def test_negative_replicas_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConvertOptions(replicas=-1)

    def test_zero_replicas_allowed(self) -> None:
        assert ConvertOptions(replicas=0).replicas == 0
