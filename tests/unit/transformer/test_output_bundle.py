from __future__ import annotations

import pytest

from compose2kube.transformer.bundle import OutputBundle, ResourceKind, ServiceOutputs


def _outputs(name: str, with_service: bool = True) -> ServiceOutputs:
    return ServiceOutputs(
        deployment=f"{name}-deployment".encode(),
        daemon_set=f"{name}-daemonset".encode(),
        replication_controller=f"{name}-rc".encode(),
        deployment_config=f"{name}-dc".encode(),
        service=f"{name}-svc".encode() if with_service else None,
    )


class TestOutputBundle:
    def test_add_keeps_order(self) -> None:
        bundle = OutputBundle()
        bundle.add("web", _outputs("web"))
        bundle.add("db", _outputs("db", with_service=False))

        assert bundle.service_names == ["web", "db"]
        assert len(bundle) == 2
        assert "db" in bundle and "cache" not in bundle

    def test_duplicate_name_rejected(self) -> None:
        bundle = OutputBundle()
        bundle.add("web", _outputs("web"))
        with pytest.raises(ValueError, match="already present"):
            bundle.add("web", _outputs("web"))

    def test_kind_mapping(self) -> None:
        bundle = OutputBundle()
        bundle.add("web", _outputs("web"))
        bundle.add("db", _outputs("db", with_service=False))

        assert bundle.kind_mapping(ResourceKind.SERVICE) == {
            "web": b"web-svc",
            "db": None,
        }
        assert list(bundle.kind_mapping(ResourceKind.DEPLOYMENT_CONFIG).values()) == [
            b"web-dc",
            b"db-dc",
        ]

    def test_get_by_kind(self) -> None:
        outputs = _outputs("web")
        assert outputs.get(ResourceKind.REPLICATION_CONTROLLER) == b"web-rc"
        assert outputs.get(ResourceKind.DAEMON_SET) == b"web-daemonset"
