from __future__ import annotations

import pytest

from compose2kube.models.service import ServiceConfig
from compose2kube.transformer.initializers import (
    init_daemon_set,
    init_deployment,
    init_deployment_config,
    init_replication_controller,
    init_service,
    selector_labels,
)


@pytest.fixture
def service() -> ServiceConfig:
    return ServiceConfig(name="web", image="nginx:1.25")


class TestInitializers:
    def test_replication_controller(self, service: ServiceConfig) -> None:
        rc = init_replication_controller("web", service, 3)
        assert (rc.api_version, rc.kind) == ("v1", "ReplicationController")
        assert rc.metadata.name == "web"
        assert rc.spec.replicas == 3
        assert rc.spec.selector == {"service": "web"}

    def test_deployment(self, service: ServiceConfig) -> None:
        deployment = init_deployment("web", service, 2)
        assert (deployment.api_version, deployment.kind) == ("apps/v1", "Deployment")
        assert deployment.spec.replicas == 2
        assert deployment.spec.selector.match_labels == {"service": "web"}

    def test_daemon_set_has_no_replicas(self, service: ServiceConfig) -> None:
        daemon_set = init_daemon_set("web", service)
        assert daemon_set.kind == "DaemonSet"
        assert not hasattr(daemon_set.spec, "replicas")

    def test_deployment_config(self, service: ServiceConfig) -> None:
        dc = init_deployment_config("web", service)
        assert dc.api_version == "apps.openshift.io/v1"
        assert dc.spec.selector == {"service": "web"}
        assert [t.type for t in dc.spec.triggers] == ["ConfigChange"]
        assert not hasattr(dc.spec, "replicas")

    def test_single_container_stub(self, service: ServiceConfig) -> None:
        for controller in (
            init_replication_controller("web", service, 1),
            init_deployment("web", service, 1),
            init_daemon_set("web", service),
            init_deployment_config("web", service),
        ):
            (container,) = controller.spec.template.spec.containers
            assert container.name == "web"
            assert container.image == "nginx:1.25"

    def test_service_skeleton(self, service: ServiceConfig) -> None:
        svc = init_service("web", service)
        assert svc.kind == "Service"
        assert svc.spec.selector == selector_labels("web")
        assert svc.spec.ports is None
        assert svc.spec.type is None

    def test_selector_labels_are_fresh(self) -> None:
        labels = selector_labels("web")
        labels["x"] = "y"
        assert selector_labels("web") == {"service": "web"}
