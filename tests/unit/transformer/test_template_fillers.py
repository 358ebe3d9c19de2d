"""Unit tests for restart policy mapping and the template fillers."""

from __future__ import annotations

import pytest

from compose2kube.core.exceptions import RestartPolicyError
from compose2kube.models.kubernetes import (
    ContainerPort,
    EnvVar,
    ObjectMeta,
    SecurityContext,
)
from compose2kube.models.service import ServiceConfig
from compose2kube.transformer.initializers import (
    init_daemon_set,
    init_deployment,
    selector_labels,
)
from compose2kube.transformer.template_fillers import (
    PodTemplateFragment,
    build_pod_template_fragment,
    fill_object_meta,
    fill_pod_template,
    map_restart_policy,
    update_controller,
)


class TestRestartPolicy:
    @pytest.mark.parametrize(
        "token, policy",
        [
            ("", "Always"),
            ("always", "Always"),
            ("no", "Never"),
            ("on-failure", "OnFailure"),
        ],
    )
    def test_known_tokens(self, token: str, policy: str) -> None:
        assert map_restart_policy("web", token) == policy

    def test_unknown_token_raises(self) -> None:
        with pytest.raises(RestartPolicyError) as exc_info:
            map_restart_policy("web", "unless-stopped")
        assert exc_info.value.context == {
            "service_name": "web",
            "restart": "unless-stopped",
        }
        assert "unless-stopped" in str(exc_info.value)


class TestBuildFragment:
    def _build(self, service: ServiceConfig) -> PodTemplateFragment:
        return build_pod_template_fragment(
            service.name,
            service,
            env=[],
            command=None,
            args=None,
            volume_mounts=[],
            volumes=[],
            ports=[],
            labels=selector_labels(service.name),
        )

    def test_privileged_sets_security_context(self) -> None:
        fragment = self._build(ServiceConfig(name="web", privileged=True))
        assert fragment.security_context == SecurityContext(privileged=True)

    def test_unprivileged_has_no_security_context(self) -> None:
        fragment = self._build(ServiceConfig(name="web"))
        assert fragment.security_context is None

    def test_working_dir_and_restart(self) -> None:
        fragment = self._build(
            ServiceConfig(name="web", working_dir="/app", restart="no")
        )
        assert fragment.working_dir == "/app"
        assert fragment.restart_policy == "Never"

    def test_bad_restart_propagates(self) -> None:
        with pytest.raises(RestartPolicyError):
            self._build(ServiceConfig(name="web", restart="sometimes"))


class TestFillers:
    @pytest.fixture
    def fragment(self) -> PodTemplateFragment:
        return PodTemplateFragment(
            env=[EnvVar(name="A", value="1")],
            command=["run"],
            args=["--fast"],
            working_dir="/srv",
            ports=[ContainerPort(container_port=80)],
            labels={"service": "web"},
            security_context=SecurityContext(privileged=True),
            restart_policy="OnFailure",
        )

    def test_fill_pod_template(self, fragment: PodTemplateFragment) -> None:
        template = init_deployment("web", ServiceConfig(name="web"), 1).spec.template

        fill_pod_template(template, fragment)

        container = template.spec.containers[0]
        assert container.env == [EnvVar(name="A", value="1")]
        assert container.command == ["run"]
        assert container.args == ["--fast"]
        assert container.working_dir == "/srv"
        assert container.security_context.privileged is True
        assert container.volume_mounts is None
        assert template.spec.volumes is None
        assert template.spec.restart_policy == "OnFailure"
        assert template.metadata.labels == {"service": "web"}

    def test_filled_templates_do_not_share_state(
        self, fragment: PodTemplateFragment
    ) -> None:
        service = ServiceConfig(name="web")
        first = init_deployment("web", service, 1)
        second = init_daemon_set("web", service)

        update_controller(first, fragment, {"service": "web"}, {})
        update_controller(second, fragment, {"service": "web"}, {})
        first.spec.template.spec.containers[0].env[0].value = "changed"

        assert second.spec.template.spec.containers[0].env[0].value == "1"
        assert fragment.env[0].value == "1"
        assert first.spec.template.metadata.labels is not fragment.labels

    def test_fill_object_meta(self) -> None:
        meta = ObjectMeta(name="web")
        labels = {"service": "web"}
        annotations = {"team": "edge"}

        fill_object_meta(meta, labels, annotations)
        labels["extra"] = "x"

        assert meta.labels == {"service": "web"}
        assert meta.annotations == {"team": "edge"}

    def test_empty_annotations_omitted(self) -> None:
        meta = ObjectMeta(name="web")
        fill_object_meta(meta, {"service": "web"}, {})
        assert meta.annotations is None
