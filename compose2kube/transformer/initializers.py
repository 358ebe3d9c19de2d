"""
Controller initializers: build the resource skeletons for one service.

Every controller wraps a single-container pod template stub and selects its
pods with the same {"service": name} labels, which is what makes the kinds
interchangeable deployment strategies for the same pod.
"""

from compose2kube.models.kubernetes import (
    Container,
    DaemonSet,
    DaemonSetSpec,
    Deployment,
    DeploymentConfig,
    DeploymentConfigSpec,
    DeploymentSpec,
    DeploymentTriggerPolicy,
    LabelSelector,
    ObjectMeta,
    PodSpec,
    PodTemplateSpec,
    ReplicationController,
    ReplicationControllerSpec,
    Service,
    ServiceSpec,
)
from compose2kube.models.service import ServiceConfig

SERVICE_LABEL = "service"


def selector_labels(name: str) -> dict[str, str]:
    """Labels used both on pods and in every controller selector."""
    return {SERVICE_LABEL: name}


def _pod_template_stub(name: str, service: ServiceConfig) -> PodTemplateSpec:
    return PodTemplateSpec(
        spec=PodSpec(containers=[Container(name=name, image=service.image)])
    )


def init_replication_controller(
    name: str, service: ServiceConfig, replicas: int
) -> ReplicationController:
    return ReplicationController(
        metadata=ObjectMeta(name=name),
        spec=ReplicationControllerSpec(
            replicas=replicas,
            selector=selector_labels(name),
            template=_pod_template_stub(name, service),
        ),
    )


def init_deployment(name: str, service: ServiceConfig, replicas: int) -> Deployment:
    return Deployment(
        metadata=ObjectMeta(name=name),
        spec=DeploymentSpec(
            replicas=replicas,
            selector=LabelSelector(match_labels=selector_labels(name)),
            template=_pod_template_stub(name, service),
        ),
    )


def init_daemon_set(name: str, service: ServiceConfig) -> DaemonSet:
    """DaemonSets run one pod per node, so there is no replica count."""
    return DaemonSet(
        metadata=ObjectMeta(name=name),
        spec=DaemonSetSpec(
            selector=LabelSelector(match_labels=selector_labels(name)),
            template=_pod_template_stub(name, service),
        ),
    )


def init_deployment_config(name: str, service: ServiceConfig) -> DeploymentConfig:
    """OpenShift DeploymentConfig, redeployed whenever its config changes."""
    return DeploymentConfig(
        metadata=ObjectMeta(name=name),
        spec=DeploymentConfigSpec(
            selector=selector_labels(name),
            template=_pod_template_stub(name, service),
            triggers=[DeploymentTriggerPolicy(type="ConfigChange")],
        ),
    )


def init_service(name: str, service: ServiceConfig) -> Service:
    return Service(
        metadata=ObjectMeta(name=name),
        spec=ServiceSpec(selector=selector_labels(name)),
    )
