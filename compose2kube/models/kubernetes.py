"""
Kubernetes and OpenShift resource models produced by the transformer.

Only the fields the converter fills are modelled. Field names are snake_case
in Python and camelCase on the wire; unset (None) fields are left out of the
serialized documents.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt
from pydantic.alias_generators import to_camel


class KubeModel(BaseModel):
    """Base class for every resource fragment."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


# ---------------------------------------------------------------------------
# Shared fragments
# ---------------------------------------------------------------------------


class ObjectMeta(KubeModel):
    name: str | None = None
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None


class EnvVar(KubeModel):
    name: str
    value: str = ""


class ContainerPort(KubeModel):
    container_port: int
    protocol: str = "TCP"


class VolumeMount(KubeModel):
    name: str
    mount_path: str
    read_only: bool | None = None


class EmptyDirVolumeSource(KubeModel):
    medium: str | None = None


class HostPathVolumeSource(KubeModel):
    path: str


class Volume(KubeModel):
    name: str
    empty_dir: EmptyDirVolumeSource | None = None
    host_path: HostPathVolumeSource | None = None


class SecurityContext(KubeModel):
    privileged: bool | None = None


class Container(KubeModel):
    name: str
    image: str = ""
    command: list[str] | None = None
    args: list[str] | None = None
    working_dir: str | None = None
    env: list[EnvVar] | None = None
    ports: list[ContainerPort] | None = None
    volume_mounts: list[VolumeMount] | None = None
    security_context: SecurityContext | None = None


class PodSpec(KubeModel):
    containers: list[Container]
    volumes: list[Volume] | None = None
    restart_policy: str | None = None


class PodTemplateSpec(KubeModel):
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: PodSpec


class LabelSelector(KubeModel):
    match_labels: dict[str, str]


# ---------------------------------------------------------------------------
# Controller specs
# ---------------------------------------------------------------------------


class ReplicationControllerSpec(KubeModel):
    replicas: NonNegativeInt
    selector: dict[str, str]
    template: PodTemplateSpec


class DeploymentSpec(KubeModel):
    replicas: NonNegativeInt
    selector: LabelSelector
    template: PodTemplateSpec


class DaemonSetSpec(KubeModel):
    selector: LabelSelector
    template: PodTemplateSpec


class DeploymentTriggerPolicy(KubeModel):
    type: str


class DeploymentConfigSpec(KubeModel):
    selector: dict[str, str]
    template: PodTemplateSpec
    triggers: list[DeploymentTriggerPolicy] | None = None


# ---------------------------------------------------------------------------
# Top-level resources
# ---------------------------------------------------------------------------


class ReplicationController(KubeModel):
    api_version: Literal["v1"] = "v1"
    kind: Literal["ReplicationController"] = "ReplicationController"
    metadata: ObjectMeta
    spec: ReplicationControllerSpec


class Deployment(KubeModel):
    api_version: Literal["apps/v1"] = "apps/v1"
    kind: Literal["Deployment"] = "Deployment"
    metadata: ObjectMeta
    spec: DeploymentSpec


class DaemonSet(KubeModel):
    api_version: Literal["apps/v1"] = "apps/v1"
    kind: Literal["DaemonSet"] = "DaemonSet"
    metadata: ObjectMeta
    spec: DaemonSetSpec


class DeploymentConfig(KubeModel):
    """OpenShift DeploymentConfig."""

    api_version: Literal["apps.openshift.io/v1"] = "apps.openshift.io/v1"
    kind: Literal["DeploymentConfig"] = "DeploymentConfig"
    metadata: ObjectMeta
    spec: DeploymentConfigSpec


class ServicePort(KubeModel):
    name: str | None = None
    protocol: str | None = None
    port: int
    target_port: int
    node_port: int | None = None


class ServiceSpec(KubeModel):
    type: str | None = None
    selector: dict[str, str]
    ports: list[ServicePort] | None = None


class Service(KubeModel):
    api_version: Literal["v1"] = "v1"
    kind: Literal["Service"] = "Service"
    metadata: ObjectMeta
    spec: ServiceSpec


Controller = ReplicationController | Deployment | DaemonSet | DeploymentConfig
