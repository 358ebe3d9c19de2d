from .kubernetes import (
    Container,
    ContainerPort,
    Controller,
    DaemonSet,
    DaemonSetSpec,
    Deployment,
    DeploymentConfig,
    DeploymentConfigSpec,
    DeploymentSpec,
    DeploymentTriggerPolicy,
    EmptyDirVolumeSource,
    EnvVar,
    HostPathVolumeSource,
    KubeModel,
    LabelSelector,
    ObjectMeta,
    PodSpec,
    PodTemplateSpec,
    ReplicationController,
    ReplicationControllerSpec,
    SecurityContext,
    Service,
    ServicePort,
    ServiceSpec,
    Volume,
    VolumeMount,
)
from .options import ConvertOptions
from .service import PortSpec, ServiceConfig, ServiceModel, VolumeSpec

__all__ = [
    "ServiceConfig",
    "ServiceModel",
    "PortSpec",
    "VolumeSpec",
    "ConvertOptions",
    "KubeModel",
    "ObjectMeta",
    "EnvVar",
    "ContainerPort",
    "VolumeMount",
    "Volume",
    "EmptyDirVolumeSource",
    "HostPathVolumeSource",
    "SecurityContext",
    "Container",
    "PodSpec",
    "PodTemplateSpec",
    "LabelSelector",
    "ReplicationControllerSpec",
    "DeploymentSpec",
    "DaemonSetSpec",
    "DeploymentConfigSpec",
    "DeploymentTriggerPolicy",
    "ReplicationController",
    "Deployment",
    "DaemonSet",
    "DeploymentConfig",
    "ServicePort",
    "ServiceSpec",
    "Service",
    "Controller",
]
