"""
Field mappers: pure functions turning ServiceConfig attributes into
Kubernetes sub-structures.

None of these functions mutate the ServiceConfig they receive.
"""

import logging

from compose2kube.models.kubernetes import (
    ContainerPort,
    EmptyDirVolumeSource,
    EnvVar,
    HostPathVolumeSource,
    ServicePort,
    Volume,
    VolumeMount,
)
from compose2kube.models.service import ServiceConfig

logger = logging.getLogger(__name__)


def map_env(service: ServiceConfig) -> list[EnvVar]:
    """Return one EnvVar per environment entry, in declaration order."""
    return [EnvVar(name=k, value=v) for k, v in service.environment.items()]


def map_command(service: ServiceConfig) -> list[str] | None:
    return list(service.command) or None


def map_args(service: ServiceConfig) -> list[str] | None:
    return list(service.args) or None


def map_ports(service: ServiceConfig) -> list[ContainerPort]:
    """Return one ContainerPort per declared port (protocol defaults to TCP)."""
    return [
        ContainerPort(container_port=p.container_port, protocol=p.protocol or "TCP")
        for p in service.ports
    ]


def map_service_ports(service_name: str, service: ServiceConfig) -> list[ServicePort]:
    """
    Shape the declared ports for the Service object.

    The Service listens on the published host port when one is declared and
    on the container port otherwise. Port names must be unique within a
    Service, so with more than one port each gets "<service_name>-<index>".

    Args:
        service_name: Name of the service (used to derive port names)
        service: The service configuration

    Returns:
        Ordered list of ServicePort
    """
    named = len(service.ports) > 1
    service_ports = []
    for index, port in enumerate(service.ports):
        service_ports.append(
            ServicePort(
                name=f"{service_name}-{index}" if named else None,
                protocol=port.protocol or "TCP",
                port=port.host_port or port.container_port,
                target_port=port.container_port,
                node_port=port.node_port,
            )
        )
    return service_ports


def map_volumes(service: ServiceConfig) -> tuple[list[VolumeMount], list[Volume]]:
    """
    Build matching container mounts and pod volumes.

    Each usable volume spec yields one VolumeMount and one Volume sharing the
    same name. Host paths become hostPath volumes, everything else emptyDir.
    Specs without a container path are skipped with a warning.

    Returns:
        (volume_mounts, volumes), index-aligned
    """
    mounts: list[VolumeMount] = []
    volumes: list[Volume] = []

    for index, spec in enumerate(service.volumes):
        if not spec.container:
            logger.warning(
                f"[{service.name}] Volume #{index} has no container path. Skipping."
            )
            continue

        volume_name = spec.name or f"{service.name}-volume{index}"

        mounts.append(
            VolumeMount(
                name=volume_name,
                mount_path=spec.container,
                read_only=True if spec.read_only else None,
            )
        )

        if spec.host:
            volume = Volume(
                name=volume_name, host_path=HostPathVolumeSource(path=spec.host)
            )
        else:
            volume = Volume(name=volume_name, empty_dir=EmptyDirVolumeSource())
        volumes.append(volume)

    return mounts, volumes
