"""
Template fillers: apply a resolved pod template and shared metadata onto
controller skeletons.

A PodTemplateFragment is computed once per service and handed explicitly to
fill_pod_template for every controller kind, so all kinds of one service
carry identical pod specs.
"""

import logging
from dataclasses import dataclass, field
from typing import TypeVar

from pydantic import BaseModel

from compose2kube.core.exceptions import RestartPolicyError
from compose2kube.models.kubernetes import (
    ContainerPort,
    Controller,
    EnvVar,
    ObjectMeta,
    PodTemplateSpec,
    SecurityContext,
    Volume,
    VolumeMount,
)
from compose2kube.models.service import ServiceConfig

logger = logging.getLogger(__name__)

RESTART_POLICY_ALWAYS = "Always"
RESTART_POLICY_NEVER = "Never"
RESTART_POLICY_ON_FAILURE = "OnFailure"

_RESTART_POLICIES = {
    "": RESTART_POLICY_ALWAYS,
    "always": RESTART_POLICY_ALWAYS,
    "no": RESTART_POLICY_NEVER,
    "on-failure": RESTART_POLICY_ON_FAILURE,
}

_M = TypeVar("_M", bound=BaseModel)


@dataclass(frozen=True)
class PodTemplateFragment:
    """Per-service pod template values shared by every controller kind."""

    env: list[EnvVar] = field(default_factory=list)
    command: list[str] | None = None
    args: list[str] | None = None
    working_dir: str | None = None
    volume_mounts: list[VolumeMount] = field(default_factory=list)
    volumes: list[Volume] = field(default_factory=list)
    ports: list[ContainerPort] = field(default_factory=list)
    labels: dict[str, str] = field(default_factory=dict)
    security_context: SecurityContext | None = None
    restart_policy: str = RESTART_POLICY_ALWAYS


def map_restart_policy(service_name: str, restart: str) -> str:
    """
    Translate a compose restart token to a pod restart policy.

    Raises:
        RestartPolicyError: If the token is not one of '', 'always', 'no',
            'on-failure'. The input cannot be defaulted safely, so the run
            must stop.
    """
    try:
        return _RESTART_POLICIES[restart]
    except KeyError:
        raise RestartPolicyError(
            f"Unknown restart policy {restart!r} for service {service_name!r}",
            service_name=service_name,
            restart=restart,
        ) from None


def build_pod_template_fragment(
    service_name: str,
    service: ServiceConfig,
    env: list[EnvVar],
    command: list[str] | None,
    args: list[str] | None,
    volume_mounts: list[VolumeMount],
    volumes: list[Volume],
    ports: list[ContainerPort],
    labels: dict[str, str],
) -> PodTemplateFragment:
    """Collect the derived values of one service into a fragment."""
    security_context = None
    if service.privileged:
        security_context = SecurityContext(privileged=True)

    return PodTemplateFragment(
        env=env,
        command=command,
        args=args,
        working_dir=service.working_dir or None,
        volume_mounts=volume_mounts,
        volumes=volumes,
        ports=ports,
        labels=labels,
        security_context=security_context,
        restart_policy=map_restart_policy(service_name, service.restart),
    )


def _copy_models(models: list[_M]) -> list[_M] | None:
    # Absent rather than empty lists keep the output free of "[]" noise
    return [m.model_copy(deep=True) for m in models] or None


def fill_pod_template(template: PodTemplateSpec, fragment: PodTemplateFragment) -> None:
    """Write the fragment into container[0] and the pod-level fields."""
    container = template.spec.containers[0]
    container.env = _copy_models(fragment.env)
    container.command = list(fragment.command) if fragment.command else None
    container.args = list(fragment.args) if fragment.args else None
    container.working_dir = fragment.working_dir
    container.volume_mounts = _copy_models(fragment.volume_mounts)
    container.ports = _copy_models(fragment.ports)
    # No security context at all unless privileged
    if fragment.security_context is not None:
        container.security_context = fragment.security_context.model_copy()
    else:
        container.security_context = None

    template.spec.volumes = _copy_models(fragment.volumes)
    template.spec.restart_policy = fragment.restart_policy
    template.metadata.labels = dict(fragment.labels)


def fill_object_meta(
    meta: ObjectMeta, labels: dict[str, str], annotations: dict[str, str]
) -> None:
    """Set labels and annotations on any object metadata."""
    meta.labels = dict(labels) or None
    meta.annotations = dict(annotations) or None


def update_controller(
    controller: Controller,
    fragment: PodTemplateFragment,
    labels: dict[str, str],
    annotations: dict[str, str],
) -> None:
    """Apply the pod template fragment and the shared metadata to a controller."""
    fill_pod_template(controller.spec.template, fragment)
    fill_object_meta(controller.metadata, labels, annotations)
    logger.debug(f"Filled {controller.kind} '{controller.metadata.name}'")
