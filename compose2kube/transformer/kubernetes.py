"""
Transformation orchestrator.

Drives the per-service conversion: derive the shared pod template, apply it
to every controller kind, serialize the results and collect them into an
OutputBundle.
"""

import logging
from collections.abc import Mapping

from compose2kube.core.protocols import Serializer
from compose2kube.models.options import ConvertOptions
from compose2kube.models.service import ServiceConfig
from compose2kube.transformer.bundle import OutputBundle, ServiceOutputs
from compose2kube.transformer.field_mappers import (
    map_args,
    map_command,
    map_env,
    map_ports,
    map_service_ports,
    map_volumes,
)
from compose2kube.transformer.initializers import (
    init_daemon_set,
    init_deployment,
    init_deployment_config,
    init_replication_controller,
    init_service,
    selector_labels,
)
from compose2kube.transformer.serializer import ResourceSerializer
from compose2kube.transformer.template_fillers import (
    build_pod_template_fragment,
    fill_object_meta,
    update_controller,
)

logger = logging.getLogger(__name__)


class KubernetesTransformer:
    """
    Convert normalized services into serialized Kubernetes resources.

    Any error (unknown restart policy, serialization failure) propagates out
    of transform() straight away: a run either produces a complete bundle or
    nothing at all.
    """

    def __init__(self, serializer: Serializer | None = None):
        """
        Initialize the transformer.

        Args:
            serializer: Encoder for resources, defaults to ResourceSerializer
        """
        self._logger = logger.getChild(self.__class__.__name__)
        self._serializer = serializer or ResourceSerializer()

    def transform(
        self, services: Mapping[str, ServiceConfig], options: ConvertOptions
    ) -> OutputBundle:
        """
        Convert every service, in iteration order.

        Args:
            services: Service name to ServiceConfig
            options: Run-wide options (replicas, output format)

        Returns:
            The OutputBundle for the whole run
        """
        self._logger.info(f"Transforming {len(services)} service(s)")

        bundle = OutputBundle()
        for name, service in services.items():
            bundle.add(name, self.transform_service(name, service, options))

        self._logger.info("Transformation completed.")
        return bundle

    def transform_service(
        self, name: str, service: ServiceConfig, options: ConvertOptions
    ) -> ServiceOutputs:
        """Build, fill and serialize all resources of a single service."""
        self._logger.debug(f"Transforming service '{name}'")

        rc = init_replication_controller(name, service, options.replicas)
        deployment = init_deployment(name, service, options.replicas)
        daemon_set = init_daemon_set(name, service)
        deployment_config = init_deployment_config(name, service)
        svc = init_service(name, service)

        env = map_env(service)
        command = map_command(service)
        args = map_args(service)
        volume_mounts, volumes = map_volumes(service)
        ports = map_ports(service)
        service_ports = map_service_ports(name, service)

        labels = selector_labels(name)
        annotations = dict(service.annotations)

        fragment = build_pod_template_fragment(
            name,
            service,
            env=env,
            command=command,
            args=args,
            volume_mounts=volume_mounts,
            volumes=volumes,
            ports=ports,
            labels=labels,
        )

        for controller in (rc, deployment, daemon_set, deployment_config):
            update_controller(controller, fragment, labels, annotations)

        svc.spec.ports = service_ports or None
        if any(p.node_port is not None for p in service_ports):
            svc.spec.type = "NodePort"
        fill_object_meta(svc.metadata, labels, annotations)

        generate_yaml = options.generate_yaml
        data_rc = self._serializer.serialize(rc, generate_yaml)
        data_deployment = self._serializer.serialize(deployment, generate_yaml)
        data_daemon_set = self._serializer.serialize(daemon_set, generate_yaml)

        data_svc = None
        if not ports:
            self._logger.warning(
                f"[{name}] Service cannot be created because of missing port."
            )
        else:
            data_svc = self._serializer.serialize(svc, generate_yaml)

        data_deployment_config = self._serializer.serialize(
            deployment_config, generate_yaml
        )

        return ServiceOutputs(
            service=data_svc,
            deployment=data_deployment,
            daemon_set=data_daemon_set,
            replication_controller=data_rc,
            deployment_config=data_deployment_config,
        )
