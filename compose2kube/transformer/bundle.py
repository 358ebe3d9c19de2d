"""Per-run collection of serialized resources, keyed by service name."""

from dataclasses import dataclass, field
from enum import Enum


class ResourceKind(str, Enum):
    """Output kinds, valued by the suffix used in per-resource file names."""

    SERVICE = "svc"
    DEPLOYMENT = "deployment"
    DAEMON_SET = "daemonset"
    REPLICATION_CONTROLLER = "rc"
    DEPLOYMENT_CONFIG = "deploymentconfig"


@dataclass(frozen=True)
class ServiceOutputs:
    """Serialized documents for one service, one slot per kind."""

    deployment: bytes
    daemon_set: bytes
    replication_controller: bytes
    deployment_config: bytes
    # None when the service declares no ports
    service: bytes | None = None

    def get(self, kind: ResourceKind) -> bytes | None:
        return {
            ResourceKind.SERVICE: self.service,
            ResourceKind.DEPLOYMENT: self.deployment,
            ResourceKind.DAEMON_SET: self.daemon_set,
            ResourceKind.REPLICATION_CONTROLLER: self.replication_controller,
            ResourceKind.DEPLOYMENT_CONFIG: self.deployment_config,
        }[kind]


@dataclass
class OutputBundle:
    """
    Everything one conversion run produced.

    Built once over all services, consumed once by the emitter.
    service_names keeps processing order for chart packaging.
    """

    outputs: dict[str, ServiceOutputs] = field(default_factory=dict)
    service_names: list[str] = field(default_factory=list)

    def add(self, name: str, outputs: ServiceOutputs) -> None:
        if name in self.outputs:
            raise ValueError(f"Service '{name}' already present in the bundle")
        self.outputs[name] = outputs
        self.service_names.append(name)

    def kind_mapping(self, kind: ResourceKind) -> dict[str, bytes | None]:
        """Service name to serialized document for one kind, in order."""
        return {name: self.outputs[name].get(kind) for name in self.service_names}

    def __contains__(self, name: object) -> bool:
        return name in self.outputs

    def __getitem__(self, name: str) -> ServiceOutputs:
        return self.outputs[name]

    def __len__(self) -> int:
        return len(self.service_names)
