"""
Normalized service model handed to the transformer.

One ServiceConfig per application service. Models are frozen so nothing
downstream can alter the input while a conversion run is in progress.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_VOLUME_MODES = {"ro", "rw"}


class PortSpec(BaseModel):
    """A container port, optionally published on the host."""

    container_port: int = Field(..., description="Port the container listens on.")
    protocol: str = Field(default="TCP", description="TCP or UDP.")
    host_port: int | None = Field(
        default=None, description="Published (host-facing) port, if any."
    )
    node_port: int | None = Field(
        default=None, description="Explicit node-facing port for the Service."
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _parse_short_syntax(cls, data: Any) -> Any:
        # "[host:]container[/protocol]", an IP prefix on host ports is ignored
        if isinstance(data, int):
            return {"container_port": data}
        if not isinstance(data, str):
            return data

        spec, _, protocol = data.partition("/")
        parts = spec.split(":")
        result: dict[str, Any] = {"container_port": parts[-1]}
        if len(parts) > 1 and parts[-2]:
            result["host_port"] = parts[-2]
        if protocol:
            result["protocol"] = protocol
        return result

    @field_validator("protocol", mode="before")
    @classmethod
    def _normalize_protocol(cls, v: Any) -> Any:
        if v is None or v == "":
            return "TCP"
        if isinstance(v, str):
            return v.upper()
        return v


class VolumeSpec(BaseModel):
    """
    A volume mounted into the service container.

    Nothing here rejects a spec without a container path: deciding what to
    do with such a spec belongs to the field mappers.
    """

    name: str | None = Field(default=None, description="Named volume, if any.")
    host: str | None = Field(default=None, description="Host path to bind.")
    container: str = Field(default="", description="Mount path in the container.")
    mode: str | None = Field(default=None, description="'ro' or 'rw'.")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _parse_short_syntax(cls, data: Any) -> Any:
        # "[source:]container[:mode]"; a source that is not a path is a name
        if not isinstance(data, str):
            return data

        parts = data.split(":")
        mode = None
        if len(parts) > 1 and parts[-1] in _VOLUME_MODES:
            mode = parts.pop()

        source = None
        if len(parts) >= 2:
            source, container = parts[0], ":".join(parts[1:])
        else:
            container = parts[0]

        result: dict[str, Any] = {"container": container, "mode": mode}
        if source:
            if source.startswith(("/", ".", "~")):
                result["host"] = source
            else:
                result["name"] = source
        return result

    @property
    def read_only(self) -> bool:
        return self.mode == "ro"


class ServiceConfig(BaseModel):
    """A single application service from the normalized model."""

    name: str = Field(..., description="Service name, also used for resources.")
    image: str = Field(default="", description="Container image reference.")
    container_name: str | None = Field(
        default=None,
        description=(
            "Accepted for compatibility and ignored: containers are always "
            "named after the service."
        ),
    )
    command: list[str] = Field(
        default_factory=list, description="Ordered container command."
    )
    args: list[str] = Field(
        default_factory=list, description="Ordered container arguments."
    )
    environment: dict[str, str] = Field(
        default_factory=dict,
        description="Environment variables, in declaration order.",
    )
    working_dir: str = Field(default="", description="Container working directory.")
    restart: str = Field(
        default="",
        description="Restart token: '', 'always', 'no' or 'on-failure'.",
    )
    privileged: bool = Field(default=False, description="Run privileged.")
    annotations: dict[str, str] = Field(
        default_factory=dict, description="Free-form annotations."
    )
    volumes: list[VolumeSpec] = Field(default_factory=list)
    ports: list[PortSpec] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("command", "args", mode="before")
    @classmethod
    def _split_string_command(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.split()
        if v is None:
            return []
        return v

    @field_validator("environment", mode="before")
    @classmethod
    def _environment_from_list(cls, v: Any) -> Any:
        if v is None:
            return {}
        if isinstance(v, list):
            env = {}
            for entry in v:
                key, _, value = str(entry).partition("=")
                env[key] = value
            return env
        if isinstance(v, dict):
            return {k: "" if val is None else str(val) for k, val in v.items()}
        return v

    @field_validator("annotations", mode="before")
    @classmethod
    def _stringify_annotations(cls, v: Any) -> Any:
        if v is None:
            return {}
        if isinstance(v, dict):
            return {k: str(val) for k, val in v.items()}
        return v

    @field_validator("restart", mode="before")
    @classmethod
    def _none_restart(cls, v: Any) -> Any:
        return "" if v is None else v


class ServiceModel(BaseModel):
    """The normalized application: service name to ServiceConfig, in order."""

    services: dict[str, ServiceConfig] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _inject_service_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        services = data.get("services")
        if not isinstance(services, dict):
            return data

        named = {}
        for name, config in services.items():
            if isinstance(config, dict):
                config = {"name": name, **config}
            elif config is None:
                config = {"name": name}
            named[name] = config
        return {**data, "services": named}

    @model_validator(mode="after")
    def _check_names_match_keys(self) -> "ServiceModel":
        for key, service in self.services.items():
            if service.name != key:
                raise ValueError(
                    f"Service key '{key}' does not match its name '{service.name}'"
                )
        return self

    def __len__(self) -> int:
        return len(self.services)
