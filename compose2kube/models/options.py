from pathlib import Path

from pydantic import BaseModel, Field, NonNegativeInt, model_validator


class ConvertOptions(BaseModel):
    """
    Run-wide configuration for one conversion.

    Mirrors the command-line flags. Validation enforces the flag combinations
    that make sense for the chosen destination.
    """

    replicas: NonNegativeInt = Field(
        default=1,
        description="Desired replica count for ReplicationControllers and Deployments.",
    )
    create_deployment: bool = Field(default=False, description="Emit Deployments.")
    create_daemon_set: bool = Field(default=False, description="Emit DaemonSets.")
    create_replication_controller: bool = Field(
        default=False, description="Emit ReplicationControllers."
    )
    create_deployment_config: bool = Field(
        default=False, description="Emit OpenShift DeploymentConfigs."
    )
    create_chart: bool = Field(default=False, description="Package a Helm chart.")
    generate_yaml: bool = Field(
        default=False, description="Encode resources as YAML instead of JSON."
    )
    to_stdout: bool = Field(default=False, description="Write to standard output.")
    out_file: Path | None = Field(
        default=None, description="Write every resource into this single file."
    )
    input_file: Path | None = Field(
        default=None, description="Input model file; names the chart."
    )

    @model_validator(mode="after")
    def _check_destination(self) -> "ConvertOptions":
        if self.to_stdout and self.out_file is not None:
            raise ValueError("Cannot write to a file and to stdout at the same time")

        if self.create_chart and self.to_stdout:
            raise ValueError("Chart generation cannot be combined with stdout output")

        if not self.controller_flags_enabled:
            self.create_deployment = True

        single_destination = self.to_stdout or self.out_file is not None
        if single_destination and self.controller_flags_enabled > 1:
            raise ValueError(
                "Only one controller kind can be generated when writing "
                "to stdout or to a single file"
            )
        return self

    @property
    def controller_flags_enabled(self) -> int:
        """Number of controller kinds requested for emission."""
        return sum(
            (
                self.create_deployment,
                self.create_daemon_set,
                self.create_replication_controller,
                self.create_deployment_config,
            )
        )
