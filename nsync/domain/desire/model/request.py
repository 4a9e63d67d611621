"""Desire-app request as sent by the cloud controller."""

from enum import StrEnum
from typing import Any

from pydantic import ConfigDict, Field

from nsync.domain.shared.model.value import ValueObject


class HealthCheckType(StrEnum):
    UNSPECIFIED = ""
    PORT = "port"
    NONE = "none"


class EnvironmentVariable(ValueObject):
    name: str
    value: str


class DesireAppRequest(ValueObject):
    """Request to run an application with the given image, limits and routes.

    Exactly one app source is expected: ``docker_image_url`` for container
    images or ``droplet_uri`` for buildpack droplets. Only the container
    source is handled by this service.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    process_guid: str
    docker_image_url: str = ""
    droplet_uri: str = ""
    stack: str = ""
    num_instances: int = 0
    memory_mb: int = 0
    disk_mb: int = 0
    file_descriptors: int = 0  # 0 = platform default
    environment: list[EnvironmentVariable] = Field(default_factory=list)
    start_command: str = ""
    execution_metadata: str = ""  # JSON blob produced by image inspection
    routing_info: dict[str, Any] = Field(default_factory=dict)
    health_check_type: HealthCheckType = HealthCheckType.UNSPECIFIED
    health_check_timeout_in_seconds: int = 0
    allow_ssh: bool = False
    log_guid: str = ""
    etag: str = ""
    egress_rules: list[dict[str, Any]] = Field(default_factory=list)
