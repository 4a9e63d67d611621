"""Desired long-running process: the run-spec handed to the scheduler."""

from typing import Any

from pydantic import Field

from nsync.domain.desire.model.request import EnvironmentVariable
from nsync.domain.lrp.model.action import Action
from nsync.domain.shared.model.value import ValueObject

APP_LRP_DOMAIN = "cf-apps"
LRP_LOG_SOURCE = "CELL"

# Route payloads are opaque JSON-compatible values keyed by route kind
# (e.g. "cf-router", "tcp-router", "diego-ssh").
Routes = dict[str, Any]


class SSHRoute(ValueObject):
    """Route entry that lets the SSH proxy reach the in-container daemon."""

    container_port: int
    private_key: str
    host_fingerprint: str


class DesiredLRP(ValueObject):
    process_guid: str
    domain: str = APP_LRP_DOMAIN
    instances: int
    routes: Routes = Field(default_factory=dict)
    annotation: str = ""

    cpu_weight: int
    memory_mb: int
    disk_mb: int
    privileged: bool = False

    ports: list[int]
    root_fs: str

    log_guid: str
    log_source: str = LRP_LOG_SOURCE
    metrics_guid: str

    environment_variables: list[EnvironmentVariable] = Field(default_factory=list)
    setup: Action
    action: Action
    monitor: Action | None = None

    start_timeout: int
    egress_rules: list[dict[str, Any]] = Field(default_factory=list)
