"""Execution metadata attached to a desire request by image inspection.

The blob is JSON of the form::

    {"cmd": [...], "entrypoint": [...], "workdir": "/app",
     "ports": [{"Port": 8080, "Protocol": "tcp"}], "user": "vcap"}

Unknown keys are ignored and ``null`` reads as empty; known keys with the
wrong shape are rejected.
"""

import logging
from typing import Any

from pydantic import AliasChoices, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from nsync.domain.shared.error import MalformedMetadata, NoSupportedPortsFound
from nsync.domain.shared.model.value import ValueObject

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080
DEFAULT_USER = "root"
SUPPORTED_PROTOCOL = "tcp"


class PortDescriptor(ValueObject):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    port: int = Field(validation_alias=AliasChoices("Port", "port"), ge=0, le=65535)
    protocol: str = Field(validation_alias=AliasChoices("Protocol", "protocol"))


class ExecutionMetadata(ValueObject):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    cmd: list[str] = Field(default_factory=list)
    entrypoint: list[str] = Field(default_factory=list)
    workdir: str = ""
    exposed_ports: list[PortDescriptor] = Field(default_factory=list, alias="ports")
    user: str = ""

    @field_validator("cmd", "entrypoint", "exposed_ports", mode="before")
    @classmethod
    def _null_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("workdir", "user", mode="before")
    @classmethod
    def _null_str(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def decode(cls, blob: str) -> "ExecutionMetadata":
        """Decode the opaque metadata blob. An empty blob means no metadata."""
        if not blob:
            return cls()
        try:
            return cls.model_validate_json(blob)
        except PydanticValidationError as e:
            raise MalformedMetadata(str(e)) from e

    def exposed_tcp_ports(self, default_port: int = DEFAULT_PORT) -> list[int]:
        """Ports the application listens on, in declaration order.

        With no declared ports the platform default is used. Declared ports
        with an unsupported protocol are skipped; if that leaves nothing the
        image cannot be routed to.
        """
        if not self.exposed_ports:
            return [default_port]

        ports = [p.port for p in self.exposed_ports if p.protocol == SUPPORTED_PROTOCOL]
        if not ports:
            error = NoSupportedPortsFound([p.protocol for p in self.exposed_ports])
            logger.error(
                "Parsing exposed ports failed: %s",
                error.message,
                extra={"exposed_ports": [p.model_dump() for p in self.exposed_ports]},
            )
            raise error
        return ports

    def run_as_user(self) -> str:
        return self.user or DEFAULT_USER
