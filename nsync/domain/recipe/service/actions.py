"""Action graph construction for docker app recipes."""

import logging

from nsync.config import RecipeConfig
from nsync.domain.desire.model.request import DesireAppRequest, EnvironmentVariable, HealthCheckType
from nsync.domain.lrp.model.action import (
    Action,
    CodependentAction,
    DownloadAction,
    ParallelAction,
    ResourceLimits,
    RunAction,
    SerialAction,
    codependent,
    parallel,
    serial,
    timeout,
)
from nsync.domain.lrp.model.desired_lrp import SSHRoute
from nsync.domain.recipe.port.key_factory import KeyFactory, KeyPair
from nsync.domain.shared.error import KeyGenerationFailed, NsyncError
from nsync.domain.shared.model.value import ValueObject
from nsync.domain.shared.service import Service

logger = logging.getLogger(__name__)

LIFECYCLE_DIR = "/tmp/lifecycle"
LAUNCHER_PATH = f"{LIFECYCLE_DIR}/launcher"
SSHD_PATH = f"{LIFECYCLE_DIR}/diego-sshd"
HEALTHCHECK_PATH = f"{LIFECYCLE_DIR}/healthcheck"
FILE_SERVER_STATIC_PATH = "/v1/static/"

APP_LOG_SOURCE = "APP"
HEALTH_LOG_SOURCE = "HEALTH"

# Health probes always run with the platform's own descriptor ceiling.
HEALTHCHECK_FILE_DESCRIPTORS = 1024


class ActionGraph(ValueObject):
    """The three action roots of a recipe plus what the SSH side-channel adds."""

    setup: SerialAction
    action: CodependentAction
    monitor: Action | None = None
    ports: list[int]
    ssh_route: SSHRoute | None = None


def lifecycle_download_url(lifecycle_path: str, file_server_url: str) -> str:
    parts = [file_server_url, FILE_SERVER_STATIC_PATH, lifecycle_path]
    return "/".join(p.strip("/") for p in parts if p.strip("/"))


def lifecycle_cache_key(lifecycle: str) -> str:
    return f"{lifecycle.replace('/', '-', 1)}-lifecycle"


def lrp_env(env: list[EnvironmentVariable], port: int) -> list[EnvironmentVariable]:
    return [*env, EnvironmentVariable(name="PORT", value=str(port))]


def health_probe(ports: list[int], user: str) -> ParallelAction:
    """One healthcheck run per port, all probed at once."""
    return parallel(
        *(
            RunAction(
                user=user,
                path=HEALTHCHECK_PATH,
                args=[f"-port={port}"],
                log_source=HEALTH_LOG_SOURCE,
                resource_limits=ResourceLimits(nofile=HEALTHCHECK_FILE_DESCRIPTORS),
            )
            for port in ports
        )
    )


class ActionGraphBuilder(Service):
    """Builds setup, run and monitor actions for a docker app."""

    key_factory: KeyFactory
    config: RecipeConfig

    def build(
        self,
        request: DesireAppRequest,
        user: str,
        ports: list[int],
        lifecycle: str,
        lifecycle_url: str,
    ) -> ActionGraph:
        ports = list(ports)
        nofile = request.file_descriptors or self.config.file_descriptor_limit
        env = lrp_env(request.environment, ports[0])

        setup: list[Action] = [
            DownloadAction(
                from_=lifecycle_url,
                to=LIFECYCLE_DIR,
                cache_key=lifecycle_cache_key(lifecycle),
                user=user,
            )
        ]

        monitor: Action | None = None
        if request.health_check_type in (HealthCheckType.PORT, HealthCheckType.UNSPECIFIED):
            monitor = timeout(
                health_probe(ports, user), self.config.health_check_timeout_seconds
            )

        actions: list[Action] = [
            RunAction(
                user=user,
                path=LAUNCHER_PATH,
                args=["app", request.start_command, request.execution_metadata],
                env=env,
                log_source=APP_LOG_SOURCE,
                resource_limits=ResourceLimits(nofile=nofile),
            )
        ]

        ssh_route = None
        if request.allow_ssh:
            host_key = self._new_key_pair("host")
            user_key = self._new_key_pair("user")

            actions.append(
                RunAction(
                    user=user,
                    path=SSHD_PATH,
                    args=[
                        f"-address=0.0.0.0:{self.config.ssh_port}",
                        f"-hostKey={host_key.pem_encoded_private_key()}",
                        f"-authorizedKey={user_key.authorized_key()}",
                        "-inheritDaemonEnv",
                        "-logLevel=fatal",
                    ],
                    env=env,
                    resource_limits=ResourceLimits(nofile=nofile),
                )
            )
            ssh_route = SSHRoute(
                container_port=self.config.ssh_port,
                private_key=user_key.pem_encoded_private_key(),
                host_fingerprint=host_key.fingerprint(),
            )
            ports.append(self.config.ssh_port)

        return ActionGraph(
            setup=serial(*setup),
            action=codependent(*actions),
            monitor=monitor,
            ports=ports,
            ssh_route=ssh_route,
        )

    def _new_key_pair(self, purpose: str) -> KeyPair:
        try:
            return self.key_factory.new_key_pair(self.config.ssh_key_bits)
        except NsyncError:
            logger.error("New %s key pair failed", purpose)
            raise
        except Exception as e:
            logger.error("New %s key pair failed: %s", purpose, e)
            raise KeyGenerationFailed(f"failed to generate {purpose} key pair: {e}") from e
