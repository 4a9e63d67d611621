"""Docker recipe builder - turns a desire-app request into a desired LRP."""

import logging

from nsync.config import Config
from nsync.domain.desire.model.request import DesireAppRequest
from nsync.domain.lrp.model.desired_lrp import APP_LRP_DOMAIN, DesiredLRP
from nsync.domain.recipe.model.execution_metadata import ExecutionMetadata
from nsync.domain.recipe.model.image import convert_docker_uri
from nsync.domain.recipe.port.key_factory import KeyFactory
from nsync.domain.recipe.port.route_translator import RouteTranslator
from nsync.domain.recipe.service.actions import ActionGraphBuilder, lifecycle_download_url
from nsync.domain.recipe.service.validation import DOCKER_LIFECYCLE, validate_request
from nsync.domain.shared.error import MalformedMetadata
from nsync.domain.shared.service import Service

logger = logging.getLogger(__name__)

DIEGO_SSH_ROUTE = "diego-ssh"

MIN_CPU_PROXY = 256
MAX_CPU_PROXY = 8192


def cpu_weight(memory_mb: int) -> int:
    """Scale memory into a 1..100 CPU share weight."""
    if memory_mb > MAX_CPU_PROXY:
        return 100
    if memory_mb < MIN_CPU_PROXY:
        return 1
    return 99 * (memory_mb - MIN_CPU_PROXY) // (MAX_CPU_PROXY - MIN_CPU_PROXY) + 1


class DockerRecipeBuilder(Service):
    """Builds desired LRPs for apps backed by a docker image.

    Building is synchronous and stateless. The only side effects are calls to
    the key factory when SSH is enabled, and logging of rejected requests.
    Any failure propagates unchanged to the caller.
    """

    config: Config
    key_factory: KeyFactory
    route_translator: RouteTranslator

    def build(self, request: DesireAppRequest) -> DesiredLRP:
        lifecycle_path = validate_request(request, self.config.lifecycles)
        lifecycle_url = lifecycle_download_url(lifecycle_path, self.config.file_server_url)

        root_fs = convert_docker_uri(request.docker_image_url)

        metadata = self._decode_metadata(request)
        user = metadata.run_as_user()
        ports = metadata.exposed_tcp_ports(self.config.recipe.default_port)

        routes = dict(self.route_translator.translate(request.routing_info, ports))

        graph = ActionGraphBuilder(
            key_factory=self.key_factory, config=self.config.recipe
        ).build(
            request,
            user=user,
            ports=ports,
            lifecycle=DOCKER_LIFECYCLE,
            lifecycle_url=lifecycle_url,
        )

        if graph.ssh_route is not None:
            routes[DIEGO_SSH_ROUTE] = graph.ssh_route.model_dump(mode="json")

        logger.debug(
            "Built desired LRP %s (root_fs=%s, ports=%s)",
            request.process_guid,
            root_fs,
            graph.ports,
        )

        return DesiredLRP(
            process_guid=request.process_guid,
            domain=APP_LRP_DOMAIN,
            instances=request.num_instances,
            routes=routes,
            annotation=request.etag,
            cpu_weight=cpu_weight(request.memory_mb),
            memory_mb=request.memory_mb,
            disk_mb=request.disk_mb,
            ports=graph.ports,
            root_fs=root_fs,
            log_guid=request.log_guid,
            metrics_guid=request.log_guid,
            setup=graph.setup,
            action=graph.action,
            monitor=graph.monitor,
            start_timeout=request.health_check_timeout_in_seconds,
            egress_rules=request.egress_rules,
        )

    def extract_exposed_ports(self, request: DesireAppRequest) -> list[int]:
        """Ports the request's image exposes, without building a full recipe."""
        metadata = self._decode_metadata(request)
        return metadata.exposed_tcp_ports(self.config.recipe.default_port)

    def _decode_metadata(self, request: DesireAppRequest) -> ExecutionMetadata:
        try:
            return ExecutionMetadata.decode(request.execution_metadata)
        except MalformedMetadata:
            logger.error(
                "Parsing execution metadata failed",
                extra={"process_guid": request.process_guid},
            )
            raise
