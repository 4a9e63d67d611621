"""Desire-request validation ahead of recipe building."""

import logging

from nsync.domain.desire.model.request import DesireAppRequest
from nsync.domain.shared.error import ConflictingSources, MissingImageSource, UnknownLifecycle

logger = logging.getLogger(__name__)

DOCKER_LIFECYCLE = "docker"


def validate_request(request: DesireAppRequest, lifecycles: dict[str, str]) -> str:
    """Check the request can be built as a docker app.

    Returns:
        The lifecycle bundle path for the docker lifecycle.

    Raises:
        MissingImageSource: no docker image URL.
        ConflictingSources: both a docker image and a droplet are given.
        UnknownLifecycle: the docker lifecycle is not configured.
    """
    if not request.docker_image_url:
        error = MissingImageSource()
        _log_invalid(request, error)
        raise error

    if request.droplet_uri:
        error = ConflictingSources()
        _log_invalid(request, error)
        raise error

    lifecycle_path = lifecycles.get(DOCKER_LIFECYCLE)
    if lifecycle_path is None:
        logger.error(
            "Unknown lifecycle: %s",
            DOCKER_LIFECYCLE,
            extra={"process_guid": request.process_guid, "lifecycle": DOCKER_LIFECYCLE},
        )
        raise UnknownLifecycle(DOCKER_LIFECYCLE)

    return lifecycle_path


def _log_invalid(request: DesireAppRequest, error: Exception) -> None:
    logger.error(
        "Desired app invalid: %s",
        error,
        extra={"desired_app": request.model_dump(exclude={"environment"})},
    )
