"""Recipe domain models."""

from .execution_metadata import DEFAULT_PORT, DEFAULT_USER, ExecutionMetadata, PortDescriptor
from .image import ImageReference, convert_docker_uri

__all__ = [
    "DEFAULT_PORT",
    "DEFAULT_USER",
    "ExecutionMetadata",
    "ImageReference",
    "PortDescriptor",
    "convert_docker_uri",
]
