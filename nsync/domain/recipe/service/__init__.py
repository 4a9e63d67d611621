"""Recipe domain services."""

from .actions import ActionGraph, ActionGraphBuilder
from .builder import DockerRecipeBuilder
from .validation import validate_request

__all__ = ["ActionGraph", "ActionGraphBuilder", "DockerRecipeBuilder", "validate_request"]
