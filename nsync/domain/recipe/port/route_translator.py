"""Port for translating cloud-controller routing info into LRP routes."""

from abc import abstractmethod
from typing import Any, Protocol, runtime_checkable

from nsync.domain.lrp.model.desired_lrp import Routes
from nsync.domain.shared.port import Port


@runtime_checkable
class RouteTranslator(Port, Protocol):
    """Map generic routing metadata plus the app's ports to a route table."""

    @abstractmethod
    def translate(self, routing_info: dict[str, Any], ports: list[int]) -> Routes:
        """Build the route table.

        Raises:
            RouteTranslationFailed: if the routing info cannot be translated.
        """
        ...
