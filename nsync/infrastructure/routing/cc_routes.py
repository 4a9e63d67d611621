"""Translate cloud-controller routing info into desired LRP routes.

The cloud controller sends routing info keyed by route kind::

    {"http_routes": [{"hostname": "app.example.com", "port": 8080}],
     "tcp_routes": [{"router_group_guid": "g1", "external_port": 60000}]}

HTTP routes are grouped by container port (and route service) into
``cf-router`` entries; TCP routes become ``tcp-router`` entries. Any other
kind is passed through as-is.
"""

from typing import Any

import logfire
from pydantic import ValidationError as PydanticValidationError

from nsync.domain.lrp.model.desired_lrp import Routes
from nsync.domain.recipe.port.route_translator import RouteTranslator
from nsync.domain.shared.error import RouteTranslationFailed
from nsync.domain.shared.model.value import ValueObject

CC_HTTP_ROUTES = "http_routes"
CC_TCP_ROUTES = "tcp_routes"
CF_ROUTER = "cf-router"
TCP_ROUTER = "tcp-router"


class CCHTTPRoute(ValueObject):
    hostname: str
    route_service_url: str = ""
    port: int = 0  # 0 = the app's primary port


class CCTCPRoute(ValueObject):
    router_group_guid: str
    external_port: int
    container_port: int = 0


class CFRoute(ValueObject):
    hostnames: list[str]
    port: int
    route_service_url: str | None = None


class TCPRoute(ValueObject):
    router_group_guid: str
    external_port: int
    container_port: int


def _route_list(kind: str, payload: Any) -> list[Any]:
    """A route kind's payload must be a list; ``null`` means no routes."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        logfire.error("Marshaling CC route info failed", kind=kind, payload=repr(payload))
        raise RouteTranslationFailed(
            f"invalid {kind}: expected a list, got {type(payload).__name__}"
        )
    return payload


class CCRouteTranslator(RouteTranslator):
    """Route translator for cloud-controller routing info."""

    def translate(self, routing_info: dict[str, Any], ports: list[int]) -> Routes:
        primary_port = ports[0] if ports else 0
        routes: Routes = {}

        for kind, payload in routing_info.items():
            try:
                if kind == CC_HTTP_ROUTES:
                    routes[CF_ROUTER] = self._http(payload, primary_port)
                elif kind == CC_TCP_ROUTES:
                    routes[TCP_ROUTER] = self._tcp(payload, primary_port)
                else:
                    routes[kind] = payload
            except PydanticValidationError as e:
                logfire.error("Marshaling CC route info failed", kind=kind, error=str(e))
                raise RouteTranslationFailed(f"invalid {kind}: {e}") from e

        return routes

    def _http(self, payload: Any, primary_port: int) -> list[dict[str, Any]]:
        grouped: dict[tuple[int, str], list[str]] = {}
        for route in [CCHTTPRoute.model_validate(r) for r in _route_list(CC_HTTP_ROUTES, payload)]:
            key = (route.port or primary_port, route.route_service_url)
            grouped.setdefault(key, []).append(route.hostname)

        return [
            CFRoute(
                hostnames=hostnames,
                port=port,
                route_service_url=route_service_url or None,
            ).model_dump(mode="json", exclude_none=True)
            for (port, route_service_url), hostnames in grouped.items()
        ]

    def _tcp(self, payload: Any, primary_port: int) -> list[dict[str, Any]]:
        return [
            TCPRoute(
                router_group_guid=route.router_group_guid,
                external_port=route.external_port,
                container_port=route.container_port or primary_port,
            ).model_dump(mode="json")
            for route in [CCTCPRoute.model_validate(r) for r in _route_list(CC_TCP_ROUTES, payload)]
        ]
