"""Routing infrastructure - cloud-controller route translation.

Import modules directly:
    from nsync.infrastructure.routing.cc_routes import CCRouteTranslator
"""

__all__: list[str] = []
