"""Custom Dishka scopes for nsync."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """nsync dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (config, key factory, route translator)
    - UOW: Unit of Work (one HTTP request or one CLI invocation)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
