from dishka import Provider as DishkaProvider

from nsync.util.di.scope import Scope


class Provider(DishkaProvider):
    """Dishka provider defaulting to application scope."""

    scope = Scope.APP
