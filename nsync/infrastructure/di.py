from dishka import from_context, provide

from nsync.config import Config
from nsync.domain.recipe.port.key_factory import KeyFactory
from nsync.domain.recipe.port.route_translator import RouteTranslator
from nsync.infrastructure.routing.cc_routes import CCRouteTranslator
from nsync.infrastructure.ssh.keys import ParamikoKeyFactory
from nsync.util.di.base import Provider
from nsync.util.di.scope import Scope


class InfrastructureProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_key_factory(self) -> KeyFactory:
        return ParamikoKeyFactory()

    @provide(scope=Scope.APP)
    def get_route_translator(self) -> RouteTranslator:
        return CCRouteTranslator()
