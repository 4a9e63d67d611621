from dishka import provide

from nsync.config import Config
from nsync.domain.recipe.port.key_factory import KeyFactory
from nsync.domain.recipe.port.route_translator import RouteTranslator
from nsync.domain.recipe.service.builder import DockerRecipeBuilder
from nsync.util.di.base import Provider
from nsync.util.di.scope import Scope


class RecipeProvider(Provider):
    @provide(scope=Scope.UOW)
    def get_builder(
        self,
        config: Config,
        key_factory: KeyFactory,
        route_translator: RouteTranslator,
    ) -> DockerRecipeBuilder:
        return DockerRecipeBuilder(
            config=config,
            key_factory=key_factory,
            route_translator=route_translator,
        )
