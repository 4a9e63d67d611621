from dishka import AsyncContainer, Container, make_async_container, make_container

from nsync.config import Config
from nsync.domain.recipe.util.di import RecipeProvider
from nsync.infrastructure.di import InfrastructureProvider
from nsync.util.di.scope import Scope


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        InfrastructureProvider(),
        RecipeProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )


def create_sync_container(config: Config | None = None) -> Container:
    """Synchronous container for the CLI, same providers as the server."""
    config = config or Config()  # type: ignore[call-arg]

    return make_container(
        InfrastructureProvider(),
        RecipeProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]
    )
