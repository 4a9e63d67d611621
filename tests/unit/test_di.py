"""Tests for the dishka container wiring."""

import pytest

from nsync.application.di import create_container, create_sync_container
from nsync.domain.recipe.port.key_factory import KeyFactory
from nsync.domain.recipe.port.route_translator import RouteTranslator
from nsync.domain.recipe.service.builder import DockerRecipeBuilder
from nsync.infrastructure.routing.cc_routes import CCRouteTranslator
from nsync.infrastructure.ssh.keys import ParamikoKeyFactory


class TestSyncContainer:
    def test_resolves_builder_in_uow(self, config):
        container = create_sync_container(config)
        try:
            with container() as uow:
                builder = uow.get(DockerRecipeBuilder)
                assert builder.config is config
                assert isinstance(builder.key_factory, ParamikoKeyFactory)
                assert isinstance(builder.route_translator, CCRouteTranslator)
        finally:
            container.close()

    def test_collaborators_are_app_scoped(self, config):
        container = create_sync_container(config)
        try:
            assert container.get(KeyFactory) is container.get(KeyFactory)
            assert isinstance(container.get(RouteTranslator), CCRouteTranslator)
        finally:
            container.close()


class TestAsyncContainer:
    @pytest.mark.asyncio
    async def test_resolves_builder_in_uow(self, config):
        container = create_container(config)
        try:
            async with container() as uow:
                builder = await uow.get(DockerRecipeBuilder)
                assert builder.config is config
        finally:
            await container.close()
