"""Recipe routes - build desired LRPs from desire-app requests."""

import asyncio

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from nsync.domain.desire.model.request import DesireAppRequest
from nsync.domain.lrp.model.desired_lrp import DesiredLRP
from nsync.domain.recipe.service.builder import DockerRecipeBuilder

router = APIRouter(
    prefix="/recipes",
    tags=["recipes"],
    route_class=DishkaRoute,
)


class ExposedPortsResponse(BaseModel):
    process_guid: str
    ports: list[int]


@router.post("/docker")
async def build_docker_recipe(
    request: DesireAppRequest,
    builder: FromDishka[DockerRecipeBuilder],
) -> DesiredLRP:
    """Build the desired LRP for a docker-backed app.

    Building never touches the scheduler; the caller decides what to do with
    the returned recipe. SSH key generation is CPU bound, so the build runs
    in a worker thread.
    """
    return await asyncio.to_thread(builder.build, request)


@router.post("/docker/ports")
async def extract_exposed_ports(
    request: DesireAppRequest,
    builder: FromDishka[DockerRecipeBuilder],
) -> ExposedPortsResponse:
    """Report the ports the app's image exposes."""
    ports = await asyncio.to_thread(builder.extract_exposed_ports, request)
    return ExposedPortsResponse(process_guid=request.process_guid, ports=ports)
