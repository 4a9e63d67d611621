"""Recipe commands - build desired LRPs from desire-request files."""

import json
import sys
from pathlib import Path
from typing import NoReturn

import cyclopts
from pydantic import ValidationError as PydanticValidationError

from nsync.application.di import create_sync_container
from nsync.domain.desire.model.request import DesireAppRequest
from nsync.domain.recipe.service.builder import DockerRecipeBuilder
from nsync.domain.shared.error import NsyncError

app = cyclopts.App(name="recipe", help="Build desired LRP recipes")


def _load_request(path: Path) -> DesireAppRequest:
    try:
        return DesireAppRequest.model_validate_json(path.read_text())
    except FileNotFoundError:
        print(f"error: no such file: {path}", file=sys.stderr)
        sys.exit(1)
    except PydanticValidationError as e:
        print(f"error: invalid desire request in {path}:\n{e}", file=sys.stderr)
        sys.exit(1)


def _fail(error: NsyncError) -> NoReturn:
    print(f"error [{error.code}]: {error.message}", file=sys.stderr)
    sys.exit(2)


@app.command
def build(request_file: Path, *, indent: int = 2) -> None:
    """Build the desired LRP for a desire request and print it as JSON.

    Parameters
    ----------
    request_file
        JSON file holding the desire-app request.
    indent
        JSON indentation of the output.
    """
    request = _load_request(request_file)
    container = create_sync_container()
    try:
        with container() as uow:
            builder = uow.get(DockerRecipeBuilder)
            try:
                lrp = builder.build(request)
            except NsyncError as e:
                _fail(e)
            print(lrp.model_dump_json(indent=indent, by_alias=True))
    finally:
        container.close()


@app.command
def ports(request_file: Path) -> None:
    """Print the ports the request's image exposes."""
    request = _load_request(request_file)
    container = create_sync_container()
    try:
        with container() as uow:
            builder = uow.get(DockerRecipeBuilder)
            try:
                exposed = builder.extract_exposed_ports(request)
            except NsyncError as e:
                _fail(e)
            print(json.dumps(exposed))
    finally:
        container.close()
