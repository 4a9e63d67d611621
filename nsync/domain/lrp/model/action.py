"""Executable action graph for desired LRPs.

Actions form a tree. Leaves do work (download, run); composite actions tell
the executor how to run their children:

- serial: one after another, each must succeed before the next starts
- codependent: all at once; when any child exits the whole group is torn down
- parallel: all at once; the group succeeds when every child succeeds
- timeout: the child must succeed within the given duration

The union is discriminated on ``type`` so a serialized tree round-trips
through JSON without losing variant information.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import ConfigDict, Field

from nsync.domain.desire.model.request import EnvironmentVariable
from nsync.domain.shared.model.value import ValueObject


class ResourceLimits(ValueObject):
    nofile: int | None = None


class DownloadAction(ValueObject):
    type: Literal["download"] = "download"
    from_: str = Field(alias="from")
    to: str
    cache_key: str = ""
    user: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class RunAction(ValueObject):
    type: Literal["run"] = "run"
    user: str
    path: str
    args: list[str] = Field(default_factory=list)
    env: list[EnvironmentVariable] = Field(default_factory=list)
    resource_limits: ResourceLimits = Field(default_factory=ResourceLimits)
    log_source: str = ""


class SerialAction(ValueObject):
    type: Literal["serial"] = "serial"
    actions: list[Action]


class CodependentAction(ValueObject):
    type: Literal["codependent"] = "codependent"
    actions: list[Action]


class ParallelAction(ValueObject):
    type: Literal["parallel"] = "parallel"
    actions: list[Action]


class TimeoutAction(ValueObject):
    type: Literal["timeout"] = "timeout"
    action: Action
    timeout_ms: int


Action = Annotated[
    Union[
        DownloadAction,
        RunAction,
        SerialAction,
        CodependentAction,
        ParallelAction,
        TimeoutAction,
    ],
    Field(discriminator="type"),
]

SerialAction.model_rebuild()
CodependentAction.model_rebuild()
ParallelAction.model_rebuild()
TimeoutAction.model_rebuild()


def serial(*actions: Action) -> SerialAction:
    return SerialAction(actions=list(actions))


def codependent(*actions: Action) -> CodependentAction:
    return CodependentAction(actions=list(actions))


def parallel(*actions: Action) -> ParallelAction:
    return ParallelAction(actions=list(actions))


def timeout(action: Action, seconds: float) -> TimeoutAction:
    return TimeoutAction(action=action, timeout_ms=int(seconds * 1000))
