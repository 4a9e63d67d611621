"""Desired LRP models: the run-spec and its action graph."""

from .action import (
    Action,
    CodependentAction,
    DownloadAction,
    ParallelAction,
    ResourceLimits,
    RunAction,
    SerialAction,
    TimeoutAction,
    codependent,
    parallel,
    serial,
    timeout,
)
from .desired_lrp import APP_LRP_DOMAIN, DesiredLRP, Routes, SSHRoute

__all__ = [
    "APP_LRP_DOMAIN",
    "Action",
    "CodependentAction",
    "DesiredLRP",
    "DownloadAction",
    "ParallelAction",
    "ResourceLimits",
    "Routes",
    "RunAction",
    "SSHRoute",
    "SerialAction",
    "TimeoutAction",
    "codependent",
    "parallel",
    "serial",
    "timeout",
]
