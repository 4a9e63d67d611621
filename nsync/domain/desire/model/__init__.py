"""Desire-request models."""

from .request import DesireAppRequest, EnvironmentVariable, HealthCheckType

__all__ = ["DesireAppRequest", "EnvironmentVariable", "HealthCheckType"]
