"""Configuration for funcbench.

Provides environment-driven settings via pydantic-settings and the
per-invocation RunConfig.
"""

from funcbench.config.exceptions import ConfigurationError
from funcbench.config.models import RunConfig
from funcbench.config.settings import (
    BenchmarkSettings,
    GitHubSettings,
    Settings,
    get_settings,
)

__all__ = [
    "BenchmarkSettings",
    "ConfigurationError",
    "GitHubSettings",
    "RunConfig",
    "Settings",
    "get_settings",
]
