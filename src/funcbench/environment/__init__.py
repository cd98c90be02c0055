"""Execution environments: where the repository comes from and where results go."""

from funcbench.environment.base import Environment
from funcbench.environment.context import EnvironmentContext
from funcbench.environment.exceptions import DeliveryError, EnvironmentSetupError
from funcbench.environment.factory import select_environment
from funcbench.environment.github import GitHubActionsEnvironment
from funcbench.environment.github_client import GitHubClient
from funcbench.environment.local import LocalEnvironment

__all__ = [
    "DeliveryError",
    "Environment",
    "EnvironmentContext",
    "EnvironmentSetupError",
    "GitHubActionsEnvironment",
    "GitHubClient",
    "LocalEnvironment",
    "select_environment",
]
