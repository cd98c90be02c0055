"""Environment abstraction.

An environment provides the repository to benchmark and delivers the
outcome. The local variant works on the checkout funcbench was started in
and prints results; the GitHub Actions variant clones the pull request and
posts comments.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from funcbench.environment.context import EnvironmentContext
    from funcbench.git.repository import Repository
    from funcbench.models.benchmark import ComparisonReport

__all__ = ["Environment"]


class Environment(ABC):
    """Capability interface implemented by every execution environment.

    All environments must implement:
    - setup(): Obtain the workspace; called once before the pipeline runs
    - post_results(): Deliver a finished comparison
    - post_error(): Deliver a failure message
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the environment identifier (e.g. "local", "github-actions")."""
        ...

    @property
    @abstractmethod
    def context(self) -> EnvironmentContext:
        """Return the comparison target and benchmark filter."""
        ...

    @property
    @abstractmethod
    def repository(self) -> Repository:
        """Return the repository to benchmark.

        Raises:
            EnvironmentSetupError: If setup() has not completed.

        """
        ...

    @abstractmethod
    async def setup(self) -> None:
        """Prepare the workspace.

        Raises:
            EnvironmentSetupError: If the workspace cannot be prepared.

        """
        ...

    @abstractmethod
    async def post_results(self, report: ComparisonReport) -> None:
        """Deliver a comparison report.

        Raises:
            DeliveryError: If delivery fails.

        """
        ...

    @abstractmethod
    async def post_error(self, message: str) -> None:
        """Deliver a failure message.

        Raises:
            DeliveryError: If delivery fails.

        """
        ...
