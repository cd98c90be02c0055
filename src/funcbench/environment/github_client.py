"""Minimal GitHub REST client for pull request comments."""

from __future__ import annotations

import httpx

from funcbench.config.defaults import (
    DEFAULT_GITHUB_API_URL,
    DEFAULT_GITHUB_REQUEST_TIMEOUT_SECONDS,
)
from funcbench.environment.exceptions import DeliveryError
from funcbench.logging_config import get_logger

__all__ = ["GitHubClient"]

logger = get_logger(__name__)


class GitHubClient:
    """Posts comments on one pull request.

    Attributes:
        owner: Repository owner or organisation.
        repo: Repository name.
        pr_number: Pull request number.
        dry_run: Log comments instead of posting them.

    """

    def __init__(
        self,
        owner: str,
        repo: str,
        pr_number: int,
        token: str | None,
        api_url: str = DEFAULT_GITHUB_API_URL,
        dry_run: bool = False,
        timeout_seconds: float = DEFAULT_GITHUB_REQUEST_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        self.pr_number = pr_number
        self.dry_run = dry_run
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout_seconds
        self._transport = transport

    @property
    def comments_url(self) -> str:
        return f"{self._api_url}/repos/{self.owner}/{self.repo}/issues/{self.pr_number}/comments"

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def post_comment(self, body: str) -> None:
        """Create an issue comment on the pull request.

        Raises:
            DeliveryError: If the request fails or GitHub rejects it.

        """
        if self.dry_run:
            logger.info(
                "github_comment_skipped",
                reason="dry_run",
                pr=self.pr_number,
                body=body,
            )
            return

        try:
            async with httpx.AsyncClient(
                headers=self._headers(),
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(self.comments_url, json={"body": body})
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise DeliveryError(
                f"posting comment to {self.owner}/{self.repo}#{self.pr_number} failed: {e}"
            ) from e

        logger.info("github_comment_posted", pr=self.pr_number, status=response.status_code)
