"""Revision and comparison target models."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field

from funcbench.models.base import FrozenSchema
from funcbench.models.enums import ComparisonMode

__all__ = ["ComparisonTarget", "Revision", "WorkspaceHandle"]


class Revision(FrozenSchema):
    """A resolved commit.

    Attributes:
        hash: Full hexadecimal commit id.
        ref_name: Fully qualified reference name, if any (e.g. refs/heads/main).

    """

    hash: str = Field(..., pattern=r"^[0-9a-f]{40}([0-9a-f]{24})?$")
    ref_name: str | None = None

    @property
    def short_hash(self) -> str:
        """Abbreviated commit id for display."""
        return self.hash[:7]

    @property
    def branch_name(self) -> str | None:
        """Branch name with the ``refs/heads/`` namespace removed."""
        if self.ref_name is None:
            return None
        return self.ref_name.removeprefix("refs/heads/")

    def __str__(self) -> str:
        if self.ref_name:
            return f"{self.ref_name} ({self.short_hash})"
        return self.hash


class ComparisonTarget(FrozenSchema):
    """Resolved form of the user-supplied comparison target.

    Attributes:
        target: The raw target string as given by the user.
        mode: Self-compare or cross-revision.
        revision: Resolved revision; None in self-compare mode.

    """

    target: str
    mode: ComparisonMode
    revision: Revision | None = None


class WorkspaceHandle(FrozenSchema):
    """A checkout directory bound to exactly one revision."""

    path: Path
    revision: Revision
