"""State machine abstractions for funcbench.

This module provides a generic mixin for state machine functionality
that can be shared across state-based entities.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Generic, TypeVar

__all__ = ["StateMachineMixin"]

StateT = TypeVar("StateT")


class StateMachineMixin(Generic[StateT]):
    """Mixin providing common state machine operations.

    Entities using this mixin define their own state storage and
    transition rules.

    Usage:
        Define class attributes:
        - _VALID_TRANSITIONS: dict[StateT, set[StateT]] - transition rules

        Define abstract methods to access current state:
        - _get_current_state() -> StateT

    Example:
        class Pipeline(StateMachineMixin[PipelineState]):
            _VALID_TRANSITIONS = {
                PipelineState.pending: {PipelineState.validate_workspace},
                PipelineState.validate_workspace: {PipelineState.resolve_target},
            }

            def _get_current_state(self) -> PipelineState:
                return self._state

    """

    _VALID_TRANSITIONS: dict[StateT, set[StateT]]

    @abstractmethod
    def _get_current_state(self) -> StateT:
        """Get the current state of the entity."""
        ...

    def can_transition_to(self, new_state: StateT) -> bool:
        """Check if a transition to the given state is valid.

        Args:
            new_state: The target state to check.

        Returns:
            True if the transition is allowed, False otherwise.

        """
        current = self._get_current_state()
        valid_targets = self._VALID_TRANSITIONS.get(current, set())
        return new_state in valid_targets

    def get_valid_transitions(self) -> list[StateT]:
        """Get the list of valid states the entity can transition to."""
        current = self._get_current_state()
        return list(self._VALID_TRANSITIONS.get(current, set()))
