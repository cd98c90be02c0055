"""Base exceptions for funcbench.

This module defines the root exception hierarchy for the whole package.
All domain-specific exceptions inherit from FuncbenchError.
"""

__all__ = ["FuncbenchError"]


class FuncbenchError(Exception):
    """Base exception for all funcbench errors.

    Provides a common exception type for clients to catch framework errors.
    """

    pass
