"""Exceptions for configuration handling."""

from funcbench.exceptions import FuncbenchError

__all__ = ["ConfigurationError"]


class ConfigurationError(FuncbenchError):
    """Raised when CLI arguments or settings are invalid."""

    pass
