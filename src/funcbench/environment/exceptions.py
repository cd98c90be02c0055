"""Exceptions for execution environments and result delivery."""

from funcbench.exceptions import FuncbenchError

__all__ = ["DeliveryError", "EnvironmentSetupError"]


class EnvironmentSetupError(FuncbenchError):
    """Raised when an environment cannot provide a usable workspace."""

    pass


class DeliveryError(FuncbenchError):
    """Raised when posting a result or an error message fails.

    Delivery errors are logged by the pipeline and never replace the
    outcome of the comparison itself.
    """

    pass
