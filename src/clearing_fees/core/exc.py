"""
Core exception types for clearing_fees.core.

These are dependency-free and may be imported by all modules.
"""

__all__ = [
    "MathError",
    "ConfigError",
    "OperationPausedError",
]


class MathError(ArithmeticError):
    """Raised when checked arithmetic would overflow, underflow, divide by zero,
    or when a cast would lose information.

    This is the only error the fee calculators raise. Callers must abort the
    whole settlement on it; no partial fee is ever valid.
    """
    pass


class ConfigError(ValueError):
    """Raised when a fee structure cannot be built from the given values."""
    pass


class OperationPausedError(Exception):
    """Raised when a fill is attempted while its operation is paused.

    Attributes
    ----------
    operation : Any
        The paused operation flag that blocked the fill.
    paused_operations : int
        The full paused-operations bit mask, for context.
    """

    def __init__(self, operation, paused_operations):
        super().__init__(
            f"Operation {operation!r} is paused (mask={paused_operations:#06b})"
        )
        self.operation = operation
        self.paused_operations = paused_operations
