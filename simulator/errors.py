class InvalidDirectionError(ValueError):
    """Move direction outside L / R / N."""


class InvalidComplexityError(ValueError):
    """Complexity must be a non-negative integer."""


class MachineHaltedError(RuntimeError):
    """step() called on a machine that is no longer running."""
