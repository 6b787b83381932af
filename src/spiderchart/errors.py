"""Error and warning types raised while composing a chart."""


class ConfigurationError(ValueError):
    """Invalid chart configuration or data, detected before any drawing.

    Attributes:
        field: Name of the setting or invariant that was violated.
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class DegenerateInputWarning(UserWarning):
    """All values are zero, so every series collapses to the center point."""
