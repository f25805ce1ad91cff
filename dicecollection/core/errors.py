"""Errors raised by the dice core."""


class InvalidConfiguration(ValueError):
    """Raised when dice or a histogram request are configured with invalid values."""
