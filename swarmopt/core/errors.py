"""Error types for tour optimization."""


class ConfigurationError(ValueError):
    """Invalid target set or tunable, detected before any iteration runs."""
