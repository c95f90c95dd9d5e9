class ConfigurationError(ValueError):
    """Raised when clock options or hand behaviors are out of range."""
