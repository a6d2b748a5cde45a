class ConfigError(ValueError):
    """Invalid run configuration, raised before any request is issued."""
