class ConfigurationError(ValueError):
    """Raised when an analysis is requested with invalid configuration values"""
