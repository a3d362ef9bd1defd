class ConfigurationError(ValueError):
    """Raised when dithering options are rejected before any pixel is touched."""
