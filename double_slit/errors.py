"""Exceptions raised by the simulator and its configuration store."""


class DoubleSlitError(Exception):
    """Base class for all package errors."""


class InvalidParametersError(DoubleSlitError, ValueError):
    """Separation, distance or wavelength is not strictly positive."""


class ConfigurationError(DoubleSlitError):
    pass


class ConfigurationValidationError(ConfigurationError):
    """A configuration was rejected before it reached the database."""

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.message = message
        self.field = field


class ConfigurationNotFoundError(ConfigurationError):
    def __init__(self, config_id: int):
        super().__init__(f"Configuration {config_id} not found")
        self.config_id = config_id
