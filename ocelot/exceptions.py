"""
Exception hierarchy for Ocelot.

All custom exceptions inherit from OcelotError base class.
"""


class OcelotError(Exception):
    """Base exception for all Ocelot errors."""
    pass


# Argument Errors
class InvalidArgumentError(OcelotError):
    """
    Diagnostic value describing an invalid configuration argument.

    Instances are not normally raised; the validator publishes them on the
    emitter's ``"error"`` channel. ``name`` is a stable type tag that
    consumers can match on without importing this class.
    """

    name = "OcelotInvalidArgumentError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


# Configuration Errors
class ConfigurationError(OcelotError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass


class ConfigurationLoadError(ConfigurationError):
    """Raised when loading configuration fails."""
    pass


# SDK Errors
class SDKError(OcelotError):
    """Base exception for SDK-related errors."""
    pass


class InvalidLoggerError(SDKError):
    """Raised when a custom logger does not implement the SDK logger methods."""
    pass
