"""Project-wide exception types."""

class ScenarioEngineError(Exception):
    """Base exception for all engine errors."""


class ConfigError(ScenarioEngineError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""


class DataError(ScenarioEngineError):
    """Raised when price or transaction data cannot be used."""


class InsufficientDataError(DataError):
    """Raised when data does not meet minimum sample requirements."""


class InvalidPriceError(DataError):
    """Raised when a price sequence is malformed or holds non-positive values."""


class EmptyPathError(DataError):
    """Raised when a resampler needs a non-empty base transaction path."""


class PathGenerationError(ScenarioEngineError):
    """Raised when the price generator yields an unusable path."""
