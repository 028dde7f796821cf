"""
Custom exceptions for the anonymizer CLI.
"""


class AnonymizerError(Exception):
    """Base exception for all anonymizer errors."""
    pass


class ConfigurationError(AnonymizerError):
    """Raised for invalid or contextually illegal options and settings."""
    pass


class UnknownGeneratorMethodError(ConfigurationError):
    """Raised when a fake data generator method name does not exist."""
    pass


class ResolutionError(AnonymizerError):
    """Raised when a user to keep cannot be found."""
    pass


class ExhaustionError(AnonymizerError):
    """Raised when no unused login could be generated."""
    pass
