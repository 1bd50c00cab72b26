"""Custom exception hierarchy for trainreport."""


class TrainReportError(Exception):
    """Base exception for all package-specific failures."""


class ConfigurationError(TrainReportError):
    """Raised when a configuration file or payload cannot be used."""


class InvalidConfigurationError(ConfigurationError):
    """Raised when reporter settings fail validation."""
