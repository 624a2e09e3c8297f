"""Project-wide exception types."""


class BenfordAuditError(Exception):
    """Base exception for all audit errors."""


class DegenerateInputError(BenfordAuditError):
    """Raised when a digit accumulator with no observations is scored."""


class NumericNonConvergenceError(BenfordAuditError):
    """Raised when a special-function evaluation exceeds its iteration cap."""


class DataSourceError(BenfordAuditError):
    """Raised when dataset discovery or reading fails."""


class ConfigError(BenfordAuditError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""


class ReportWriteError(BenfordAuditError):
    """Raised when a rendered report cannot be persisted."""
