# qcomposer/errors.py

class QComposerError(ValueError):
    """Base class for bad simulation input."""


class ConfigurationError(QComposerError):
    """Qubit count, shot count, backend or probability vector out of range."""


class InvalidGateError(QComposerError):
    """Gate placement that cannot be applied to the register."""


class NormalizationError(QComposerError):
    """Statevector norm drifted away from 1."""
