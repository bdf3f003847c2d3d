"""Exceptions raised by kglight."""


class KglightError(Exception):
    """
    Base class for session-fatal errors.

    Attributes:
        message: Human-readable error message.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InventoryLoadError(KglightError):
    """
    Raised when the inventory CSV cannot be loaded.

    Attributes:
        path: The dataset path that failed, if any.
    """

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{message}: {path}" if path else message)


class ConfigError(KglightError):
    """Raised when the configuration file is malformed."""
