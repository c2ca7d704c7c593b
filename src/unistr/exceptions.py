# Custom exceptions for unistr

class UnistrError(Exception):
    """Base exception for all application-specific errors."""
    pass

class NotFoundError(UnistrError):
    """Raised when a file cannot be found or read."""
    def __init__(self, path: str, message: str = "is not readable or does not exist"):
        self.path = path
        self.message = message
        super().__init__(f"File '{path}' {message}")

class InvalidArgumentError(UnistrError):
    """Raised when an argument has the wrong shape or an unsupported value."""
    pass

class ConfigError(UnistrError):
    """Raised for configuration-related problems."""
    pass
