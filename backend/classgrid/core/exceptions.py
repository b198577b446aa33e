class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_payload(self) -> dict:
        return {"message": self.message, "details": self.details}

class ValidationInputError(AppError):
    """Raised when a request is well-formed but cannot be evaluated as given."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=422, details=details)

class ConfigurationError(AppError):
    """Raised when a settings value cannot be turned into engine options."""
    def __init__(self, setting: str, value):
        super().__init__(
            f"Setting {setting} has unusable value {value!r}",
            status_code=500,
            details={"setting": setting},
        )
