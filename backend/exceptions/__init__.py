from typing import Optional, Dict, Any

class TriageException(Exception):
    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

class ValidationException(TriageException):
    status_code = 400

    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Validation failed for {field}: {reason}",
            {"field": field, "reason": reason}
        )

class MalformedInputError(ValidationException):
    """Raised when a supplied URL has no host that can be parsed."""

    def __init__(self, value: str, reason: str = "could not parse host"):
        super().__init__("url", f"{reason} ({value!r})")

class BatchSizeException(ValidationException):
    def __init__(self, size: int, limit: int):
        super().__init__(
            "articles",
            f"expected between 1 and {limit} articles, got {size}"
        )

class ConfigurationException(TriageException):
    def __init__(self, setting: str):
        super().__init__(
            f"{setting} not configured",
            {"setting": setting}
        )

class LLMException(TriageException):
    status_code = 502

    def __init__(self, reason: str, recoverable: bool = True):
        super().__init__(
            f"LLM service error: {reason}",
            {"reason": reason, "recoverable": recoverable}
        )

    @property
    def recoverable(self) -> bool:
        return self.details["recoverable"]
