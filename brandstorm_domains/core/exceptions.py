"""
Custom Exception Classes
"""
from typing import Optional, Dict, Any, List


class DomainSuggestException(Exception):
    """Base exception for all application exceptions"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "internal_error"
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API response"""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details
        }


# Validation Exceptions
class ValidationError(DomainSuggestException):
    """Raised when caller input is malformed or out of range"""

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[list] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors

        super().__init__(
            message=message,
            error_code="validation_error",
            status_code=400,
            details=details,
            **kwargs
        )


# Configuration Exceptions
class ConfigurationError(DomainSuggestException):
    """Raised when configuration is invalid or missing"""

    def __init__(self, message: str = "Configuration error", **kwargs):
        kwargs.setdefault("error_code", "configuration_error")
        super().__init__(
            message=message,
            status_code=500,
            **kwargs
        )


class MissingAPIKeyError(ConfigurationError):
    """Raised when required credentials for a provider are missing"""

    def __init__(
        self,
        api_name: str,
        missing: Optional[List[str]] = None,
        message: Optional[str] = None,
        **kwargs
    ):
        missing = missing or []
        if not message:
            if missing:
                message = (
                    f"{api_name} credentials not configured. "
                    f"Please set {', '.join(missing)}"
                )
            else:
                message = f"API key for {api_name} is missing"

        super().__init__(
            message=message,
            error_code="missing_api_key",
            details={"api": api_name, "missing": missing},
            **kwargs
        )


# External Service Exceptions
class ExternalServiceError(DomainSuggestException):
    """Raised when an external service fails"""

    def __init__(self, service: str, message: Optional[str] = None, **kwargs):
        msg = f"{service} API error"
        if message:
            msg += f": {message}"
        kwargs.setdefault("error_code", "external_service_error")
        details = kwargs.pop("details", {})
        details["service"] = service
        super().__init__(
            message=msg,
            status_code=502,
            details=details,
            **kwargs
        )
        self.service = service


class AvailabilityProviderError(ExternalServiceError):
    """Raised when a domain availability lookup fails"""

    def __init__(self, service: str, message: Optional[str] = None, **kwargs):
        super().__init__(
            service,
            message,
            error_code="availability_provider_error",
            **kwargs
        )


class TextGenerationError(ExternalServiceError):
    """Raised when the text generation provider fails"""

    def __init__(
        self,
        message: Optional[str] = None,
        service: str = "LLM",
        model: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if model:
            details["model"] = model
        super().__init__(
            service,
            message,
            error_code="text_generation_error",
            details=details,
            **kwargs
        )


__all__ = [
    "DomainSuggestException",
    "ValidationError",
    "ConfigurationError",
    "MissingAPIKeyError",
    "ExternalServiceError",
    "AvailabilityProviderError",
    "TextGenerationError",
]
