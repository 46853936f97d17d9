"""
Error taxonomy for the enhancement flow and editing sessions.

Every enhancement failure is an EnhancementError carrying a user-facing
message, optional diagnostic details and the HTTP status the API answers with.
"""
from typing import Optional


class EnhancementError(Exception):
    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigurationError(EnhancementError):
    """Credential or provider settings missing. Not retried."""
    status_code = 500


class UpstreamTimeoutError(EnhancementError, TimeoutError):
    status_code = 504


class UpstreamError(EnhancementError):
    """Transport failure or non-success status from the provider."""
    status_code = 502

    def __init__(self, message: str, status: Optional[int] = None, details: Optional[str] = None):
        super().__init__(message, details)
        self.status = status


class UpstreamFormatError(EnhancementError):
    """Provider envelope unparseable or missing the message content."""
    status_code = 502


class ContentParseError(EnhancementError):
    """Model reply holds no parseable JSON object. `raw` is the reply text."""
    status_code = 502

    def __init__(self, message: str, raw: str):
        super().__init__(message, details=raw)
        self.raw = raw


class SchemaValidationError(EnhancementError):
    status_code = 502

    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message, details=raw)
        self.raw = raw


class SessionStateError(Exception):
    """Operation not allowed in the session's current state."""


class SessionNotFound(KeyError):
    pass
