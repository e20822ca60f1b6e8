class FallbackError(Exception):
    """Raised when fallback marker extraction fails."""


class FallbackValidationError(FallbackError):
    """Raised when a fallback marker fails validation."""


class FallbackNetworkError(FallbackError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
