"""textmask exception hierarchy.

The masking engine itself never raises: unknown mask types fall back to the
passthrough handler and malformed values degrade to best-effort output. The
exceptions below only surface at the configuration boundary, when mask
profiles are loaded from files or looked up by name.
"""

from typing import Any, Dict, List, Optional


class TextMaskError(Exception):
    """Base exception for all textmask errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error identifier
        context: Additional error context and metadata
        recovery_suggestions: List of suggested recovery actions
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        recovery_suggestions: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._default_error_code()
        self.context = context or {}
        self.recovery_suggestions = recovery_suggestions or []

    def _default_error_code(self) -> str:
        """Generate default error code based on exception class name."""
        return self.__class__.__name__.upper().replace("ERROR", "_ERROR")

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context to the error."""
        self.context[key] = value

    def add_recovery_suggestion(self, suggestion: str) -> None:
        """Add a recovery suggestion to help users resolve the error."""
        if suggestion not in self.recovery_suggestions:
            self.recovery_suggestions.append(suggestion)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to structured dictionary for logging/reporting."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "recovery_suggestions": self.recovery_suggestions,
        }


class ConfigurationError(TextMaskError):
    """Raised when a mask profile file or profile lookup is invalid."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        profile_name: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        if config_file:
            self.add_context("config_file", config_file)
        if profile_name:
            self.add_context("profile_name", profile_name)


def create_configuration_error(
    message: str,
    config_file: str,
    original_error: Optional[Exception] = None,
) -> ConfigurationError:
    """Create a configuration error with standard context."""
    error = ConfigurationError(message=message, config_file=config_file)

    if original_error:
        error.add_context("original_error", str(original_error))
        error.add_context("original_error_type", type(original_error).__name__)

    error.add_recovery_suggestion("Check that the file is valid YAML")
    error.add_recovery_suggestion(
        "Each profile under 'masks' needs a 'type' and an optional 'options' mapping"
    )
    return error
