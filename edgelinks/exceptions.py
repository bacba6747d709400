"""Application-specific exceptions.

Every exception carries an `error_code` so the HTTP layer can tell the
failure kinds apart without inspecting messages.

Classes:
    EdgeLinksError:
        Base class for all application errors.

    ValidationError:
        Base class for input that fails validation before any store access.
        InvalidUrlError and InvalidIdentifierError derive from it.

    IdentifierTakenError:
        Raised when a custom identifier is already allocated.

    LinkNotFoundError:
        Raised when an identifier cannot be resolved.

    AllocationExhaustedError:
        Raised when every random identifier attempt collided.

    ConfigurationError:
        Base class for configuration errors.

Example:
    >>> from edgelinks.exceptions import IdentifierTakenError
    >>> IdentifierTakenError("Identifier 'my-link' is already taken.").error_code
    'IDENTIFIER_TAKEN'
"""


class EdgeLinksError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'EDGELINKS_ERROR'


class ValidationError(EdgeLinksError):
    """Raised when caller input is rejected before reaching the store."""

    error_code = 'VALIDATION_ERROR'


class InvalidUrlError(ValidationError):
    """Raised when the target URL is missing or not http(s)."""

    error_code = 'INVALID_URL'


class InvalidIdentifierError(ValidationError):
    """Raised when a custom identifier does not match the identifier format."""

    error_code = 'INVALID_IDENTIFIER'


class IdentifierTakenError(EdgeLinksError):
    """Raised when a custom identifier is already mapped to a URL."""

    error_code = 'IDENTIFIER_TAKEN'


class LinkNotFoundError(EdgeLinksError):
    """Raised when an identifier does not resolve to a target URL."""

    error_code = 'LINK_NOT_FOUND'


class AllocationExhaustedError(EdgeLinksError):
    """Raised when no free random identifier was found within the attempt budget."""

    error_code = 'ALLOCATION_EXHAUSTED'


class ConfigurationError(EdgeLinksError):
    """Base exception for all configuration errors."""

    error_code = 'CONFIGURATION_ERROR'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'MISSING_ENVIRONMENT_VARIABLE'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'BAD_CONFIGURATION'
