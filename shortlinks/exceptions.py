class ShortLinksError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shortlinks_error'


class MalformedRequestError(ShortLinksError):
    """Raised when an incoming request can't be parsed into the expected shape."""

    error_code = 'request:malformed_request_error'


class InvalidJSONError(MalformedRequestError):
    """Raised when a request body is not valid JSON."""

    error_code = 'request:invalid_json_error'


class MissingFieldError(MalformedRequestError):
    """Raised when a required request field is missing or has the wrong type."""

    error_code = 'request:missing_field_error'

    def __init__(self, field: str, message: str | None = None):
        super().__init__(message or f"missing '{field}'")
        self.field = field


class ConfigurationError(ShortLinksError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
