class AppException(Exception):
    """Base application exception."""

    pass


class ConfigurationError(AppException):
    """Required configuration is missing or invalid."""

    pass


class UpstreamServiceError(AppException):
    """An external service call failed; a later retry may succeed."""

    pass
