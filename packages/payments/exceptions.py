from typing import Optional

from common.core.exceptions import ConfigurationError, UpstreamServiceError


class MissingAccessTokenError(ConfigurationError):
    """No provider access token is configured, so transactions cannot be verified."""

    pass


class TransactionLookupError(UpstreamServiceError):
    """The provider lookup failed; the notification should be redelivered."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text
