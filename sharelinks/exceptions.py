"""Application-level exceptions.

Service errors are the outcomes the HTTP boundary translates into status codes.
Each class carries a stable `error_code` so callers can tell apart outcomes
that share a status code (e.g. an unknown token and an orphaned share both
answer 404).

Classes:
    ShareLinksError:
        Base exception for all application-specific errors.

    ShareError:
        Base exception for share lifecycle outcomes.

    InvalidRequestError:
        Raised when required input is missing or malformed.

    DocumentNotFoundError:
        Raised when the referenced document does not exist (or no longer exists).

    ShareNotFoundError:
        Raised when a share token never existed or was revoked.

    LinkExpiredError:
        Raised when a share token exists but is past its expiry.

    InternalError:
        Raised on storage failures or unrecoverable token collisions.

    ConfigurationError / BadConfigurationError:
        Raised when the application is misconfigured.
"""


class ShareLinksError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:sharelinks_error'


class ShareError(ShareLinksError):
    """Base exception for share lifecycle outcomes."""

    error_code = 'share:share_error'


class InvalidRequestError(ShareError):
    """Raised when required input is missing or malformed.

    The HTTP boundary may attach a more specific error code per offending field.
    """

    error_code = 'share:invalid_request'

    def __init__(self, message: str = '', error_code: str | None = None):
        super().__init__(message)
        if error_code is not None:
            self.error_code = error_code


class DocumentNotFoundError(ShareError):
    """Raised when the referenced document does not exist."""

    error_code = 'share:document_not_found'


class ShareNotFoundError(ShareError):
    """Raised when a share token never existed or has been revoked."""

    error_code = 'share:share_not_found'


class LinkExpiredError(ShareError):
    """Raised when a share token exists but is past its expiry."""

    error_code = 'share:link_expired'


class InternalError(ShareError):
    """Raised on storage failures or unrecoverable token collisions.

    The message is safe to show to clients; the underlying cause is chained.
    """

    error_code = 'share:internal_error'


class ConfigurationError(ShareLinksError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
