from common.core.exceptions import AppException, ConfigurationError


class DocumentStoreError(AppException):
    """A document store read or write failed."""

    pass


class DocumentStoreNotInitializedError(ConfigurationError):
    """The process-wide document store was used before init_document_store()."""

    pass
