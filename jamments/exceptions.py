"""Exceptions raised by the Jamments client."""


class JammentsError(Exception):
    """Base class for all Jamments client errors."""

    pass


class ConfigurationError(JammentsError, ValueError):
    """Exception raised when the client is constructed with invalid options."""

    pass


class TransportError(JammentsError):
    """Exception raised when the request never got a response."""

    pass


class HttpStatusError(JammentsError):
    """Exception raised when the API answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class FetchError(JammentsError):
    """Exception raised when reading cached files fails."""

    pass


class FetchTransportError(FetchError, TransportError):
    pass


class FetchStatusError(FetchError, HttpStatusError):
    pass


class SubmitError(JammentsError):
    """Exception raised when a mutating request is rejected or fails."""

    pass


class SubmitTransportError(SubmitError, TransportError):
    pass


class SubmitStatusError(SubmitError, HttpStatusError):
    pass


class DanglingReferenceError(JammentsError):
    """Exception raised when a comment points to a parent that was not fetched."""

    def __init__(self, comment_id: str, parent_id: str):
        super().__init__(
            f"Comment '{comment_id}' references unknown parent '{parent_id}'"
        )
        self.comment_id = comment_id
        self.parent_id = parent_id
