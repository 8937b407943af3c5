"""Error types raised by zos_files operations."""


class ZosFilesError(Exception):
    """Base error for zos_files.

    Attributes:
        message: Human-readable error message
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingIdentifierError(ZosFilesError, ValueError):
    """Raised when a required data set or member name is missing."""

    pass


class RestClientError(ZosFilesError):
    """Raised when a z/OSMF REST request fails.

    Covers connection problems, timeouts and non-2xx responses.

    Attributes:
        message: Human-readable error message
        http_method: HTTP method of the failed request
        resource: Resource path of the failed request
        status_code: HTTP status code, if a response was received
        response_text: Raw response body, if a response was received
    """

    def __init__(
        self,
        message: str,
        *,
        http_method: str | None = None,
        resource: str | None = None,
        status_code: int | None = None,
        response_text: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_method = http_method
        self.resource = resource
        self.status_code = status_code
        self.response_text = response_text
