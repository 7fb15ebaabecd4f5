"""Custom exception classes for the API.

Every ``APIError`` is rendered by the application as ``{"error": message}``
with its ``status_code``.
"""


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(APIError):
    """The server is missing required configuration."""

    def __init__(self, message: str = "API key not configured on server"):
        super().__init__(message=message, status_code=500)


class ValidationError(APIError):
    """Bad or missing request input."""

    def __init__(self, message: str = "Image data is required"):
        super().__init__(message=message, status_code=400)


class MethodNotAllowedError(APIError):
    """HTTP method not supported by the endpoint."""

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message=message, status_code=405)


class PayloadTooLargeError(APIError):
    """Request body exceeds the configured cap."""

    def __init__(self, message: str = "Request body too large"):
        super().__init__(message=message, status_code=413)


class UpstreamError(APIError):
    """Inference API answered with a non-success status.

    The upstream status code is passed through to the caller unchanged.
    """

    def __init__(self, status_code: int, message: str = "Failed to analyze image"):
        super().__init__(message=message, status_code=status_code)


class EmptyResultError(APIError):
    """Inference API succeeded but returned no usable text."""

    def __init__(self, message: str = "No response from AI"):
        super().__init__(message=message, status_code=500)


class TransportError(APIError):
    """Network failure talking to the inference API."""

    def __init__(self, message: str):
        super().__init__(message=message or "Internal server error", status_code=500)


class InternalServerError(APIError):
    """Unexpected failure while handling a request."""

    def __init__(self, message: str = ""):
        super().__init__(message=message or "Internal server error", status_code=500)
