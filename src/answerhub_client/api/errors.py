"""
Exception hierarchy for the AnswerHub API client.

Every failure of an accessor call surfaces as one of the three subclasses of
``APIError``. Nothing is retried or suppressed inside the client.
"""

from typing import Optional


class APIError(Exception):
    """Base exception for AnswerHub API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class TransportError(APIError):
    """The request never produced an HTTP response (DNS, connect, TLS, timeout)."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Request failed: {cause}")


class UnexpectedStatusError(APIError):
    """The platform answered with a status code other than 200."""

    def __init__(self, status_code: int):
        super().__init__(f"Received status code {status_code}", status_code)


class MalformedResponseError(APIError):
    """The platform answered 200 but the body could not be decoded."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Failed to parse response: {cause}", 200)
