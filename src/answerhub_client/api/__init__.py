"""AnswerHub API transports and their error types."""

from .async_client import AsyncAnswerHubClient
from .client import AnswerHubClient
from .errors import APIError, MalformedResponseError, TransportError, UnexpectedStatusError

__all__ = [
    "APIError",
    "AnswerHubClient",
    "AsyncAnswerHubClient",
    "MalformedResponseError",
    "TransportError",
    "UnexpectedStatusError",
]
