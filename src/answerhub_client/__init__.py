"""
AnswerHub Client - typed access to the AnswerHub v2 REST API.

This package provides blocking and async clients for listing and fetching
questions, answers, comments and articles, plus a formatter that turns item
bodies into length-bounded markdown for chat messages.
"""

from .api import (
    APIError,
    AnswerHubClient,
    AsyncAnswerHubClient,
    MalformedResponseError,
    TransportError,
    UnexpectedStatusError,
)
from .formatting import format_body, to_markdown
from .models import Answer, Article, Author, Comment, Node, NodeList, Question

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "AnswerHubClient",
    "Answer",
    "Article",
    "AsyncAnswerHubClient",
    "Author",
    "Comment",
    "MalformedResponseError",
    "Node",
    "NodeList",
    "Question",
    "TransportError",
    "UnexpectedStatusError",
    "format_body",
    "to_markdown",
]
