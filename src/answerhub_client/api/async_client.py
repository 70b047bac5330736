"""
Async HTTP client for the AnswerHub v2 REST API.

Same endpoints and error classification as ``AnswerHubClient``, built on
``httpx.AsyncClient`` so several calls can be awaited concurrently.
"""

from typing import Any, Optional

import httpx
from loguru import logger

from ..config import ClientConfig, Settings
from ..formatting import format_body
from ..models import Answer, Article, Comment, NodeList, Question
from .client import parse_payload
from .errors import MalformedResponseError, TransportError, UnexpectedStatusError


class AsyncAnswerHubClient:
    """
    Async client for the AnswerHub API.

    Owns an ``httpx.AsyncClient`` connection pool; close it with ``aclose()``
    or use the client as an async context manager.
    """

    METHOD = "POST"

    format_question_body = staticmethod(format_body)

    def __init__(
        self,
        base_url: Optional[str] = None,
        username: str = "",
        password: str = "",
        timeout: Optional[float] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the async API client.

        Args:
            base_url: Base URL of the AnswerHub site; a trailing / is added if missing
            username: Username for Basic authentication
            password: Password for Basic authentication
            timeout: Request timeout in seconds, None for the httpx default
            config: Prebuilt configuration, used instead of the other arguments
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``)
        """
        if config is None:
            if base_url is None:
                raise ValueError("base_url is required when no config is given")
            config = ClientConfig.create(base_url, username, password, timeout=timeout)
        self.config = config

        client_kwargs = {
            "headers": config.headers,
            "follow_redirects": True,
            "transport": transport,
        }
        if config.timeout is not None:
            client_kwargs["timeout"] = httpx.Timeout(config.timeout)
        self.client = httpx.AsyncClient(**client_kwargs)

        logger.debug(f"Initialized AsyncAnswerHubClient with base_url: {self.base_url}")

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AsyncAnswerHubClient":
        return cls(config=ClientConfig.from_settings(settings), transport=transport)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    async def __aenter__(self) -> "AsyncAnswerHubClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self.client.aclose()

    async def _make_request(self, path: str) -> Any:
        """
        Make a request to the AnswerHub API.

        Raises:
            TransportError: If no HTTP response was received
            UnexpectedStatusError: If the status code is not 200
            MalformedResponseError: If the body is not valid JSON
        """
        url = self.config.url_for(path)
        logger.debug(f"Making {self.METHOD} request to {url}")

        try:
            response = await self.client.request(self.METHOD, url)
        except httpx.RequestError as e:
            raise TransportError(e) from e

        if response.status_code != 200:
            raise UnexpectedStatusError(response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(e) from e

    async def get_questions(self, page: int = 1, sort: str = "active") -> NodeList[Question]:
        data = await self._make_request(f"question.json?page={page}&sort={sort}")
        return parse_payload(NodeList[Question], data)

    async def get_answers(self, page: int = 1, sort: str = "active") -> NodeList[Answer]:
        data = await self._make_request(f"answer.json?page={page}&sort={sort}")
        return parse_payload(NodeList[Answer], data)

    async def get_comments(self, page: int = 1, sort: str = "active") -> NodeList[Comment]:
        data = await self._make_request(f"comment.json?page={page}&sort={sort}")
        return parse_payload(NodeList[Comment], data)

    async def get_question(self, id: int) -> Question:
        return parse_payload(Question, await self._make_request(f"question/{id}.json"))

    async def get_article(self, id: int) -> Article:
        return parse_payload(Article, await self._make_request(f"article/{id}.json"))

    async def get_answer(self, id: int) -> Answer:
        return parse_payload(Answer, await self._make_request(f"answer/{id}.json"))

    async def get_comment(self, id: int) -> Comment:
        return parse_payload(Comment, await self._make_request(f"comment/{id}.json"))
