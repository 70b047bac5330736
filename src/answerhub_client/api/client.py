"""
HTTP client for the AnswerHub v2 REST API.

This module provides a blocking client for reading questions, answers,
comments and articles. Every call is a single POST round trip; failures are
classified into the exceptions of ``answerhub_client.api.errors`` and raised
without retrying.
"""

from typing import Any, Optional, Type, TypeVar

import requests
from loguru import logger
from pydantic import BaseModel, ValidationError

from ..config import ClientConfig, Settings
from ..formatting import format_body
from ..models import Answer, Article, Comment, NodeList, Question
from .errors import MalformedResponseError, TransportError, UnexpectedStatusError

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_payload(model: Type[ModelT], data: Any) -> ModelT:
    """
    Wrap decoded JSON in ``model``.

    Field values of the wrong type are kept as sent; only a payload that is
    not a JSON object at all is rejected.

    Raises:
        MalformedResponseError: If the payload is not a JSON object
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError(e) from e


class AnswerHubClient:
    """
    Blocking HTTP client for the AnswerHub API.

    The base URL and credential are computed once at construction and never
    change, so one instance can be shared between threads.
    """

    # The platform expects POST even for reads.
    METHOD = "POST"

    format_question_body = staticmethod(format_body)

    def __init__(
        self,
        base_url: Optional[str] = None,
        username: str = "",
        password: str = "",
        timeout: Optional[float] = None,
        config: Optional[ClientConfig] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the AnswerHub site; a trailing / is added if missing
            username: Username for Basic authentication
            password: Password for Basic authentication
            timeout: Request timeout in seconds, None for the requests default
            config: Prebuilt configuration, used instead of the other arguments
        """
        if config is None:
            if base_url is None:
                raise ValueError("base_url is required when no config is given")
            config = ClientConfig.create(base_url, username, password, timeout=timeout)
        self.config = config
        logger.debug(f"Initialized AnswerHubClient with base_url: {self.base_url}")

    @classmethod
    def from_config(cls, config: ClientConfig) -> "AnswerHubClient":
        return cls(config=config)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "AnswerHubClient":
        return cls.from_config(ClientConfig.from_settings(settings))

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _make_request(self, path: str) -> Any:
        """
        Make a request to the AnswerHub API.

        Args:
            path: Path relative to ``services/v2/``, including any query string

        Returns:
            The decoded JSON body

        Raises:
            TransportError: If no HTTP response was received
            UnexpectedStatusError: If the status code is not 200
            MalformedResponseError: If the body is not valid JSON
        """
        url = self.config.url_for(path)
        logger.debug(f"Making {self.METHOD} request to {url}")

        try:
            response = requests.request(
                method=self.METHOD,
                url=url,
                headers=self.config.headers,
                allow_redirects=True,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(e) from e

        if response.status_code != 200:
            raise UnexpectedStatusError(response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(e) from e

    def get_questions(self, page: int = 1, sort: str = "active") -> NodeList[Question]:
        """
        Retrieve one page of questions.

        Args:
            page: 1-indexed page number
            sort: Platform sort key, forwarded unvalidated

        Returns:
            NodeList[Question]: The requested page
        """
        data = self._make_request(f"question.json?page={page}&sort={sort}")
        return parse_payload(NodeList[Question], data)

    def get_answers(self, page: int = 1, sort: str = "active") -> NodeList[Answer]:
        """Retrieve one page of answers."""
        data = self._make_request(f"answer.json?page={page}&sort={sort}")
        return parse_payload(NodeList[Answer], data)

    def get_comments(self, page: int = 1, sort: str = "active") -> NodeList[Comment]:
        """Retrieve one page of comments."""
        data = self._make_request(f"comment.json?page={page}&sort={sort}")
        return parse_payload(NodeList[Comment], data)

    def get_question(self, id: int) -> Question:
        return parse_payload(Question, self._make_request(f"question/{id}.json"))

    def get_article(self, id: int) -> Article:
        return parse_payload(Article, self._make_request(f"article/{id}.json"))

    def get_answer(self, id: int) -> Answer:
        return parse_payload(Answer, self._make_request(f"answer/{id}.json"))

    def get_comment(self, id: int) -> Comment:
        return parse_payload(Comment, self._make_request(f"comment/{id}.json"))
