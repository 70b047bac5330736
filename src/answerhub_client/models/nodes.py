"""
Pydantic models for AnswerHub content nodes.

The platform returns one record shape for questions, answers, comments and
articles. Fields are optional, unknown fields are kept, and a value that does
not match its declared type is stored unchanged rather than rejected, so any
JSON object the platform sends is passed through.

See http://api.dzonesoftware.com/v2/reference#section-node-data-models
"""

from datetime import datetime, timezone
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
    field_validator,
)
from pydantic.alias_generators import to_camel
from typing_extensions import Annotated

from ..formatting import format_body


def _keep_invalid(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    try:
        return handler(value)
    except ValidationError:
        return value


PassThrough = WrapValidator(_keep_invalid)

OptionalInt = Annotated[Optional[int], PassThrough]
OptionalStr = Annotated[Optional[str], PassThrough]


class Author(BaseModel):
    """Identity of the user who created a node."""
    id: OptionalInt = None
    username: OptionalStr = None

    model_config = ConfigDict(frozen=True, extra="allow")


class Node(BaseModel):
    """
    A question, answer, comment or article.

    ``type`` is ``"question"``, ``"answer"`` or ``"comment"``; ids are only
    unique within one type.
    """
    id: OptionalInt = None
    type: OptionalStr = None
    # Epoch milliseconds
    creation_date: OptionalInt = None
    title: OptionalStr = None
    body: OptionalStr = None
    body_as_html: OptionalStr = Field(default=None, alias="bodyAsHTML")
    author: Annotated[Optional[Author], PassThrough] = None
    active_revision_id: OptionalInt = None
    parent_id: OptionalInt = None
    original_parent_id: OptionalInt = None
    slug: OptionalStr = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    @property
    def created_at(self) -> Optional[datetime]:
        """Creation time as an aware UTC datetime."""
        if not isinstance(self.creation_date, int):
            return None
        return datetime.fromtimestamp(self.creation_date / 1000, tz=timezone.utc)

    def formatted_body(self) -> str:
        """Chat-ready markdown of the rendered body, falling back to the raw body."""
        for candidate in (self.body_as_html, self.body):
            if isinstance(candidate, str) and candidate:
                return format_body(candidate)
        return ""


class Question(Node):
    pass


class Answer(Node):
    pass


class Comment(Node):
    pass


class Article(Node):
    pass


NodeT = TypeVar("NodeT", bound=Node)


class NodeList(BaseModel, Generic[NodeT]):
    """One page of nodes under ``items``, in the order the platform sorted them."""
    items: Annotated[List[NodeT], PassThrough] = Field(default_factory=list, alias="list")

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    @field_validator("items", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value
