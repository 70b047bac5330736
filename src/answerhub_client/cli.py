"""Command-line interface for browsing an AnswerHub site."""

from enum import Enum
from typing import NoReturn, Optional

import typer
from loguru import logger
from typing_extensions import Annotated

from .api import AnswerHubClient, APIError
from .utils.logging import setup_logging

app = typer.Typer(help="AnswerHub API client - list and show questions, answers and comments")


class ListKind(str, Enum):
    QUESTIONS = "questions"
    ANSWERS = "answers"
    COMMENTS = "comments"


class ItemKind(str, Enum):
    QUESTION = "question"
    ANSWER = "answer"
    COMMENT = "comment"
    ARTICLE = "article"


@app.callback()
def main(
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", "-l", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
    ] = None,
) -> None:
    """Connection settings come from ANSWERHUB_* environment variables or .env."""
    setup_logging(log_level)


def _fail(error: APIError) -> NoReturn:
    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command("list")
def list_nodes(
    kind: Annotated[ListKind, typer.Argument(help="Which collection to list")],
    page: Annotated[int, typer.Option("--page", "-p", help="1-indexed page number")] = 1,
    sort: Annotated[str, typer.Option("--sort", "-s", help="Platform sort key")] = "active",
) -> None:
    """List one page of questions, answers or comments."""
    client = AnswerHubClient.from_settings()
    fetch = {
        ListKind.QUESTIONS: client.get_questions,
        ListKind.ANSWERS: client.get_answers,
        ListKind.COMMENTS: client.get_comments,
    }[kind]

    try:
        nodes = fetch(page=page, sort=sort)
    except APIError as e:
        _fail(e)

    logger.info(f"Fetched {len(nodes.items)} {kind.value} (page {page}, sort {sort})")
    for node in nodes.items:
        typer.echo(f"{node.id}\t{node.type or ''}\t{node.title or ''}")


@app.command("show")
def show_node(
    kind: Annotated[ItemKind, typer.Argument(help="Item type")],
    node_id: Annotated[int, typer.Argument(help="Item id")],
) -> None:
    """Show a single item with its body formatted for chat."""
    client = AnswerHubClient.from_settings()
    fetch = {
        ItemKind.QUESTION: client.get_question,
        ItemKind.ANSWER: client.get_answer,
        ItemKind.COMMENT: client.get_comment,
        ItemKind.ARTICLE: client.get_article,
    }[kind]

    try:
        node = fetch(node_id)
    except APIError as e:
        _fail(e)

    if node.title:
        typer.echo(node.title)
        typer.echo()
    typer.echo(node.formatted_body())


if __name__ == "__main__":
    app()
