"""Project-level pytest configuration and shared fixtures."""

import pytest

from answerhub_client.config import get_settings


@pytest.fixture
def question_payload():
    """A single question as returned by ``question/{id}.json``."""
    return {
        "id": 42,
        "type": "question",
        "creationDate": 1514764800000,
        "title": "How do I spawn an actor?",
        "body": "<p>I tried <code>SpawnActor</code> but nothing happens.</p>",
        "bodyAsHTML": "<p>I tried <code>SpawnActor</code> but <strong>nothing</strong> happens.</p>",
        "author": {"id": 7, "username": "jdoe"},
        "activeRevisionId": 1001,
        "parentId": 0,
        "originalParentId": 0,
        "slug": "how-do-i-spawn-an-actor",
    }


@pytest.fixture
def question_list_payload(question_payload):
    """A page of questions as returned by ``question.json``."""
    second = dict(question_payload, id=43, title="Second question", slug="second-question")
    return {"list": [question_payload, second]}


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
