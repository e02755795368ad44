import pytest
from fastapi.testclient import TestClient

from forumhub.domain.topic_store import TopicStore
from forumhub.main import create_app


@pytest.fixture
def store():
    return TopicStore()


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def topic_payload():
    return {"title": "T", "message": "M", "author": "A", "course": "C"}
