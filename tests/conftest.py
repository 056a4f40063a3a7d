import os

import pytest
from fastapi.testclient import TestClient

# Board defaults for tests, set before importing the app
os.environ["MOUNT_PREFIX"] = "/asmt"
os.environ["USERS_DB_PATH"] = ""
os.environ["COMMENT_LIMIT"] = "200"


@pytest.fixture
def client():
    from board.main import app
    from board.store import CommentStore

    # Fresh log per test
    app.state.comment_store = CommentStore(limit=200)

    with TestClient(app) as c:
        yield c


@pytest.fixture
def store(client):
    return client.app.state.comment_store
