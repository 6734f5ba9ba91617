import pytest
from fastapi.testclient import TestClient

from task_api.main import create_app


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'tasks.db'}"


# Fresh store file per test
@pytest.fixture
def app(db_url):
    app = create_app(db_url)
    yield app
    app.state.tasks.close()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def repo(app):
    return app.state.tasks
