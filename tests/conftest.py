"""Shared test fixtures and configuration."""
import pytest
from fastapi.testclient import TestClient

from showcase.core.rate_limit import limiter
from showcase.db import Database
from showcase.main import create_app
from tests.utils import create_project, create_user


@pytest.fixture(autouse=True)
def disable_rate_limiting_for_tests(request):
    """Disable rate limiting for all tests except rate limiting tests."""
    if "rate_limit" in request.keywords:
        limiter.reset()
        yield
        limiter.reset()
    else:
        limiter.enabled = False
        try:
            yield
        finally:
            limiter.enabled = True


@pytest.fixture(scope="function")
def database(tmp_path):
    """Create a fresh file-backed SQLite database for each test.

    A file (rather than :memory:) gives each session its own connection, so
    concurrent tests exercise real transaction serialization.
    """
    db = Database.from_url(f"sqlite:///{tmp_path / 'showcase-test.db'}")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture(scope="function")
def client(database):
    """Create a test client bound to the test database."""
    app = create_app(database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def author_id(database):
    return create_user(database, user_id="author1", nickname="Author")


@pytest.fixture
def voter_id(database):
    return create_user(database, user_id="user-42", nickname="Voter")


@pytest.fixture
def admin_id(database):
    return create_user(database, user_id="admin-1", nickname="Admin", role="ADMIN")


@pytest.fixture
def project_id(database, author_id):
    """An approved project with no votes."""
    return create_project(database, author_id, title="Planet Explorer")


@pytest.fixture
def pending_project_id(database, author_id):
    """A project still awaiting approval."""
    return create_project(database, author_id, title="Pending Project", is_approved=False)
