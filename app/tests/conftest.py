import random
import pytest
from unittest.mock import MagicMock, patch
from fastapi.testclient import TestClient

from app.main import app
from app.db.Connection import redis_store
from app.utils.encoding import CodeGenerator


@pytest.fixture(autouse=True)
def mock_redis():
    """Replaces the shared Redis client so no server is needed."""
    redis_mock = MagicMock()
    redis_mock.get.return_value = None
    redis_mock.incrby.return_value = 1
    redis_mock.ping.return_value = True

    with patch.object(redis_store, "redis_client", redis_mock):
        yield redis_mock


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seeded_generator():
    """Generator whose random padding and clock are fully deterministic."""
    ticks = iter(range(1_700_000_000_000, 1_700_000_100_000, 10))
    return CodeGenerator(rng=random.Random(42), clock=lambda: next(ticks))


@pytest.fixture
def sample_urls():
    """Provides sample URLs for testing."""
    return [
        "https://example.com/test1",
        "https://google.com/search?q=test",
        "https://github.com/user/repo",
    ]
