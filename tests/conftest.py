import pytest
from fastapi.testclient import TestClient

from svc_same.app import create_app
from svc_same.config import Settings


@pytest.fixture
def settings():
    return Settings(
        app_env="test",
        log_level="warning",
        log_format="console",
        enable_redis_cache=False,
        cache_api_ttl=60,
        max_arguments=8,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
