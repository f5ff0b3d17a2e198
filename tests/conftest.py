import pytest
from fastapi.testclient import TestClient

from pgquery.main import app
from pgquery.routes.api import get_query_executor, get_schema_introspector
from pgquery.services.query_executor import QueryExecutor
from pgquery.services.schema_introspector import SchemaIntrospector

from fakes import FakePool


@pytest.fixture
def fake_pool():
    return FakePool()


@pytest.fixture
def client(fake_pool):
    """TestClient whose services run against the fake pool."""
    app.dependency_overrides[get_query_executor] = lambda: QueryExecutor(fake_pool)
    app.dependency_overrides[get_schema_introspector] = lambda: SchemaIntrospector(fake_pool)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_query_executor, None)
        app.dependency_overrides.pop(get_schema_introspector, None)
