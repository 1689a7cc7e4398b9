"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from photo_share.adapters.in_memory_photo_repository import InMemoryPhotoRepository
from photo_share.api.app import create_app
from photo_share.config import Settings
from photo_share.containers import AppContainer
from photo_share.services.photos import PhotoService

POST_PHOTO = """
mutation PostPhoto($input: PostPhotoInput!) {
  postPhoto(input: $input) {
    id
    name
    description
    category
  }
}
"""


def graphql(
    client: TestClient, query: str, variables: dict[str, object] | None = None
) -> dict[str, object]:
    """POST a GraphQL document to ``/`` and return the decoded body."""
    payload: dict[str, object] = {"query": query}
    if variables is not None:
        payload["variables"] = variables
    response = client.post("/", json=payload)
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def settings() -> Settings:
    return Settings(host="127.0.0.1", port=8000, environment="local")


@pytest.fixture
def photo_repository() -> InMemoryPhotoRepository:
    return InMemoryPhotoRepository()


@pytest.fixture
def container(
    settings: Settings, photo_repository: InMemoryPhotoRepository
) -> AppContainer:
    return AppContainer(settings=settings, photo_service=PhotoService(photo_repository))


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
