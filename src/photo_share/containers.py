"""Dependency container wiring for the application."""

from dataclasses import dataclass

from photo_share.adapters.in_memory_photo_repository import InMemoryPhotoRepository
from photo_share.config import Settings
from photo_share.services.photos import PhotoService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    photo_service: PhotoService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container with an empty photo store."""
    resolved_settings = settings or Settings()
    photo_service = PhotoService(InMemoryPhotoRepository())
    return AppContainer(settings=resolved_settings, photo_service=photo_service)
