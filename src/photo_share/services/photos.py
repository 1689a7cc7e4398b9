"""Photo-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from photo_share.domain.photos import DEFAULT_CATEGORY, Photo, PhotoCategory

logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Storage interface for photos."""

    def create(
        self, name: str, description: str, category: PhotoCategory
    ) -> Photo:
        """Store a new photo under the next id and return it."""

    def count(self) -> int:
        """Return the number of stored photos."""

    def list_all(self) -> list[Photo]:
        """Return every stored photo in insertion order."""

    def is_healthy(self) -> bool:
        """Return false once the stored state can no longer be trusted."""


@dataclass
class PhotoService:
    """Application service behind the GraphQL resolvers."""

    repository: PhotoRepository

    def post_photo(
        self,
        name: str,
        description: str,
        category: PhotoCategory = DEFAULT_CATEGORY,
    ) -> Photo:
        """Create a photo, falling back to the default category."""
        photo = self.repository.create(name, description, category)
        logger.info(
            "Photo posted",
            extra={"photo_id": photo.id, "category": photo.category.value},
        )
        return photo

    def total_photos(self) -> int:
        """Return how many photos have been posted."""
        return self.repository.count()

    def all_photos(self) -> list[Photo]:
        """Return all photos in the order they were posted."""
        return self.repository.list_all()

    def is_healthy(self) -> bool:
        return self.repository.is_healthy()
