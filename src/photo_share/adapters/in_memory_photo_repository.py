"""Process-memory photo store."""

import threading
from dataclasses import dataclass

from photo_share.domain.photos import Photo, PhotoCategory
from photo_share.services.photos import PhotoRepository


class PhotoStoreCorruptedError(RuntimeError):
    """Raised once a failed write has left the store inconsistent."""


@dataclass
class InMemoryPhotoRepository(PhotoRepository):
    """Append-only photo list guarded by a single lock."""

    _photos: list[Photo]
    _sequence: int
    _lock: threading.Lock
    _corrupted: bool

    def __init__(self) -> None:
        self._photos = []
        self._sequence = 0
        self._lock = threading.Lock()
        self._corrupted = False

    def create(
        self, name: str, description: str, category: PhotoCategory
    ) -> Photo:
        """Assign the next id, append the photo and return it."""
        with self._lock:
            self._ensure_consistent()
            try:
                photo = Photo(
                    id=self._sequence + 1,
                    name=name,
                    description=description,
                    category=category,
                )
                self._photos.append(photo)
                self._sequence = photo.id
            except Exception:
                self._corrupted = True
                raise
            return photo

    def count(self) -> int:
        """Return the number of stored photos."""
        with self._lock:
            self._ensure_consistent()
            return len(self._photos)

    def list_all(self) -> list[Photo]:
        """Return a copy of the stored photos in insertion order."""
        with self._lock:
            self._ensure_consistent()
            return list(self._photos)

    def is_healthy(self) -> bool:
        with self._lock:
            return not self._corrupted

    def _ensure_consistent(self) -> None:
        if self._corrupted or len(self._photos) != self._sequence:
            self._corrupted = True
            raise PhotoStoreCorruptedError(
                "Photo store was left inconsistent by a failed write"
            )
