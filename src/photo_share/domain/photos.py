"""Domain models for shared photos."""

from dataclasses import dataclass
from enum import Enum


class PhotoCategory(Enum):
    """Closed set of labels a photo can be filed under."""

    SELFIE = "SELFIE"
    PORTRAIT = "PORTRAIT"
    ACTION = "ACTION"
    LANDSCAPE = "LANDSCAPE"
    GRAPHIC = "GRAPHIC"


DEFAULT_CATEGORY = PhotoCategory.PORTRAIT


@dataclass(frozen=True)
class Photo:
    """Represents a photo held by the store."""

    id: int
    name: str
    description: str
    category: PhotoCategory = DEFAULT_CATEGORY
