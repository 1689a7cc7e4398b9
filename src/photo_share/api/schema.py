"""GraphQL schema for the photo API.

Query and Mutation resolvers delegate to the ``PhotoService`` found in the
request context; the schema itself holds no state.
"""

import logging

import strawberry
from graphql import GraphQLError
from strawberry.extensions import MaskErrors
from strawberry.types import ExecutionContext, Info

from photo_share.domain import photos as domain
from photo_share.services.photos import PhotoService

logger = logging.getLogger(__name__)

PhotoCategory = strawberry.enum(
    domain.PhotoCategory, description="Label a photo is filed under."
)


@strawberry.type(description="A posted photo.")
class Photo:
    id: int
    name: str
    description: str
    category: PhotoCategory

    @classmethod
    def from_domain(cls, photo: domain.Photo) -> "Photo":
        return cls(
            id=photo.id,
            name=photo.name,
            description=photo.description,
            category=photo.category,
        )


@strawberry.input(description="Fields for a new photo.")
class PostPhotoInput:
    name: str
    description: str
    category: PhotoCategory = domain.DEFAULT_CATEGORY


def _photo_service(info: Info) -> PhotoService:
    return info.context["photo_service"]


@strawberry.type
class Query:
    """Read operations over the photo store."""

    @strawberry.field(description="Number of photos posted so far.")
    def total_photos(self, info: Info) -> int:
        return _photo_service(info).total_photos()

    @strawberry.field(description="Every photo in the order it was posted.")
    def all_photos(self, info: Info) -> list[Photo]:
        return [Photo.from_domain(photo) for photo in _photo_service(info).all_photos()]


@strawberry.type
class Mutation:
    """Write operations over the photo store."""

    @strawberry.mutation(description="Store a new photo and return it.")
    def post_photo(self, info: Info, input: PostPhotoInput) -> Photo:  # noqa: A002
        photo = _photo_service(info).post_photo(
            name=input.name,
            description=input.description,
            category=input.category,
        )
        return Photo.from_domain(photo)


class PhotoSchema(strawberry.Schema):
    """Schema that reports GraphQL errors through the application logger."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        operation = None
        if execution_context is not None:
            operation = execution_context.operation_name
        for error in errors:
            if _is_internal_error(error):
                logger.error(
                    "GraphQL resolver failed in %s: %s",
                    operation or "anonymous",
                    error.message,
                    exc_info=error.original_error,
                )
            else:
                logger.warning(
                    "GraphQL error in %s: %s", operation or "anonymous", error.message
                )


def _is_internal_error(error: GraphQLError) -> bool:
    return error.original_error is not None and not isinstance(
        error.original_error, GraphQLError
    )


class MaskInternalErrors(MaskErrors):
    """Hides the message of unexpected resolver exceptions."""

    def __init__(self, **kwargs: object) -> None:
        super().__init__(
            should_mask_error=_is_internal_error,
            error_message="Internal server error.",
        )


def create_schema(environment: str = "local") -> PhotoSchema:
    """Build the schema; outside ``local`` internal error detail is masked."""
    extensions = []
    if environment != "local":
        extensions.append(MaskInternalErrors)
    return PhotoSchema(query=Query, mutation=Mutation, extensions=extensions)
