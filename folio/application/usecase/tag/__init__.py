"""Tag use cases."""

from .create_tag import CreateTagRequest, CreateTagResponse, CreateTagUseCase
from .delete_tag import DeleteTagRequest, DeleteTagResponse, DeleteTagUseCase
from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase
from .update_tag import UpdateTagRequest, UpdateTagResponse, UpdateTagUseCase

__all__ = [
    "CreateTagRequest",
    "CreateTagResponse",
    "CreateTagUseCase",
    "DeleteTagRequest",
    "DeleteTagResponse",
    "DeleteTagUseCase",
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "UpdateTagRequest",
    "UpdateTagResponse",
    "UpdateTagUseCase",
]
