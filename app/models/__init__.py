"""
Gateway DTOs and wire shapes
"""

from .common import (
    Acknowledgement,
    CamelModel,
    ErrorMessage,
    PartialUpdateModel,
    PagedResponse,
    PaginationSearchQueryParams,
)
from .user import UserDTO, UserAddDTO, UserUpdateDTO, UserRole
from .post import PostDTO, PostAddDTO, PostUpdateDTO
from .comment import CommentDTO, CommentAddDTO, CommentUpdateDTO
from .like import LikeDTO, LikeAddDTO
from .feedback import FeedbackDTO, FeedbackAddDTO, FeedbackUpdateDTO

__all__ = [
    "Acknowledgement",
    "CamelModel",
    "ErrorMessage",
    "PartialUpdateModel",
    "PagedResponse",
    "PaginationSearchQueryParams",
    "UserDTO",
    "UserAddDTO",
    "UserUpdateDTO",
    "UserRole",
    "PostDTO",
    "PostAddDTO",
    "PostUpdateDTO",
    "CommentDTO",
    "CommentAddDTO",
    "CommentUpdateDTO",
    "LikeDTO",
    "LikeAddDTO",
    "FeedbackDTO",
    "FeedbackAddDTO",
    "FeedbackUpdateDTO",
]
