"""
Comment DTOs
"""

from typing import Optional
from uuid import UUID

from app.models.common import CamelModel, PartialUpdateModel


class CommentDTO(CamelModel):
    id: UUID
    user_id: UUID
    post_id: UUID
    content: str


class CommentAddDTO(CamelModel):
    user_id: UUID
    post_id: UUID
    content: str


class CommentUpdateDTO(PartialUpdateModel):
    id: UUID
    user_id: Optional[UUID] = None
    post_id: Optional[UUID] = None
    content: Optional[str] = None
