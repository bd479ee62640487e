"""
Post DTOs
"""

from typing import Optional
from uuid import UUID

from app.models.common import CamelModel, PartialUpdateModel


class PostDTO(CamelModel):
    id: UUID
    user_creator_id: UUID
    title: str
    content: str


class PostAddDTO(CamelModel):
    user_creator_id: UUID
    title: str
    content: str


class PostUpdateDTO(PartialUpdateModel):
    id: UUID
    user_creator_id: Optional[UUID] = None
    title: Optional[str] = None
    content: Optional[str] = None
