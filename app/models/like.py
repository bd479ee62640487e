"""
Like DTOs
"""

from uuid import UUID

from app.models.common import CamelModel


class LikeDTO(CamelModel):
    id: UUID
    user_id: UUID
    post_id: UUID


class LikeAddDTO(CamelModel):
    user_id: UUID
    post_id: UUID
