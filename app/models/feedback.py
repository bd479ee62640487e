"""
Feedback DTOs
"""

from typing import Optional
from uuid import UUID

from app.models.common import CamelModel, PartialUpdateModel


class FeedbackDTO(CamelModel):
    id: UUID
    user_creator_id: UUID
    content: str
    rating: int
    email: str
    name: str
    phone_number: Optional[str] = None
    type_of_appreciation: Optional[str] = None
    is_user_experience_enjoyable: bool = False


class FeedbackAddDTO(CamelModel):
    user_creator_id: UUID
    content: str
    rating: int
    email: str
    name: str
    phone_number: Optional[str] = None
    type_of_appreciation: Optional[str] = None
    is_user_experience_enjoyable: bool = False


class FeedbackUpdateDTO(PartialUpdateModel):
    id: UUID
    user_creator_id: Optional[UUID] = None
    content: Optional[str] = None
    rating: Optional[int] = None
    email: Optional[str] = None
    name: Optional[str] = None
    phone_number: Optional[str] = None
    type_of_appreciation: Optional[str] = None
    is_user_experience_enjoyable: Optional[bool] = None
