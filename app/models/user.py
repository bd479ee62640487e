"""
User DTOs
"""

from enum import Enum
from typing import Optional
from uuid import UUID

from app.models.common import CamelModel, PartialUpdateModel


class UserRole(str, Enum):
    """User role enumeration"""
    ADMIN = "Admin"
    USER = "User"


class UserDTO(CamelModel):
    id: UUID
    name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    role: Optional[UserRole] = None


class UserAddDTO(CamelModel):
    name: str
    email: str
    password: str
    phone_number: Optional[str] = None
    role: UserRole = UserRole.USER


class UserUpdateDTO(PartialUpdateModel):
    """Only the supplied fields are changed downstream"""
    id: UUID
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone_number: Optional[str] = None
    role: Optional[UserRole] = None
