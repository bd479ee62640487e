"""
User routes
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from app.models.common import Acknowledgement, PagedResponse, PaginationSearchQueryParams
from app.models.user import UserAddDTO, UserDTO, UserUpdateDTO
from app.services.dispatcher import ForwardingDispatcher
from app.utils.dependencies import get_current_user, get_dispatcher, get_pagination
from app.utils.responses import ERROR_RESPONSES, acknowledge, unwrap

router = APIRouter(
    prefix="/api/User",
    tags=["User"],
    dependencies=[Depends(get_current_user)],
    responses=ERROR_RESPONSES,
)


@router.get("/GetById/{id}", response_model=UserDTO)
async def get_by_id(id: UUID, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    """Get a user by id"""
    outcome = await dispatcher.get(f"/api/User/GetById/{id}", UserDTO)
    return unwrap(outcome)


@router.get("/GetPage", response_model=PagedResponse[UserDTO])
async def get_page(
    pagination: PaginationSearchQueryParams = Depends(get_pagination),
    dispatcher: ForwardingDispatcher = Depends(get_dispatcher)
):
    """Get one page of users, optionally filtered by Search"""
    outcome = await dispatcher.get("/api/User/GetPage", PagedResponse[UserDTO], params=pagination.to_query())
    return unwrap(outcome)


@router.post("/Add", response_model=Acknowledgement)
async def add(user: UserAddDTO, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.post("/api/User/Add", user.to_wire())
    return acknowledge(outcome, "User added successfully")


@router.put("/Update", response_model=Acknowledgement)
async def update(user: UserUpdateDTO, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    """Update a user; fields left out of the body are not changed"""
    outcome = await dispatcher.put("/api/User/Update", user.to_wire())
    return acknowledge(outcome, "User updated successfully")


@router.delete("/Delete/{id}", response_model=Acknowledgement)
async def delete(id: UUID, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.delete(f"/api/User/Delete/{id}")
    return acknowledge(outcome, "User deleted successfully")
