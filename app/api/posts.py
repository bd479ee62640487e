"""
Post routes
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from app.models.common import Acknowledgement, PagedResponse, PaginationSearchQueryParams
from app.models.post import PostAddDTO, PostDTO, PostUpdateDTO
from app.services.dispatcher import ForwardingDispatcher
from app.utils.dependencies import get_current_user, get_dispatcher, get_pagination
from app.utils.responses import ERROR_RESPONSES, acknowledge, unwrap

router = APIRouter(
    prefix="/api/Post",
    tags=["Post"],
    dependencies=[Depends(get_current_user)],
    responses=ERROR_RESPONSES,
)


@router.get("/GetById/{id}", response_model=PostDTO)
async def get_by_id(id: UUID, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.get(f"/api/Post/GetById/{id}", PostDTO)
    return unwrap(outcome)


@router.get("/GetPage", response_model=PagedResponse[PostDTO])
async def get_page(
    pagination: PaginationSearchQueryParams = Depends(get_pagination),
    dispatcher: ForwardingDispatcher = Depends(get_dispatcher)
):
    outcome = await dispatcher.get("/api/Post/GetPage", PagedResponse[PostDTO], params=pagination.to_query())
    return unwrap(outcome)


@router.post("/Add", response_model=Acknowledgement)
async def add(post: PostAddDTO, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.post("/api/Post/Add", post.to_wire())
    return acknowledge(outcome, "Post added successfully")


@router.put("/Update", response_model=Acknowledgement)
async def update(post: PostUpdateDTO, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.put("/api/Post/Update", post.to_wire())
    return acknowledge(outcome, "Post updated successfully")


@router.delete("/Delete/{id}/{idUserCreator}", response_model=Acknowledgement)
async def delete(
    id: UUID,
    idUserCreator: UUID,
    dispatcher: ForwardingDispatcher = Depends(get_dispatcher)
):
    """Delete a post; the creator id lets the downstream check ownership"""
    outcome = await dispatcher.delete(f"/api/Post/Delete/{id}/{idUserCreator}")
    return acknowledge(outcome, "Post deleted successfully")
