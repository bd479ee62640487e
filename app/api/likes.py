"""
Like routes
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from app.models.common import Acknowledgement
from app.models.like import LikeAddDTO, LikeDTO
from app.services.dispatcher import ForwardingDispatcher
from app.utils.dependencies import get_current_user, get_dispatcher
from app.utils.responses import ERROR_RESPONSES, acknowledge, unwrap

router = APIRouter(
    prefix="/api/Like",
    tags=["Like"],
    dependencies=[Depends(get_current_user)],
    responses=ERROR_RESPONSES,
)


@router.get("/GetById/{id}", response_model=LikeDTO)
async def get_by_id(id: UUID, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.get(f"/api/Like/GetById/{id}", LikeDTO)
    return unwrap(outcome)


@router.get("/GetPostLikes/count-likes/{idPost}", response_model=int)
async def get_post_likes(idPost: UUID, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    """Number of likes on a post"""
    outcome = await dispatcher.get(f"/api/Like/GetPostLikes/count-likes/{idPost}", int)
    return unwrap(outcome)


@router.get("/GetLikesForPost/likes/{idPost}/{idUser}", response_model=List[LikeDTO])
async def get_likes_for_post(
    idPost: UUID,
    idUser: UUID,
    dispatcher: ForwardingDispatcher = Depends(get_dispatcher)
):
    """Likes a user left on a post"""
    outcome = await dispatcher.get(f"/api/Like/GetLikesForPost/likes/{idPost}/{idUser}", List[LikeDTO])
    return unwrap(outcome)


@router.post("/Add", response_model=Acknowledgement)
async def add(like: LikeAddDTO, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.post("/api/Like/Add", like.to_wire())
    return acknowledge(outcome, "Like added successfully")


@router.delete("/Delete/{id}/{idUser}/{idPost}", response_model=Acknowledgement)
async def delete(
    id: UUID,
    idUser: UUID,
    idPost: UUID,
    dispatcher: ForwardingDispatcher = Depends(get_dispatcher)
):
    outcome = await dispatcher.delete(f"/api/Like/Delete/{id}/{idUser}/{idPost}")
    return acknowledge(outcome, "Like deleted successfully")
