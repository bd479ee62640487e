"""
Comment routes
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from app.models.comment import CommentAddDTO, CommentDTO, CommentUpdateDTO
from app.models.common import Acknowledgement
from app.services.dispatcher import ForwardingDispatcher
from app.utils.dependencies import get_current_user, get_dispatcher
from app.utils.responses import ERROR_RESPONSES, acknowledge, unwrap

router = APIRouter(
    prefix="/api/Comment",
    tags=["Comment"],
    dependencies=[Depends(get_current_user)],
    responses=ERROR_RESPONSES,
)


@router.get("/GetById/{id}", response_model=CommentDTO)
async def get_by_id(id: UUID, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.get(f"/api/Comment/GetById/{id}", CommentDTO)
    return unwrap(outcome)


@router.get("/GetPostComments/count-Comments/{idPost}", response_model=int)
async def get_post_comments(idPost: UUID, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    """Number of comments on a post"""
    outcome = await dispatcher.get(f"/api/Comment/GetPostComments/count-Comments/{idPost}", int)
    return unwrap(outcome)


@router.get("/GetCommentsForPost/Comments/{idPost}", response_model=List[CommentDTO])
async def get_comments_for_post(idPost: UUID, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    """All comments on a post, in downstream order"""
    outcome = await dispatcher.get(f"/api/Comment/GetCommentsForPost/Comments/{idPost}", List[CommentDTO])
    return unwrap(outcome)


@router.post("/Add", response_model=Acknowledgement)
async def add(comment: CommentAddDTO, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.post("/api/Comment/Add", comment.to_wire())
    return acknowledge(outcome, "Comment added successfully")


@router.put("/Update", response_model=Acknowledgement)
async def update(comment: CommentUpdateDTO, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.put("/api/Comment/Update", comment.to_wire())
    return acknowledge(outcome, "Comment updated successfully")


@router.delete("/Delete/{id}/{idUser}/{idPost}", response_model=Acknowledgement)
async def delete(
    id: UUID,
    idUser: UUID,
    idPost: UUID,
    dispatcher: ForwardingDispatcher = Depends(get_dispatcher)
):
    outcome = await dispatcher.delete(f"/api/Comment/Delete/{id}/{idUser}/{idPost}")
    return acknowledge(outcome, "Comment deleted successfully")
