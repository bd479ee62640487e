"""
Feedback routes
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from app.models.common import Acknowledgement, PagedResponse, PaginationSearchQueryParams
from app.models.feedback import FeedbackAddDTO, FeedbackDTO, FeedbackUpdateDTO
from app.services.dispatcher import ForwardingDispatcher
from app.utils.dependencies import get_current_user, get_dispatcher, get_pagination
from app.utils.responses import ERROR_RESPONSES, acknowledge, unwrap

router = APIRouter(
    prefix="/api/Feedback",
    tags=["Feedback"],
    dependencies=[Depends(get_current_user)],
    responses=ERROR_RESPONSES,
)


@router.get("/GetById/{id}", response_model=FeedbackDTO)
async def get_by_id(id: UUID, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.get(f"/api/Feedback/GetById/{id}", FeedbackDTO)
    return unwrap(outcome)


@router.get("/GetPage/{idUserInitiator}", response_model=PagedResponse[FeedbackDTO])
async def get_page(
    idUserInitiator: UUID,
    pagination: PaginationSearchQueryParams = Depends(get_pagination),
    dispatcher: ForwardingDispatcher = Depends(get_dispatcher)
):
    """Page of feedback left by one user"""
    outcome = await dispatcher.get(
        f"/api/Feedback/GetPage/{idUserInitiator}",
        PagedResponse[FeedbackDTO],
        params=pagination.to_query(),
    )
    return unwrap(outcome)


@router.post("/Add", response_model=Acknowledgement)
async def add(feedback: FeedbackAddDTO, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.post("/api/Feedback/Add", feedback.to_wire())
    return acknowledge(outcome, "Feedback added successfully")


@router.put("/Update", response_model=Acknowledgement)
async def update(feedback: FeedbackUpdateDTO, dispatcher: ForwardingDispatcher = Depends(get_dispatcher)):
    outcome = await dispatcher.put("/api/Feedback/Update", feedback.to_wire())
    return acknowledge(outcome, "Feedback updated successfully")


@router.delete("/Delete/{id}/{idUser}", response_model=Acknowledgement)
async def delete(
    id: UUID,
    idUser: UUID,
    dispatcher: ForwardingDispatcher = Depends(get_dispatcher)
):
    outcome = await dispatcher.delete(f"/api/Feedback/Delete/{id}/{idUser}")
    return acknowledge(outcome, "Feedback deleted successfully")
