"""Schedule router - FastAPI endpoints for schedule operations"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...config import SCHEDULE_NAME_MAX_LENGTH
from ...database import get_db
from ...messages import get_message
from ...models import Candidate, Schedule, User
from .schemas import (
    CandidateResponse,
    CurrentUserResponse,
    NewScheduleFormResponse,
    ParticipantResponse,
    ScheduleCreate,
    ScheduleDetailResponse,
    ScheduleEditResponse,
    ScheduleResponse,
    ScheduleUpdate,
)
from .service import ScheduleService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedules", tags=["Schedules"])


def get_schedule_service(db: Session = Depends(get_db)) -> ScheduleService:
    """Dependency injection for ScheduleService"""
    return ScheduleService(db)


def _schedule_response(schedule: Schedule) -> ScheduleResponse:
    return ScheduleResponse(
        scheduleId=schedule.schedule_id,
        scheduleName=schedule.schedule_name,
        memo=schedule.memo,
        createdBy=schedule.created_by,
        ownerName=schedule.owner.username if schedule.owner else None,
        updatedAt=schedule.updated_at,
    )


def _candidate_responses(candidates: list[Candidate]) -> list[CandidateResponse]:
    return [
        CandidateResponse(candidateId=c.candidate_id, candidateName=c.candidate_name)
        for c in candidates
    ]


def _redirect_to_schedule(schedule_id: str) -> RedirectResponse:
    return RedirectResponse(url=f"/schedules/{schedule_id}", status_code=302)


@router.get("", response_model=list[ScheduleResponse])
async def get_schedules(
    current_user: User = Depends(get_current_user),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Get the schedules created by the current user"""
    return [_schedule_response(s) for s in service.list_schedules(current_user)]


@router.get("/new", response_model=NewScheduleFormResponse)
async def new_schedule_form(current_user: User = Depends(get_current_user)):
    """Describe the new-schedule form"""
    return NewScheduleFormResponse(
        user=CurrentUserResponse(userId=current_user.id, username=current_user.username),
        scheduleNameMaxLength=SCHEDULE_NAME_MAX_LENGTH,
        untitledLabel=get_message("untitled_schedule"),
        fields=["scheduleName", "memo", "candidates"],
    )


@router.post("")
async def create_schedule(
    data: ScheduleCreate,
    current_user: User = Depends(get_current_user),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Create a schedule with its candidates and redirect to it"""
    schedule = service.create_schedule(data, current_user)
    return _redirect_to_schedule(schedule.schedule_id)


@router.get("/{schedule_id}", response_model=ScheduleDetailResponse)
async def get_schedule(
    schedule_id: str,
    current_user: User = Depends(get_current_user),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Get a schedule with every participant's availability and comment"""
    view = service.get_schedule_view(schedule_id, current_user)
    return ScheduleDetailResponse(
        schedule=_schedule_response(view.schedule),
        candidates=_candidate_responses(view.candidates),
        users=[
            ParticipantResponse(userId=u.user_id, username=u.username, isSelf=u.is_self)
            for u in view.users
        ],
        availabilities=view.availability_matrix,
        comments=view.comments,
    )


@router.get("/{schedule_id}/edit", response_model=ScheduleEditResponse)
async def edit_schedule_page(
    schedule_id: str,
    current_user: User = Depends(get_current_user),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Get a schedule and its candidates for the edit form (owner only)"""
    schedule, candidates = service.get_edit_page(schedule_id, current_user)
    return ScheduleEditResponse(
        schedule=_schedule_response(schedule),
        candidates=_candidate_responses(candidates),
    )


@router.post("/{schedule_id}")
async def update_schedule(
    schedule_id: str,
    data: ScheduleUpdate,
    edit: Optional[str] = Query(None),
    current_user: User = Depends(get_current_user),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Update a schedule (requires ?edit=1) and append new candidates"""
    schedule = service.update_schedule(schedule_id, edit, data, current_user)
    return _redirect_to_schedule(schedule.schedule_id)


__all__ = [
    "router",
    "get_schedules",
    "new_schedule_form",
    "create_schedule",
    "get_schedule",
    "edit_schedule_page",
    "update_schedule",
]
