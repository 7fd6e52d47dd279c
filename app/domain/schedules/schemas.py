"""Schedule domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ScheduleCreate(BaseModel):
    """Schema for creating a new schedule"""

    scheduleName: str
    memo: str = ""
    candidates: str


class ScheduleUpdate(BaseModel):
    """Schema for editing a schedule; candidates are appended, never replaced"""

    scheduleName: str
    memo: str = ""
    candidates: str = ""


class CandidateResponse(BaseModel):
    candidateId: int
    candidateName: str


class ScheduleResponse(BaseModel):
    scheduleId: str
    scheduleName: str
    memo: str
    createdBy: int
    ownerName: Optional[str] = None
    updatedAt: datetime


class ParticipantResponse(BaseModel):
    userId: int
    username: str
    isSelf: bool


class CurrentUserResponse(BaseModel):
    userId: int
    username: str


class ScheduleDetailResponse(BaseModel):
    """Schedule with the dense availability matrix and comments"""

    schedule: ScheduleResponse
    candidates: list[CandidateResponse]
    users: list[ParticipantResponse]
    availabilities: dict[int, dict[int, int]]
    comments: dict[int, str]


class ScheduleEditResponse(BaseModel):
    schedule: ScheduleResponse
    candidates: list[CandidateResponse]


class NewScheduleFormResponse(BaseModel):
    user: CurrentUserResponse
    scheduleNameMaxLength: int
    untitledLabel: str
    fields: list[str]
