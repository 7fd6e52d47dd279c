"""Availability router - FastAPI endpoint for attendance answers"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import User
from .schemas import AvailabilityResponse, AvailabilityUpdate
from .service import AvailabilityService

router = APIRouter(prefix="/schedules", tags=["Availabilities"])


def get_availability_service(db: Session = Depends(get_db)) -> AvailabilityService:
    """Dependency injection for AvailabilityService"""
    return AvailabilityService(db)


@router.post(
    "/{schedule_id}/users/{user_id}/candidates/{candidate_id}",
    response_model=AvailabilityResponse,
)
async def update_availability(
    schedule_id: str,
    user_id: int,
    candidate_id: int,
    data: AvailabilityUpdate,
    current_user: User = Depends(get_current_user),
    service: AvailabilityService = Depends(get_availability_service),
):
    """Upsert the current user's availability for one candidate"""
    availability = service.update_availability(
        schedule_id, user_id, candidate_id, data, current_user
    )
    return AvailabilityResponse(availability=availability.availability)
