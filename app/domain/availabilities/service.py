"""Availability service - Business logic for recording attendance answers"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...messages import get_message
from ...models import Availability, User
from ..schedules.policy import can_respond_as
from ..schedules.repository import ScheduleRepository
from .repository import AvailabilityRepository
from .schemas import AvailabilityUpdate

logger = logging.getLogger(__name__)


class AvailabilityService:
    """Service layer for availability business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AvailabilityRepository()
        self.schedules = ScheduleRepository()

    def update_availability(
        self,
        schedule_id: str,
        user_id: int,
        candidate_id: int,
        data: AvailabilityUpdate,
        user: User,
    ) -> Availability:
        """Record the user's answer for one candidate of a schedule"""
        if not self.schedules.get_schedule(self.db, schedule_id):
            raise HTTPException(status_code=404, detail=get_message("schedule_not_found"))
        if not self.repo.get_candidate(self.db, schedule_id, candidate_id):
            raise HTTPException(status_code=404, detail=get_message("candidate_not_found"))
        if not can_respond_as(user, user_id):
            logger.warning(f"⚠️ User {user.id} tried to answer as user {user_id}")
            raise HTTPException(status_code=403, detail=get_message("forbidden_other_user"))

        availability = self.repo.upsert_availability(
            self.db, schedule_id, user_id, candidate_id, data.availability
        )
        logger.debug(
            f"Availability {data.availability} recorded for user {user_id}, "
            f"candidate {candidate_id} of schedule {schedule_id}"
        )
        return availability
