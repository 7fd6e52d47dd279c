"""Schedule service - Business logic for schedule operations"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...config import SCHEDULE_NAME_MAX_LENGTH
from ...messages import get_message
from ...models import Candidate, Schedule, User
from .aggregator import ScheduleView, build_schedule_view
from .parser import parse_candidate_names
from .policy import can_edit_schedule
from .repository import ScheduleRepository
from .schemas import ScheduleCreate, ScheduleUpdate

logger = logging.getLogger(__name__)


def normalize_schedule_name(name: str) -> str:
    """Truncate to the column limit; empty names get the placeholder label"""
    return name[:SCHEDULE_NAME_MAX_LENGTH] or get_message("untitled_schedule")


def is_edit_request(edit: Optional[str]) -> bool:
    """The update form posts with ``?edit=1``; anything else is rejected"""
    if edit is None:
        return False
    try:
        return int(edit) == 1
    except ValueError:
        return False


class ScheduleService:
    """Service layer for schedule business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ScheduleRepository()

    def list_schedules(self, user: User) -> list[Schedule]:
        """Schedules created by the user, most recently updated first"""
        return self.repo.get_schedules_by_owner(self.db, user.id)

    def create_schedule(self, data: ScheduleCreate, user: User) -> Schedule:
        """Create a schedule and its candidates atomically"""
        candidate_names = parse_candidate_names(data.candidates)
        try:
            schedule = self.repo.add_schedule(
                self.db,
                schedule_name=normalize_schedule_name(data.scheduleName),
                memo=data.memo,
                created_by=user.id,
                updated_at=datetime.utcnow(),
            )
            self.repo.add_candidates(self.db, schedule.schedule_id, candidate_names)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Failed to create schedule for user {user.id}: {str(e)}")
            raise

        logger.info(
            f"✅ Schedule {schedule.schedule_id} created by user {user.id} "
            f"with {len(candidate_names)} candidates"
        )
        return schedule

    def get_schedule_view(self, schedule_id: str, user: User) -> ScheduleView:
        """Any authenticated user may view; ownership is not required"""
        schedule = self.repo.get_schedule(self.db, schedule_id)
        if not schedule:
            raise HTTPException(status_code=404, detail=get_message("schedule_not_found"))

        return build_schedule_view(
            schedule,
            self.repo.get_candidates(self.db, schedule.schedule_id),
            self.repo.get_availabilities(self.db, schedule.schedule_id),
            self.repo.get_comments(self.db, schedule.schedule_id),
            user,
        )

    def get_editable_schedule(self, schedule_id: str, user: User) -> Schedule:
        """
        Return the schedule if ``user`` may edit it.

        Missing and not-owned schedules raise the same 404 so callers cannot
        probe for schedules that belong to someone else.
        """
        schedule = self.repo.get_schedule(self.db, schedule_id)
        if not can_edit_schedule(schedule, user):
            logger.warning(f"⚠️ User {user.id} denied edit access to schedule {schedule_id}")
            raise HTTPException(status_code=404, detail=get_message("schedule_not_editable"))
        return schedule

    def get_edit_page(self, schedule_id: str, user: User) -> tuple[Schedule, list[Candidate]]:
        schedule = self.get_editable_schedule(schedule_id, user)
        return schedule, self.repo.get_candidates(self.db, schedule.schedule_id)

    def update_schedule(
        self, schedule_id: str, edit: Optional[str], data: ScheduleUpdate, user: User
    ) -> Schedule:
        """Overwrite name and memo, then append any new candidates atomically"""
        schedule = self.get_editable_schedule(schedule_id, user)
        if not is_edit_request(edit):
            raise HTTPException(status_code=400, detail=get_message("bad_request"))

        candidate_names = parse_candidate_names(data.candidates)
        try:
            self.repo.update_schedule(
                self.db,
                schedule,
                schedule_name=normalize_schedule_name(data.scheduleName),
                memo=data.memo,
                created_by=user.id,
                updated_at=datetime.utcnow(),
            )
            if candidate_names:
                self.repo.add_candidates(self.db, schedule.schedule_id, candidate_names)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Failed to update schedule {schedule_id}: {str(e)}")
            raise

        logger.info(
            f"✅ Schedule {schedule_id} updated by user {user.id}, "
            f"{len(candidate_names)} candidates appended"
        )
        return schedule
