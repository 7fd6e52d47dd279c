"""Comment service - Business logic for participant comments"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...config import COMMENT_MAX_LENGTH
from ...messages import get_message
from ...models import Comment, User
from ..schedules.policy import can_respond_as
from ..schedules.repository import ScheduleRepository
from .repository import CommentRepository
from .schemas import CommentUpdate

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = CommentRepository()
        self.schedules = ScheduleRepository()

    def update_comment(
        self, schedule_id: str, user_id: int, data: CommentUpdate, user: User
    ) -> Comment:
        if not self.schedules.get_schedule(self.db, schedule_id):
            raise HTTPException(status_code=404, detail=get_message("schedule_not_found"))
        if not can_respond_as(user, user_id):
            logger.warning(f"⚠️ User {user.id} tried to comment as user {user_id}")
            raise HTTPException(status_code=403, detail=get_message("forbidden_other_user"))

        return self.repo.upsert_comment(
            self.db, schedule_id, user_id, data.comment[:COMMENT_MAX_LENGTH]
        )
