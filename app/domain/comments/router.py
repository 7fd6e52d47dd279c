"""Comment router - FastAPI endpoint for participant comments"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import User
from .schemas import CommentResponse, CommentUpdate
from .service import CommentService

router = APIRouter(prefix="/schedules", tags=["Comments"])


def get_comment_service(db: Session = Depends(get_db)) -> CommentService:
    """Dependency injection for CommentService"""
    return CommentService(db)


@router.post("/{schedule_id}/users/{user_id}/comments", response_model=CommentResponse)
async def update_comment(
    schedule_id: str,
    user_id: int,
    data: CommentUpdate,
    current_user: User = Depends(get_current_user),
    service: CommentService = Depends(get_comment_service),
):
    """Upsert the current user's comment on a schedule"""
    comment = service.update_comment(schedule_id, user_id, data, current_user)
    return CommentResponse(comment=comment.comment)
