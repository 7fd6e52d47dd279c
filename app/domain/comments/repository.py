"""Comment repository - Database operations for participant comments"""

from sqlalchemy.orm import Session

from ...models import Comment


class CommentRepository:
    """Repository for comment database operations"""

    @staticmethod
    def upsert_comment(db: Session, schedule_id: str, user_id: int, text: str) -> Comment:
        """One comment per (schedule, user); the last write wins"""
        comment = db.get(Comment, (schedule_id, user_id))
        if comment:
            comment.comment = text
        else:
            comment = Comment(schedule_id=schedule_id, user_id=user_id, comment=text)
            db.add(comment)

        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(comment)
        return comment
