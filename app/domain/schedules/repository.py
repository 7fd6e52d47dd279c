"""Schedule repository - Database operations for schedules and candidates"""

from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Availability, Candidate, Comment, Schedule, User


class ScheduleRepository:
    """Repository for schedule database operations

    Write methods only flush; the caller owns the transaction and commits.
    """

    @staticmethod
    def get_schedule(db: Session, schedule_id: str) -> Optional[Schedule]:
        """Get a schedule with its owner loaded"""
        return (
            db.query(Schedule)
            .options(joinedload(Schedule.owner))
            .filter(Schedule.schedule_id == schedule_id)
            .order_by(Schedule.updated_at.desc())
            .first()
        )

    @staticmethod
    def get_schedules_by_owner(db: Session, user_id: int) -> list[Schedule]:
        return (
            db.query(Schedule)
            .filter(Schedule.created_by == user_id)
            .order_by(Schedule.updated_at.desc())
            .all()
        )

    @staticmethod
    def get_candidates(db: Session, schedule_id: str) -> list[Candidate]:
        return (
            db.query(Candidate)
            .filter(Candidate.schedule_id == schedule_id)
            .order_by(Candidate.candidate_id.asc())
            .all()
        )

    @staticmethod
    def get_availabilities(db: Session, schedule_id: str) -> list[Availability]:
        """All availability rows with their users, by username then candidate"""
        return (
            db.query(Availability)
            .join(User, Availability.user_id == User.id)
            .options(joinedload(Availability.user))
            .filter(Availability.schedule_id == schedule_id)
            .order_by(User.username.asc(), Availability.candidate_id.asc())
            .all()
        )

    @staticmethod
    def get_comments(db: Session, schedule_id: str) -> list[Comment]:
        return db.query(Comment).filter(Comment.schedule_id == schedule_id).all()

    @staticmethod
    def add_schedule(db: Session, **schedule_data) -> Schedule:
        schedule = Schedule(**schedule_data)
        db.add(schedule)
        db.flush()
        return schedule

    @staticmethod
    def update_schedule(db: Session, schedule: Schedule, **updates) -> Schedule:
        for key, value in updates.items():
            if hasattr(schedule, key):
                setattr(schedule, key, value)
        db.flush()
        return schedule

    @staticmethod
    def add_candidates(db: Session, schedule_id: str, names: list[str]) -> list[Candidate]:
        """Bulk insert candidates in the given order"""
        candidates = [Candidate(candidate_name=name, schedule_id=schedule_id) for name in names]
        db.add_all(candidates)
        db.flush()
        return candidates

    @staticmethod
    def delete_schedule_aggregate(db: Session, schedule_id: str) -> None:
        """Remove a schedule and everything hanging off it in one transaction"""
        try:
            db.query(Availability).filter(Availability.schedule_id == schedule_id).delete(
                synchronize_session=False
            )
            db.query(Candidate).filter(Candidate.schedule_id == schedule_id).delete(
                synchronize_session=False
            )
            db.query(Comment).filter(Comment.schedule_id == schedule_id).delete(
                synchronize_session=False
            )
            db.query(Schedule).filter(Schedule.schedule_id == schedule_id).delete(
                synchronize_session=False
            )
            db.commit()
        except Exception:
            db.rollback()
            raise
