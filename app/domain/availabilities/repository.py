"""Availability repository - Database operations for availability answers"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Availability, Candidate


class AvailabilityRepository:
    """Repository for availability database operations"""

    @staticmethod
    def get_candidate(db: Session, schedule_id: str, candidate_id: int) -> Optional[Candidate]:
        """Get a candidate only if it belongs to the schedule"""
        return (
            db.query(Candidate)
            .filter(Candidate.candidate_id == candidate_id, Candidate.schedule_id == schedule_id)
            .first()
        )

    @staticmethod
    def upsert_availability(
        db: Session, schedule_id: str, user_id: int, candidate_id: int, value: int
    ) -> Availability:
        """Insert or overwrite the single row for (schedule, user, candidate)"""
        availability = (
            db.query(Availability)
            .filter(
                Availability.schedule_id == schedule_id,
                Availability.user_id == user_id,
                Availability.candidate_id == candidate_id,
            )
            .first()
        )
        if availability:
            availability.availability = value
        else:
            availability = Availability(
                schedule_id=schedule_id,
                user_id=user_id,
                candidate_id=candidate_id,
                availability=value,
            )
            db.add(availability)

        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(availability)
        return availability
