import uuid

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


def generate_schedule_id():
    """Generate an opaque, shareable schedule identifier"""
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    firebase_uid = Column(String(255), unique=True, index=True, nullable=False)
    username = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    schedules = relationship("Schedule", back_populates="owner")


class Schedule(Base):
    __tablename__ = "schedules"

    schedule_id = Column(String(36), primary_key=True, default=generate_schedule_id)
    schedule_name = Column(String(255), nullable=False)
    memo = Column(Text, nullable=False, default="")
    created_by = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    updated_at = Column(DateTime, nullable=False, index=True)

    owner = relationship("User", back_populates="schedules")
    candidates = relationship(
        "Candidate", back_populates="schedule", order_by="Candidate.candidate_id"
    )


class Candidate(Base):
    __tablename__ = "candidates"

    candidate_id = Column(Integer, primary_key=True, autoincrement=True)
    candidate_name = Column(String(255), nullable=False)
    schedule_id = Column(
        String(36), ForeignKey("schedules.schedule_id"), index=True, nullable=False
    )

    schedule = relationship("Schedule", back_populates="candidates")

    # Candidate IDs are never reused, so insertion order is display order
    __table_args__ = ({"sqlite_autoincrement": True},)


class Availability(Base):
    __tablename__ = "availabilities"

    candidate_id = Column(Integer, ForeignKey("candidates.candidate_id"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    availability = Column(Integer, nullable=False, default=0)  # 0 absent, 1 maybe, 2 attending
    schedule_id = Column(
        String(36), ForeignKey("schedules.schedule_id"), index=True, nullable=False
    )

    user = relationship("User")

    __table_args__ = (
        UniqueConstraint("schedule_id", "user_id", "candidate_id", name="uq_availability_cell"),
    )


class Comment(Base):
    __tablename__ = "comments"

    schedule_id = Column(String(36), ForeignKey("schedules.schedule_id"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    comment = Column(String(255), nullable=False)
