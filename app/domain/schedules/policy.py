"""
Authorization policy for schedules.

Handlers never compare identifiers inline; they ask these functions.
"""

from typing import Optional

from ...models import Schedule, User


def is_owner(schedule: Optional[Schedule], user: User) -> bool:
    """True only when the schedule exists and ``user`` created it"""
    return schedule is not None and int(schedule.created_by) == int(user.id)


def can_edit_schedule(schedule: Optional[Schedule], user: User) -> bool:
    """Editing and appending candidates are reserved for the owner"""
    return is_owner(schedule, user)


def can_respond_as(user: User, user_id: int) -> bool:
    """A participant may only record availability and comments for themself"""
    return int(user.id) == int(user_id)
