"""
Schedule aggregation - builds the read-only detail view of a schedule.

Pure functions over already-loaded records; no database access here.
"""

from dataclasses import dataclass, field

from ...models import Availability, Candidate, Comment, Schedule, User

# Value used for cells with no recorded availability
DEFAULT_AVAILABILITY = 0


@dataclass
class Participant:
    user_id: int
    username: str
    is_self: bool


@dataclass
class ScheduleView:
    schedule: Schedule
    candidates: list[Candidate]
    users: list[Participant]
    # user_id -> candidate_id -> availability, dense over users x candidates
    availability_matrix: dict[int, dict[int, int]] = field(default_factory=dict)
    # user_id -> comment text
    comments: dict[int, str] = field(default_factory=dict)


def build_availability_map(availabilities: list[Availability]) -> dict[int, dict[int, int]]:
    matrix: dict[int, dict[int, int]] = {}
    for a in availabilities:
        matrix.setdefault(a.user_id, {})[a.candidate_id] = a.availability
    return matrix


def collect_participants(viewer: User, availabilities: list[Availability]) -> list[Participant]:
    """Viewer first, then every user who has answered, in row order"""
    viewer_id = int(viewer.id)
    participants = {viewer_id: Participant(viewer_id, viewer.username, True)}
    for a in availabilities:
        participants[a.user.id] = Participant(a.user.id, a.user.username, a.user.id == viewer_id)
    return list(participants.values())


def fill_defaults(
    matrix: dict[int, dict[int, int]],
    users: list[Participant],
    candidates: list[Candidate],
) -> dict[int, dict[int, int]]:
    for u in users:
        row = matrix.setdefault(u.user_id, {})
        for c in candidates:
            row.setdefault(c.candidate_id, DEFAULT_AVAILABILITY)
    return matrix


def build_comment_map(comments: list[Comment]) -> dict[int, str]:
    # Later rows overwrite earlier ones
    return {c.user_id: c.comment for c in comments}


def build_schedule_view(
    schedule: Schedule,
    candidates: list[Candidate],
    availabilities: list[Availability],
    comments: list[Comment],
    viewer: User,
) -> ScheduleView:
    """
    Aggregate a schedule's records into the detail view model.

    ``availabilities`` must have their ``user`` relationship loaded and be
    ordered by username then candidate ID; participant order follows it.
    """
    users = collect_participants(viewer, availabilities)
    matrix = fill_defaults(build_availability_map(availabilities), users, candidates)
    return ScheduleView(
        schedule=schedule,
        candidates=candidates,
        users=users,
        availability_matrix=matrix,
        comments=build_comment_map(comments),
    )
