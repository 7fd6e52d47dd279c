"""Endpoint tests for creating, viewing, editing and updating schedules."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.messages import get_message
from app.models import Candidate, Schedule


def _candidates(db: Session, schedule_id: str) -> list[Candidate]:
    db.expire_all()
    return (
        db.query(Candidate)
        .filter(Candidate.schedule_id == schedule_id)
        .order_by(Candidate.candidate_id)
        .all()
    )


class TestCreateSchedule:
    def test_create_redirects_and_detail_shows_schedule(self, client: TestClient) -> None:
        res = client.post(
            "/schedules",
            json={
                "scheduleName": "テスト予定1",
                "memo": "テストメモ1\r\nテストメモ2",
                "candidates": "テスト候補1\r\nテスト候補2\r\nテスト候補3",
            },
            follow_redirects=False,
        )
        assert res.status_code == 302
        assert res.headers["location"].startswith("/schedules/")

        detail = client.get(res.headers["location"])
        assert detail.status_code == 200
        body = detail.json()
        assert body["schedule"]["scheduleName"] == "テスト予定1"
        assert body["schedule"]["memo"] == "テストメモ1\r\nテストメモ2"
        assert body["schedule"]["ownerName"] == "testuser"
        assert [c["candidateName"] for c in body["candidates"]] == [
            "テスト候補1",
            "テスト候補2",
            "テスト候補3",
        ]

    def test_candidate_rows_follow_input_order(
        self, client: TestClient, db: Session, create_schedule
    ) -> None:
        schedule_id = create_schedule(candidates="c1\nc2\n\nc3\nc4")

        candidates = _candidates(db, schedule_id)
        assert [c.candidate_name for c in candidates] == ["c1", "c2", "c3", "c4"]
        ids = [c.candidate_id for c in candidates]
        assert ids == sorted(ids)

    def test_long_name_is_truncated(self, client: TestClient, db: Session, create_schedule) -> None:
        schedule_id = create_schedule(scheduleName="x" * 300)

        db.expire_all()
        assert len(db.get(Schedule, schedule_id).schedule_name) == 255

    def test_empty_name_gets_placeholder(
        self, client: TestClient, db: Session, create_schedule
    ) -> None:
        schedule_id = create_schedule(scheduleName="")

        db.expire_all()
        assert db.get(Schedule, schedule_id).schedule_name == get_message("untitled_schedule")

    def test_missing_candidates_field_is_rejected(self, client: TestClient, db: Session) -> None:
        res = client.post("/schedules", json={"scheduleName": "no candidates"})

        assert res.status_code == 422
        assert db.query(Schedule).count() == 0

    def test_failed_candidate_insert_leaves_no_schedule(
        self, client: TestClient, db: Session
    ) -> None:
        with patch(
            "app.domain.schedules.repository.ScheduleRepository.add_candidates",
            side_effect=RuntimeError("insert failed"),
        ):
            with pytest.raises(RuntimeError):
                client.post(
                    "/schedules",
                    json={"scheduleName": "Trip", "candidates": "Mon"},
                    follow_redirects=False,
                )

        db.expire_all()
        assert db.query(Schedule).count() == 0
        assert db.query(Candidate).count() == 0


class TestScheduleDetail:
    def test_end_to_end_view_for_creator(self, client: TestClient, create_schedule) -> None:
        schedule_id = create_schedule(scheduleName="Trip", candidates="Mon\nTue")

        body = client.get(f"/schedules/{schedule_id}").json()

        assert [c["candidateName"] for c in body["candidates"]] == ["Mon", "Tue"]
        assert body["users"] == [{"userId": 1, "username": "testuser", "isSelf": True}]
        candidate_ids = [str(c["candidateId"]) for c in body["candidates"]]
        assert body["availabilities"] == {"1": {cid: 0 for cid in candidate_ids}}
        assert body["comments"] == {}

    def test_missing_schedule_is_404(self, client: TestClient) -> None:
        res = client.get("/schedules/00000000-0000-0000-0000-000000000000")

        assert res.status_code == 404
        assert res.json()["detail"] == get_message("schedule_not_found")

    def test_non_owner_can_view(
        self, client: TestClient, login_stub, other_user, create_schedule
    ) -> None:
        schedule_id = create_schedule(candidates="Mon")
        login_stub.login(other_user)

        body = client.get(f"/schedules/{schedule_id}").json()

        assert body["users"] == [{"userId": 2, "username": "another", "isSelf": True}]

    def test_unauthenticated_is_401(self, client: TestClient, login_stub, create_schedule) -> None:
        schedule_id = create_schedule()
        login_stub.logout()

        assert client.get(f"/schedules/{schedule_id}").status_code == 401

    def test_lists_own_schedules_newest_first(self, client: TestClient, create_schedule) -> None:
        first = create_schedule(scheduleName="first")
        second = create_schedule(scheduleName="second")

        body = client.get("/schedules").json()

        assert [s["scheduleId"] for s in body] == [second, first]

    def test_new_form_describes_fields(self, client: TestClient) -> None:
        body = client.get("/schedules/new").json()

        assert body["user"] == {"userId": 1, "username": "testuser"}
        assert body["scheduleNameMaxLength"] == 255
        assert body["fields"] == ["scheduleName", "memo", "candidates"]


class TestEditPage:
    def test_owner_gets_schedule_and_candidates(self, client: TestClient, create_schedule) -> None:
        schedule_id = create_schedule(candidates="Mon\nTue")

        res = client.get(f"/schedules/{schedule_id}/edit")

        assert res.status_code == 200
        assert res.json()["schedule"]["scheduleId"] == schedule_id
        assert [c["candidateName"] for c in res.json()["candidates"]] == ["Mon", "Tue"]

    def test_non_owner_and_missing_look_the_same(
        self, client: TestClient, login_stub, other_user, create_schedule
    ) -> None:
        schedule_id = create_schedule()
        login_stub.login(other_user)

        not_owner = client.get(f"/schedules/{schedule_id}/edit")
        missing = client.get("/schedules/does-not-exist/edit")

        assert not_owner.status_code == missing.status_code == 404
        assert not_owner.json() == missing.json()


class TestUpdateSchedule:
    def test_update_appends_candidates(
        self, client: TestClient, db: Session, create_schedule
    ) -> None:
        schedule_id = create_schedule(candidates="テスト更新候補1")

        res = client.post(
            f"/schedules/{schedule_id}?edit=1",
            json={"scheduleName": "テスト更新予定2", "memo": "テスト更新メモ2", "candidates": "テスト更新候補2"},
            follow_redirects=False,
        )

        assert res.status_code == 302
        assert res.headers["location"] == f"/schedules/{schedule_id}"
        db.expire_all()
        schedule = db.get(Schedule, schedule_id)
        assert schedule.schedule_name == "テスト更新予定2"
        assert schedule.memo == "テスト更新メモ2"
        assert [c.candidate_name for c in _candidates(db, schedule_id)] == [
            "テスト更新候補1",
            "テスト更新候補2",
        ]

    def test_update_without_candidates_keeps_existing(
        self, client: TestClient, db: Session, create_schedule
    ) -> None:
        schedule_id = create_schedule(candidates="Mon\nTue")

        res = client.post(
            f"/schedules/{schedule_id}?edit=1",
            json={"scheduleName": "renamed", "memo": "", "candidates": "  \n"},
            follow_redirects=False,
        )

        assert res.status_code == 302
        assert [c.candidate_name for c in _candidates(db, schedule_id)] == ["Mon", "Tue"]

    def test_repeated_edit_duplicates_candidates(
        self, client: TestClient, db: Session, create_schedule
    ) -> None:
        schedule_id = create_schedule(candidates="Mon")
        body = {"scheduleName": "same", "memo": "", "candidates": "Wed"}

        for _ in range(2):
            client.post(f"/schedules/{schedule_id}?edit=1", json=body, follow_redirects=False)

        assert [c.candidate_name for c in _candidates(db, schedule_id)] == ["Mon", "Wed", "Wed"]

    @pytest.mark.parametrize("query", ["", "?edit=0", "?edit=2", "?edit=yes"])
    def test_wrong_edit_flag_is_400_without_changes(
        self, client: TestClient, db: Session, create_schedule, query: str
    ) -> None:
        schedule_id = create_schedule(scheduleName="original", candidates="Mon")

        res = client.post(
            f"/schedules/{schedule_id}{query}",
            json={"scheduleName": "changed", "memo": "", "candidates": "Tue"},
            follow_redirects=False,
        )

        assert res.status_code == 400
        assert res.json()["detail"] == get_message("bad_request")
        db.expire_all()
        assert db.get(Schedule, schedule_id).schedule_name == "original"
        assert [c.candidate_name for c in _candidates(db, schedule_id)] == ["Mon"]

    def test_non_owner_is_404_without_changes(
        self, client: TestClient, db: Session, login_stub, other_user, create_schedule
    ) -> None:
        schedule_id = create_schedule(scheduleName="original", candidates="Mon")
        login_stub.login(other_user)

        res = client.post(
            f"/schedules/{schedule_id}?edit=1",
            json={"scheduleName": "hijacked", "memo": "", "candidates": "Tue"},
            follow_redirects=False,
        )

        assert res.status_code == 404
        db.expire_all()
        schedule = db.get(Schedule, schedule_id)
        assert schedule.schedule_name == "original"
        assert schedule.created_by == 1
        assert len(_candidates(db, schedule_id)) == 1

    def test_missing_schedule_is_404_before_edit_flag(self, client: TestClient) -> None:
        res = client.post(
            "/schedules/does-not-exist",
            json={"scheduleName": "x", "memo": "", "candidates": ""},
            follow_redirects=False,
        )

        assert res.status_code == 404

    def test_failed_append_rolls_back_schedule_update(
        self, client: TestClient, db: Session, create_schedule
    ) -> None:
        schedule_id = create_schedule(scheduleName="original", candidates="Mon")

        with patch(
            "app.domain.schedules.repository.ScheduleRepository.add_candidates",
            side_effect=RuntimeError("insert failed"),
        ):
            with pytest.raises(RuntimeError):
                client.post(
                    f"/schedules/{schedule_id}?edit=1",
                    json={"scheduleName": "changed", "memo": "", "candidates": "Tue"},
                    follow_redirects=False,
                )

        db.expire_all()
        assert db.get(Schedule, schedule_id).schedule_name == "original"
        assert [c.candidate_name for c in _candidates(db, schedule_id)] == ["Mon"]
