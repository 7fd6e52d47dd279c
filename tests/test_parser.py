"""Unit tests for candidate name parsing."""

from app.domain.schedules.parser import parse_candidate_names


class TestParseCandidateNames:
    def test_strips_blank_lines_and_whitespace(self) -> None:
        assert parse_candidate_names("a\n \nb \n") == ["a", "b"]

    def test_handles_crlf_input(self) -> None:
        text = "テスト候補1\r\nテスト候補2\r\nテスト候補3"
        assert parse_candidate_names(text) == ["テスト候補1", "テスト候補2", "テスト候補3"]

    def test_preserves_order_and_duplicates(self) -> None:
        assert parse_candidate_names("Tue\nMon\nTue") == ["Tue", "Mon", "Tue"]

    def test_empty_and_blank_input(self) -> None:
        assert parse_candidate_names("") == []
        assert parse_candidate_names("  \n\t\n") == []

    def test_inner_whitespace_is_kept(self) -> None:
        assert parse_candidate_names("  5/1 10:00 - 12:00  ") == ["5/1 10:00 - 12:00"]
