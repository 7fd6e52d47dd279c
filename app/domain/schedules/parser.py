"""Candidate name parsing for the schedule forms"""


def parse_candidate_names(text: str) -> list[str]:
    """
    Split the multi-line candidates field into candidate names.

    Each line is stripped of surrounding whitespace (including the ``\\r`` of
    CRLF input) and blank lines are dropped. Order is preserved.
    """
    return [line.strip() for line in text.strip().split("\n") if line.strip()]
