"""Localized user-facing strings for error details and placeholders"""

from typing import Optional

from .config import APP_LOCALE

MESSAGES = {
    "ja": {
        "untitled_schedule": "（名称未設定）",
        "schedule_not_found": "指定された予定は見つかりません",
        "schedule_not_editable": "指定された予定がない、または、編集する権限がありません",
        "bad_request": "不正なリクエストです",
        "candidate_not_found": "指定された候補は見つかりません",
        "forbidden_other_user": "他のユーザーの回答は変更できません",
        "not_authenticated": "ログインが必要です",
    },
    "en": {
        "untitled_schedule": "(untitled)",
        "schedule_not_found": "The requested schedule was not found",
        "schedule_not_editable": "The schedule does not exist or you are not allowed to edit it",
        "bad_request": "Bad request",
        "candidate_not_found": "The requested candidate was not found",
        "forbidden_other_user": "You cannot change another user's response",
        "not_authenticated": "Authentication required",
    },
}


def get_message(key: str, locale: Optional[str] = None) -> str:
    """Look up a message, falling back to Japanese for unknown locales"""
    catalog = MESSAGES.get(locale or APP_LOCALE, MESSAGES["ja"])
    return catalog[key]
