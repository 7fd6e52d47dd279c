import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./schedules.db")

# Firebase Configuration (authentication gate)
FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID")

# "ja" or "en" - language of error messages and the untitled-schedule placeholder
APP_LOCALE = os.getenv("APP_LOCALE", "ja")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Schedule limits
SCHEDULE_NAME_MAX_LENGTH = 255
COMMENT_MAX_LENGTH = 255
