from dotenv import load_dotenv
import os

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./task_manager.db")
SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60))
BASE_URL = os.getenv("BASE_URL", "/api").rstrip("/")
DEFAULT_USER_EMAIL = os.getenv("DEFAULT_USER_EMAIL", "hexlet@example.com")
DEFAULT_USER_PASSWORD = os.getenv("DEFAULT_USER_PASSWORD", "qwerty")
DEFAULT_TASK_STATUSES = os.getenv("DEFAULT_TASK_STATUSES", "draft,to_review,to_be_fixed,to_publish,published")
DEFAULT_LABELS = os.getenv("DEFAULT_LABELS", "feature,bug")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
CORS_ORIGIN_REGEX = os.getenv("CORS_ORIGIN_REGEX")


def parse_csv_list(value: str):
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_cors_origins(value: str):
    if not value:
        return []
    if value.strip() == "*":
        return ["*"]
    return parse_csv_list(value)
