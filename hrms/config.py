import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))


def _bool_env(name, default="0"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "hrms-secret-key")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", f"sqlite:///{os.path.join(BASE_DIR, 'hrms.db')}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Bearer tokens have a fixed lifetime, no refresh
    JWT_ALGORITHM = "HS256"
    JWT_EXPIRES_HOURS = int(os.getenv("JWT_EXPIRES_HOURS", "8"))

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3001")
    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3001")
    APP_NAME = os.getenv("APP_NAME", "HRMS")

    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(BASE_DIR, "uploads", "documents"))
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

    MAIL_SERVER = os.getenv("MAIL_SERVER", "smtp.gmail.com")
    MAIL_PORT = int(os.getenv("MAIL_PORT", "587"))
    MAIL_USERNAME = os.getenv("MAIL_USERNAME")
    MAIL_PASSWORD = os.getenv("MAIL_PASSWORD")
    MAIL_DEFAULT_SENDER = os.getenv("MAIL_DEFAULT_SENDER", "no-reply@hrms.com")
    MAIL_SUPPRESS_SEND = _bool_env("MAIL_SUPPRESS_SEND")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    MAIL_SUPPRESS_SEND = True
    LOG_LEVEL = "WARNING"


def get_config(env=None):
    env = (env or os.getenv("APP_ENV", "development")).lower()
    if env in {"test", "testing"}:
        return TestingConfig
    return Config
