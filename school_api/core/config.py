import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


def _database_url() -> str:
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    host = os.getenv("DB_HOST")
    if not host:
        return "sqlite:///./school_db.sqlite3"
    # URL.create 가 비밀번호의 특수문자를 이스케이프
    return URL.create(
        "mysql+pymysql",
        username=os.getenv("DB_USER", "root"),
        password=os.getenv("DB_PASSWORD", ""),
        host=host,
        port=int(os.getenv("DB_PORT", 3306)),
        database=os.getenv("DB_NAME", "school_db"),
    ).render_as_string(hide_password=False)


class Settings:
    DATABASE_URL = _database_url()
    DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", 10))
    DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", 30))
    SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
    UPLOAD_ROOT = os.getenv("UPLOAD_ROOT", "uploads")
    UPLOAD_DIR = os.path.join(UPLOAD_ROOT, "schoolImages")
    MAX_IMAGE_SIZE = int(os.getenv("MAX_IMAGE_SIZE", 5 * 1024 * 1024))  # 5MB
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 3000))

settings = Settings()
