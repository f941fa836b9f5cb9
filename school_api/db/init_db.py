import logging
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError

from school_api.db.base import Base
from school_api.db.session import Database

logger = logging.getLogger(__name__)


def _create_database_if_absent(database: Database):
    name = database.url.database
    server_engine = create_engine(database.url.set(database=None))
    try:
        with server_engine.connect() as conn:
            conn.execute(text(f"CREATE DATABASE IF NOT EXISTS `{name}`"))
            conn.commit()
    finally:
        server_engine.dispose()


def ensure_schema(database: Database) -> bool:
    """
    데이터베이스와 schools 테이블이 없으면 생성합니다.
    매 프로세스 시작 시 호출해도 안전하며(idempotent), 실패해도 예외를 올리지 않고 로그만 남깁니다.
    """
    try:
        if database.backend == "mysql":
            _create_database_if_absent(database)
        Base.metadata.create_all(bind=database.engine, checkfirst=True)
    except SQLAlchemyError:
        logger.exception("Database initialization error")
        return False
    logger.info("Database and table initialized successfully")
    return True
