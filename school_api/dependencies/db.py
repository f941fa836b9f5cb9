from typing import Iterator

from fastapi import Request
from sqlalchemy.orm import Session


def get_db(request: Request) -> Iterator[Session]:
    """요청마다 커넥션 풀에서 세션 하나를 받아 사용 후 반드시 반환합니다."""
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
