import os
import shutil
import tempfile
import uuid

import pytest

# 앱 import 전에 테스트용 DB / 업로드 경로 지정
TEST_DIR = tempfile.mkdtemp(prefix="school_api_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(TEST_DIR, 'test.db')}"
os.environ["UPLOAD_ROOT"] = os.path.join(TEST_DIR, "uploads")

from fastapi.testclient import TestClient
from school_api.core.config import settings
from school_api.main import app
from school_api.models.school import School


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c
    shutil.rmtree(TEST_DIR, ignore_errors=True)


@pytest.fixture
def school_form():
    # 항상 새로운 이메일로 생성
    return {
        "name": "Oak Hall",
        "address": "1 Main St",
        "city": "Springfield",
        "state": "IL",
        "contact": "1234567890",
        "email_id": f"admin_{uuid.uuid4().hex[:8]}@oak.edu",
    }


@pytest.fixture
def jpeg_bytes():
    # 내용은 검사하지 않으므로 JPEG 헤더만 있는 작은 바이트열
    return b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"


@pytest.fixture
def image_file(jpeg_bytes):
    return {"image": ("oak.jpg", jpeg_bytes, "image/jpeg")}


@pytest.fixture
def count_schools(client):
    def _count(email_id: str) -> int:
        db = app.state.database.SessionLocal()
        try:
            return db.query(School).filter(School.email_id == email_id.lower()).count()
        finally:
            db.close()
    return _count


@pytest.fixture
def stored_images(client):
    def _list() -> set:
        if not os.path.isdir(settings.UPLOAD_DIR):
            return set()
        return set(os.listdir(settings.UPLOAD_DIR))
    return _list
