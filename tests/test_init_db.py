import logging

from sqlalchemy import inspect

from school_api.db.init_db import ensure_schema
from school_api.db.session import Database


def test_ensure_schema_is_idempotent(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'schema.db'}")
    try:
        assert ensure_schema(database) is True
        assert ensure_schema(database) is True
        tables = inspect(database.engine).get_table_names()
        assert tables.count("schools") == 1
        columns = {c["name"] for c in inspect(database.engine).get_columns("schools")}
        assert columns == {
            "id", "name", "address", "city", "state", "contact",
            "email_id", "image", "created_at", "updated_at",
        }
    finally:
        database.dispose()


def test_ensure_schema_logs_and_does_not_raise(tmp_path, caplog):
    # 존재하지 않는 디렉터리의 sqlite 파일은 열 수 없음
    database = Database(f"sqlite:///{tmp_path / 'missing' / 'schema.db'}")
    try:
        with caplog.at_level(logging.ERROR):
            assert ensure_schema(database) is False
        assert "Database initialization error" in caplog.text
    finally:
        database.dispose()
