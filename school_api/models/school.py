from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, func
from school_api.db.base import Base

class School(Base):
    __tablename__ = "schools"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    city = Column(Text, nullable=False)
    state = Column(Text, nullable=False)
    contact = Column(String(10), nullable=False)  # 10자리 숫자
    email_id = Column(String(255), unique=True, nullable=False)  # 소문자로 저장
    image = Column(Text, nullable=False)  # 업로드된 이미지의 서버 파일 경로
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())
