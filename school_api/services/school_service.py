import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from school_api.core.exceptions import DuplicateSchoolError, StorageError
from school_api.models.school import School
from school_api.schemas.school import SchoolForm
from school_api.utils.validators import is_valid_email, is_valid_contact

logger = logging.getLogger(__name__)


def validate_school_form(school_in: SchoolForm, image_path: Optional[str]) -> dict:
    """
    입력값 검증 후 저장할 값(이름·주소·도시·주 공백 제거, 이메일 소문자)을 반환합니다.
    연락처와 이메일은 공백을 제거하지 않고 원본 그대로 검증
    검증 실패 시 400
    """
    if school_in.missing_fields():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="All fields are required")
    if not image_path:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Image is required")

    email_id = school_in.email_id
    contact = school_in.contact
    if not is_valid_email(email_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Please enter a valid email address")
    if not is_valid_contact(contact):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Contact must be a 10-digit number")

    return {
        "name": school_in.name.strip(),
        "address": school_in.address.strip(),
        "city": school_in.city.strip(),
        "state": school_in.state.strip(),
        "contact": contact,
        "email_id": email_id.lower(),
    }


def get_all_schools(db: Session) -> List[School]:
    try:
        return db.query(School).order_by(School.created_at.desc(), School.id.desc()).all()
    except SQLAlchemyError as e:
        logger.exception("Error fetching schools")
        raise StorageError(str(e)) from e


def get_school(db: Session, school_id: int) -> Optional[School]:
    try:
        return db.query(School).filter(School.id == school_id).first()
    except (SQLAlchemyError, OverflowError) as e:
        logger.exception("Error fetching school %s", school_id)
        raise StorageError(str(e)) from e


def create_school(db: Session, values: dict, image_path: str) -> School:
    school = School(**values, image=image_path)
    try:
        db.add(school)
        db.commit()
        db.refresh(school)
    except IntegrityError as e:
        # 모든 컬럼이 채워진 상태이므로 무결성 오류는 email_id unique 제약 위반
        db.rollback()
        logger.warning("Duplicate school email %s", values.get("email_id"))
        raise DuplicateSchoolError(str(e.orig)) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error creating school")
        raise StorageError(str(e)) from e
    logger.info("Created school %s (%s)", school.id, school.email_id)
    return school


def delete_school(db: Session, school_id: int) -> Optional[str]:
    """
    학교 레코드를 삭제하고 삭제된 레코드의 이미지 경로를 반환합니다. 없으면 None
    이미지 파일 삭제는 호출하는 쪽에서 커밋 이후 수행
    """
    try:
        school = db.query(School).filter(School.id == school_id).first()
        if not school:
            return None
        image_path = school.image
        db.delete(school)
        db.commit()
    except (SQLAlchemyError, OverflowError) as e:
        db.rollback()
        logger.exception("Error deleting school %s", school_id)
        raise StorageError(str(e)) from e
    logger.info("Deleted school %s", school_id)
    return image_path
