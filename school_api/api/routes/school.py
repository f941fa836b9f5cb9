import re
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from school_api.core.exceptions import DuplicateSchoolError, StorageError
from school_api.dependencies.db import get_db
from school_api.dependencies.upload import accept_image
from school_api.schemas.school import SchoolForm, SchoolResponse, MessageResponse
from school_api.services.school_service import (
    validate_school_form, get_all_schools, get_school, create_school, delete_school
)
from school_api.services.upload_service import discard_image

router = APIRouter()


SCHOOL_ID_PATTERN = re.compile(r"-?[0-9]+")
MAX_SCHOOL_ID = 2 ** 63 - 1


def parse_school_id(school_id: str) -> int:
    # ASCII 숫자만 허용 (전각 숫자, '1_0' 등은 400)
    if not SCHOOL_ID_PATTERN.fullmatch(school_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid school ID")
    school_pk = int(school_id)
    # 64비트 정수 범위를 벗어난 id는 존재할 수 없음
    if not -MAX_SCHOOL_ID - 1 <= school_pk <= MAX_SCHOOL_ID:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="School not found")
    return school_pk


def storage_failure(message: str, error: StorageError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"message": message, "error": error.message}
    )


@router.get("/schools", response_model=List[SchoolResponse], summary="학교 목록 조회")
def list_schools(db: Session = Depends(get_db)):
    """
    등록된 모든 학교를 최신 등록순으로 반환합니다.
    """
    try:
        return get_all_schools(db)
    except StorageError as e:
        raise storage_failure("Error fetching schools", e)


@router.post("/schools", response_model=SchoolResponse, status_code=status.HTTP_201_CREATED, summary="학교 등록")
def create_school_api(
        school_in: SchoolForm = Depends(SchoolForm.as_form),
        image_path: Optional[str] = Depends(accept_image),
        db: Session = Depends(get_db)
):
    """
    학교 등록 API (multipart/form-data)
    - 이미지는 라우트 실행 전에 uploads/schoolImages/ 에 저장됨
    - 필드 검증: 필수값, 이메일 형식, 10자리 연락처
    - 저장 이후 단계에서 실패하면 방금 저장한 이미지를 삭제 (best-effort, 트랜잭션 아님)
    """
    try:
        values = validate_school_form(school_in, image_path)
        return create_school(db, values, image_path)
    except DuplicateSchoolError:
        discard_image(image_path)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="School with this email already exists")
    except StorageError as e:
        discard_image(image_path)
        raise storage_failure("Error creating school", e)
    except Exception:
        discard_image(image_path)
        raise


@router.get("/schools/{school_id}", response_model=SchoolResponse, summary="학교 단건 조회")
def get_school_api(school_id: str, db: Session = Depends(get_db)):
    school_pk = parse_school_id(school_id)
    try:
        school = get_school(db, school_pk)
    except StorageError as e:
        raise storage_failure("Error fetching school", e)
    if not school:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="School not found")
    return school


@router.delete("/schools/{school_id}", response_model=MessageResponse, summary="학교 삭제")
def delete_school_api(school_id: str, db: Session = Depends(get_db)):
    """
    학교 레코드를 삭제하고, 연결된 이미지 파일이 있으면 디스크에서 함께 삭제합니다.
    """
    school_pk = parse_school_id(school_id)
    try:
        image_path = delete_school(db, school_pk)
    except StorageError as e:
        raise storage_failure("Error deleting school", e)
    if image_path is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="School not found")
    discard_image(image_path)
    return MessageResponse(message="School deleted successfully")
