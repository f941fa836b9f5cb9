from typing import List, Optional

from fastapi import File, UploadFile

from school_api.core.config import settings
from school_api.core.exceptions import ImageUploadError
from school_api.services.upload_service import save_image


def accept_image(image: Optional[List[UploadFile]] = File(None)) -> Optional[str]:
    """
    'image' 필드의 파일 하나를 검증 후 디스크에 저장하고 경로를 반환합니다.
    파일이 없으면 None (필수 여부는 라우트에서 판단)
    """
    if not image:
        return None
    if len(image) > 1:
        raise ImageUploadError("Only one image file is allowed")
    return save_image(image[0], settings.UPLOAD_DIR, settings.MAX_IMAGE_SIZE)
