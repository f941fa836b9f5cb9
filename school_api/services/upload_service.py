import logging
import os
import random
import time

from fastapi import UploadFile

from school_api.core.exceptions import ImageUploadError, ImageTooLargeError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


def build_image_filename(original_name: str | None) -> str:
    # 밀리초 타임스탬프 + 난수로 동시 업로드 시 파일명 충돌 방지 (확률적)
    ext = os.path.splitext(original_name or "")[1]
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"school-{unique_suffix}{ext}"


def save_image(file: UploadFile, upload_dir: str, max_size: int) -> str:
    """
    멀티파트로 받은 이미지를 upload_dir에 저장하고, 저장된 파일 경로를 반환합니다.
    - 파일 형식 검증: image/*  (검증 실패 시 파일을 쓰지 않음)
    - 크기 제한 초과 시 ImageTooLargeError, 쓰던 파일은 삭제
    """
    if not (file.content_type or "").startswith("image/"):
        logger.warning("Rejected upload %s with content type %s", file.filename, file.content_type)
        raise ImageUploadError("Not an image! Please upload an image file.")
    if file.size is not None and file.size > max_size:
        raise ImageTooLargeError()

    os.makedirs(upload_dir, exist_ok=True)
    path = os.path.join(upload_dir, build_image_filename(file.filename))

    written = 0
    with open(path, "wb") as out:
        while chunk := file.file.read(CHUNK_SIZE):
            written += len(chunk)
            if written > max_size:
                break
            out.write(chunk)
    if written > max_size:
        discard_image(path)
        raise ImageTooLargeError()

    logger.info("Stored upload %s (%d bytes) at %s", file.filename, written, path)
    return path


def discard_image(path: str | None) -> bool:
    """저장된 이미지를 삭제 (best-effort). 실제로 삭제했으면 True"""
    if not path or not os.path.exists(path):
        return False
    try:
        os.remove(path)
    except OSError:
        logger.exception("Could not delete image %s", path)
        return False
    logger.info("Deleted image %s", path)
    return True
