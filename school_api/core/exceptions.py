class ImageUploadError(Exception):
    """업로드 파일이 라우트 실행 전에 거부될 때 발생"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ImageTooLargeError(ImageUploadError):
    def __init__(self, message: str = "File too large"):
        super().__init__(message)


class StorageError(Exception):
    """DB 계층에서 발생한 일반 오류"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateSchoolError(StorageError):
    """schools 테이블의 unique 제약 위반 (이메일 중복)"""
