import re

# 단어 문자(ASCII) 그룹을 '.' 또는 '-' 로 연결, '@', 도메인, 2~3자리 TLD 반복
# 예: admin@oak.edu, first.last@mail.co.in
EMAIL_PATTERN = re.compile(r"\w+([.-]\w+)*@\w+([.-]\w+)*(\.\w{2,3})+", re.ASCII)
CONTACT_PATTERN = re.compile(r"[0-9]{10}")


def is_valid_email(email) -> bool:
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_contact(contact) -> bool:
    if not isinstance(contact, str):
        return False
    return CONTACT_PATTERN.fullmatch(contact) is not None
