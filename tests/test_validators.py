import pytest

from school_api.utils.validators import is_valid_email, is_valid_contact


@pytest.mark.parametrize("email", [
    "admin@oak.edu",
    "Admin@Oak.Edu",
    "first.last@mail.co.in",
    "a-b@c-d.org",
    "user_1@domain.com",
])
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", [
    "",
    None,
    "plainaddress",
    "@oak.edu",
    "admin@",
    "admin@oak",
    "admin@oak.e",
    "admin@oak.education",
    "admin@@oak.edu",
    "admin oak@oak.edu",
    "admin..x@oak.edu",
    "ädmin@oak.edu",
    "admin@oak.edu\n",
])
def test_invalid_emails(email):
    assert not is_valid_email(email)


def test_email_check_is_fast_on_pathological_input():
    # 중첩 반복 패턴에서 백트래킹이 폭증하지 않아야 함
    assert not is_valid_email("a" * 5000 + "!")


@pytest.mark.parametrize("contact", ["1234567890", "0000000000", "9876543210"])
def test_valid_contacts(contact):
    assert is_valid_contact(contact)


@pytest.mark.parametrize("contact", [
    "",
    None,
    "12345",
    "12345678901",
    "123456789a",
    " 1234567890",
    "1234567890\n",
    "123-456-7890",
    "１２３４５６７８９０",
])
def test_invalid_contacts(contact):
    assert not is_valid_contact(contact)
