from datetime import datetime
from typing import Optional

from fastapi import Form
from pydantic import BaseModel

REQUIRED_FIELDS = ("name", "address", "city", "state", "contact", "email_id")

class SchoolForm(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    contact: Optional[str] = None
    email_id: Optional[str] = None

    @classmethod
    def as_form(
        cls,
        name: Optional[str] = Form(None),
        address: Optional[str] = Form(None),
        city: Optional[str] = Form(None),
        state: Optional[str] = Form(None),
        contact: Optional[str] = Form(None),
        email_id: Optional[str] = Form(None),
    ):
        return cls(name=name, address=address, city=city, state=state, contact=contact, email_id=email_id)

    def missing_fields(self) -> list[str]:
        # 공백만 있는 값도 누락으로 간주
        return [field for field in REQUIRED_FIELDS if not (getattr(self, field) or "").strip()]

class SchoolResponse(BaseModel):
    id: int
    name: str
    address: str
    city: str
    state: str
    contact: str
    email_id: str
    image: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class MessageResponse(BaseModel):
    message: str
