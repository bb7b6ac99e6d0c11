from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class ContactCreate(BaseModel):
    name: str = Field(min_length=2, max_length=50)
    email: EmailStr
    subject: str = Field(min_length=5, max_length=100)
    message: str = Field(min_length=10, max_length=1000)


class ContactMessageOut(BaseModel):
    id: str
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime
