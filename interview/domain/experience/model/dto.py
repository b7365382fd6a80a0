"""Wire-facing request and response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from interview.domain.shared.model.page import Page

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ExperienceRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    user_name: str = Field(min_length=1, max_length=100)
    user_email: str = Field(pattern=EMAIL_PATTERN, max_length=254)
    company_tag: str = Field(min_length=1, max_length=100)
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=10, max_length=20_000)


class ExperienceResponse(BaseModel):
    id: UUID
    user_name: str
    user_email: str
    company_tag: str
    title: str
    content: str
    image_url: str | None
    created_at: datetime
    updated_at: datetime


ExperiencePage = Page[ExperienceResponse]


class DeletedResponse(BaseModel):
    message: str
