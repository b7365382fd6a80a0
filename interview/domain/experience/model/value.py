from pydantic import Field

from interview.domain.shared.model.value import ValueObject


class ExperienceDetails(ValueObject):
    """User-authored fields of an interview experience."""

    user_name: str
    user_email: str
    company_tag: str
    title: str
    content: str


class ImageUpload(ValueObject):
    """Raw image bytes received with a create or update request."""

    content: bytes = Field(repr=False)
    content_type: str = "application/octet-stream"
    filename: str = "image"

    @property
    def is_empty(self) -> bool:
        return len(self.content) == 0
