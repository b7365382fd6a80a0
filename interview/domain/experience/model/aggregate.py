from datetime import datetime
from uuid import UUID

from interview.domain.experience.model.value import ExperienceDetails
from interview.domain.shared.model.aggregate import Aggregate


class InterviewExperience(Aggregate):
    id: UUID
    user_name: str
    user_email: str
    company_tag: str
    title: str
    content: str
    image_url: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def new(
        cls,
        id: UUID,
        details: ExperienceDetails,
        *,
        image_url: str | None,
        at: datetime,
    ) -> "InterviewExperience":
        return cls(
            id=id,
            **details.model_dump(),
            image_url=image_url,
            created_at=at,
            updated_at=at,
        )

    @property
    def has_image(self) -> bool:
        return bool(self.image_url)

    def revise(self, details: ExperienceDetails, *, at: datetime) -> None:
        """Overwrite the user-authored fields. created_at is never touched."""
        self.user_name = details.user_name
        self.user_email = details.user_email
        self.company_tag = details.company_tag
        self.title = details.title
        self.content = details.content
        self.touch(at)

    def replace_image(self, image_url: str, *, at: datetime) -> None:
        self.image_url = image_url
        self.touch(at)

    def touch(self, at: datetime) -> None:
        self.updated_at = max(at, self.created_at)
