from abc import abstractmethod
from typing import Protocol
from uuid import UUID

from interview.domain.experience.model.aggregate import InterviewExperience
from interview.domain.shared.model.page import PageRequest
from interview.domain.shared.port import Port


class ExperienceRepository(Port, Protocol):
    @abstractmethod
    async def insert(self, experience: InterviewExperience) -> InterviewExperience: ...

    @abstractmethod
    async def get(self, id: UUID) -> InterviewExperience | None: ...

    @abstractmethod
    async def list_by_owner(self, user_email: str) -> list[InterviewExperience]:
        """Exact match on user_email, most recently created first."""
        ...

    @abstractmethod
    async def list_by_tag(self, company_tag: str) -> list[InterviewExperience]:
        """Exact match on company_tag, most recently created first."""
        ...

    @abstractmethod
    async def find_page(
        self, request: PageRequest
    ) -> tuple[list[InterviewExperience], int]:
        """Return one sorted slice and the total number of rows."""
        ...

    @abstractmethod
    async def save(self, experience: InterviewExperience) -> InterviewExperience:
        """Update an existing row in place, identified by id."""
        ...

    @abstractmethod
    async def delete(self, experience: InterviewExperience) -> None: ...
