import logging
from datetime import UTC, datetime
from pathlib import PurePosixPath
from uuid import UUID, uuid4

from interview.domain.experience import mapper
from interview.domain.experience.model.aggregate import InterviewExperience
from interview.domain.experience.model.dto import (
    ExperiencePage,
    ExperienceRequest,
    ExperienceResponse,
)
from interview.domain.experience.model.value import ImageUpload
from interview.domain.experience.port.blob_store import BlobStorePort
from interview.domain.experience.port.repository import ExperienceRepository
from interview.domain.shared.error import NotFoundError
from interview.domain.shared.model.page import PageRequest, SortDirection
from interview.domain.shared.service import Service

logger = logging.getLogger(__name__)

MAX_STEM_BYTES = 100
MAX_SUFFIX_BYTES = 16


class ExperienceService(Service):
    """Owns the lifecycle of interview experiences and their images.

    Uploads that produce a new image_url are on the critical path and their
    failures propagate. Deleting an image that is being superseded or whose
    record is going away is best effort: failures are logged and the record
    operation continues.
    """

    experience_repo: ExperienceRepository
    blob_store: BlobStorePort
    image_prefix: str = "interview-experience"

    async def create(
        self,
        request: ExperienceRequest,
        image: ImageUpload | None = None,
    ) -> ExperienceResponse:
        image_url = None
        if _has_content(image):
            image_url = await self._upload(image)

        experience = InterviewExperience.new(
            uuid4(),
            mapper.to_details(request),
            image_url=image_url,
            at=datetime.now(UTC),
        )
        saved = await self.experience_repo.insert(experience)
        logger.info("Created interview experience %s (image=%s)", saved.id, saved.has_image)
        return mapper.to_response(saved)

    async def get_by_id(self, id: UUID) -> ExperienceResponse:
        return mapper.to_response(await self._get(id))

    async def search_by_owner(self, user_email: str) -> list[ExperienceResponse]:
        experiences = await self.experience_repo.list_by_owner(user_email)
        return [mapper.to_response(e) for e in experiences]

    async def search_by_tag(self, company_tag: str) -> list[ExperienceResponse]:
        experiences = await self.experience_repo.list_by_tag(company_tag)
        return [mapper.to_response(e) for e in experiences]

    async def get_page(
        self,
        page_number: int,
        page_size: int,
        sort_by: str,
        sort_dir: SortDirection,
    ) -> ExperiencePage:
        request = PageRequest(
            page_number=page_number,
            page_size=page_size,
            sort_by=sort_by,
            sort_dir=sort_dir,
        )
        experiences, total = await self.experience_repo.find_page(request)
        return ExperiencePage.of([mapper.to_response(e) for e in experiences], request, total)

    async def update(
        self,
        id: UUID,
        request: ExperienceRequest,
        image: ImageUpload | None = None,
    ) -> ExperienceResponse:
        experience = await self._get(id)
        now = datetime.now(UTC)

        if _has_content(image):
            new_url = await self._upload(image)
            if experience.has_image:
                # Deleted before the new state is saved; a crash in between
                # leaves the row pointing at a removed object.
                await self._discard_image(experience.image_url)
            experience.replace_image(new_url, at=now)

        experience.revise(mapper.to_details(request), at=now)
        saved = await self.experience_repo.save(experience)
        logger.info("Updated interview experience %s", saved.id)
        return mapper.to_response(saved)

    async def delete(self, id: UUID) -> None:
        experience = await self._get(id)
        if experience.has_image:
            await self._discard_image(experience.image_url)
        await self.experience_repo.delete(experience)
        logger.info("Deleted interview experience %s", id)

    async def _get(self, id: UUID) -> InterviewExperience:
        experience = await self.experience_repo.get(id)
        if experience is None:
            raise NotFoundError(f"Interview experience not found: {id}")
        return experience

    async def _upload(self, image: ImageUpload) -> str:
        name = PurePosixPath(image.filename.replace("\\", "/").replace("\x00", ""))
        # Object keys and filesystem names have length limits
        suffix = name.suffix if len(name.suffix.encode()) <= MAX_SUFFIX_BYTES else ""
        stem = name.stem.encode()[:MAX_STEM_BYTES].decode(errors="ignore")
        filename = f"{stem}{suffix}" if name.name else "image"
        path = f"{self.image_prefix}/{uuid4()}_{filename}"
        return await self.blob_store.upload(path, image.content, image.content_type)

    async def _discard_image(self, image_url: str) -> None:
        try:
            await self.blob_store.delete(image_url)
        except Exception:
            logger.warning("Could not delete image %s; it is now orphaned", image_url, exc_info=True)


def _has_content(image: ImageUpload | None) -> bool:
    return image is not None and not image.is_empty
