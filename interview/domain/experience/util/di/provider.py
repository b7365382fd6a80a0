from dishka import Scope, provide

from interview.config import Config
from interview.domain.experience.port.blob_store import BlobStorePort
from interview.domain.experience.port.repository import ExperienceRepository
from interview.domain.experience.service import ExperienceService
from interview.util.di import Provider


class ExperienceProvider(Provider):
    @provide(scope=Scope.REQUEST)
    def get_experience_service(
        self,
        experience_repo: ExperienceRepository,
        blob_store: BlobStorePort,
        config: Config,
    ) -> ExperienceService:
        return ExperienceService(
            experience_repo=experience_repo,
            blob_store=blob_store,
            image_prefix=config.storage.image_prefix,
        )
