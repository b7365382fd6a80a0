from dishka import AsyncContainer, Scope, from_context, make_async_container

from interview.config import Config
from interview.domain.experience.util.di import ExperienceProvider
from interview.infrastructure.persistence import PersistenceProvider
from interview.infrastructure.storage import StorageProvider
from interview.util.di import Provider


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config) -> AsyncContainer:
    return make_async_container(
        ConfigProvider(),
        PersistenceProvider(),
        StorageProvider(),
        ExperienceProvider(),
        context={Config: config},
    )
