from typing import AsyncIterable

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from interview.config import Config
from interview.domain.experience.port.repository import ExperienceRepository
from interview.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from interview.infrastructure.persistence.repository.experience import (
    SQLAlchemyExperienceRepository,
)
from interview.util.di import Provider


class PersistenceProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config.database)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # One session per request; committed when the request scope closes
    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    experience_repo = provide(
        SQLAlchemyExperienceRepository,
        scope=Scope.REQUEST,
        provides=ExperienceRepository,
    )
