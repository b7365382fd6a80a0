from collections.abc import Iterator
from contextlib import contextmanager
from uuid import UUID

from sqlalchemy import Column, delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from interview.domain.experience.model.aggregate import InterviewExperience
from interview.domain.experience.port.repository import ExperienceRepository
from interview.domain.shared.error import (
    ConflictError,
    NotFoundError,
    StorageUnavailableError,
    ValidationError,
)
from interview.domain.shared.model.page import PageRequest, SortDirection
from interview.infrastructure.persistence.mappers.experience import (
    experience_to_dict,
    row_to_experience,
)
from interview.infrastructure.persistence.tables import interview_experiences_table

_t = interview_experiences_table


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


# Accept both column names and their camelCase spelling (updated_at / updatedAt)
SORTABLE_COLUMNS: dict[str, Column] = {
    **{c.name: c for c in _t.columns},
    **{_camel(c.name): c for c in _t.columns},
}


@contextmanager
def _store_errors(action: str) -> Iterator[None]:
    try:
        yield
    except IntegrityError as e:
        raise ConflictError(f"Record store refused to {action}: {e.orig}") from e
    except SQLAlchemyError as e:
        raise StorageUnavailableError(f"Record store failed to {action}: {e}") from e


class SQLAlchemyExperienceRepository(ExperienceRepository):
    """SQLAlchemy implementation of ExperienceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(self, experience: InterviewExperience) -> InterviewExperience:
        stmt = insert(_t).values(**experience_to_dict(experience))
        with _store_errors("insert interview experience"):
            await self.session.execute(stmt)
            await self.session.flush()
        return experience

    async def get(self, id: UUID) -> InterviewExperience | None:
        stmt = select(_t).where(_t.c.id == str(id))
        with _store_errors("load interview experience"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_experience(dict(row)) if row else None

    async def list_by_owner(self, user_email: str) -> list[InterviewExperience]:
        return await self._list_newest_first(_t.c.user_email == user_email)

    async def list_by_tag(self, company_tag: str) -> list[InterviewExperience]:
        return await self._list_newest_first(_t.c.company_tag == company_tag)

    async def find_page(
        self, request: PageRequest
    ) -> tuple[list[InterviewExperience], int]:
        column = SORTABLE_COLUMNS.get(request.sort_by)
        if column is None:
            raise ValidationError(
                f"Unknown sort field '{request.sort_by}'",
                field="sort_by",
            )
        order = column.asc() if request.sort_dir == SortDirection.ASC else column.desc()

        count_stmt = select(func.count()).select_from(_t)
        with _store_errors("count interview experiences"):
            total = (await self.session.execute(count_stmt)).scalar_one()

        # Past the end: nothing to fetch, and the offset may exceed the dialect's integer range
        if request.offset >= total:
            return [], total

        stmt = (
            select(_t)
            .order_by(order, _t.c.id.asc())
            .offset(request.offset)
            .limit(request.page_size)
        )
        with _store_errors("page interview experiences"):
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_experience(dict(r)) for r in rows], total

    async def save(self, experience: InterviewExperience) -> InterviewExperience:
        values = experience_to_dict(experience)
        # Identity and creation time are immutable
        values.pop("id")
        values.pop("created_at")
        stmt = update(_t).where(_t.c.id == str(experience.id)).values(**values)
        with _store_errors("update interview experience"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        if result.rowcount == 0:
            raise NotFoundError(f"Interview experience not found: {experience.id}")
        return experience

    async def delete(self, experience: InterviewExperience) -> None:
        stmt = delete(_t).where(_t.c.id == str(experience.id))
        with _store_errors("delete interview experience"):
            await self.session.execute(stmt)
            await self.session.flush()

    async def _list_newest_first(self, criterion) -> list[InterviewExperience]:
        stmt = (
            select(_t)
            .where(criterion)
            .order_by(_t.c.created_at.desc(), _t.c.id.asc())
        )
        with _store_errors("search interview experiences"):
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_experience(dict(r)) for r in rows]
