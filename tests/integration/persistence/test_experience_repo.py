"""Integration tests for SQLAlchemyExperienceRepository."""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest
from sqlalchemy.exc import OperationalError

from interview.domain.experience.model.aggregate import InterviewExperience
from interview.domain.shared.error import (
    ConflictError,
    NotFoundError,
    StorageUnavailableError,
    ValidationError,
)
from interview.domain.shared.model.page import PageRequest, SortDirection
from interview.infrastructure.persistence.repository.experience import (
    SQLAlchemyExperienceRepository,
)

T0 = datetime(2024, 1, 1, tzinfo=UTC)


def _make_experience(**overrides) -> InterviewExperience:
    defaults = dict(
        id=uuid4(),
        user_name="Ada",
        user_email="a@x.com",
        company_tag="Acme",
        title="Phone screen",
        content="Two algorithm questions and a chat.",
        image_url=None,
        created_at=T0,
        updated_at=T0,
    )
    defaults.update(overrides)
    return InterviewExperience(**defaults)


@pytest.fixture
def repo(sqlite_session) -> SQLAlchemyExperienceRepository:
    return SQLAlchemyExperienceRepository(sqlite_session)


async def _seed(repo, count: int, **overrides) -> list[InterviewExperience]:
    experiences = []
    for i in range(count):
        at = T0 + timedelta(minutes=i)
        exp = _make_experience(title=f"Experience {i:02d}", created_at=at, updated_at=at, **overrides)
        experiences.append(await repo.insert(exp))
    return experiences


class TestInsertAndGet:
    @pytest.mark.asyncio
    async def test_round_trips_all_fields(self, repo):
        exp = _make_experience(image_url="http://localhost:8000/media/p/a.png")

        await repo.insert(exp)
        loaded = await repo.get(exp.id)

        assert loaded == exp
        assert loaded.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_get_absent_returns_none(self, repo):
        assert await repo.get(uuid4()) is None


class TestSearch:
    @pytest.mark.asyncio
    async def test_list_by_owner_newest_first(self, repo):
        seeded = await _seed(repo, 3)
        await repo.insert(_make_experience(user_email="other@x.com"))

        result = await repo.list_by_owner("a@x.com")

        assert [e.id for e in result] == [e.id for e in reversed(seeded)]

    @pytest.mark.asyncio
    async def test_list_by_tag_is_exact_match(self, repo):
        await repo.insert(_make_experience(company_tag="Acme"))
        await repo.insert(_make_experience(company_tag="acme"))

        result = await repo.list_by_tag("Acme")

        assert [e.company_tag for e in result] == ["Acme"]

    @pytest.mark.asyncio
    async def test_equal_created_at_is_ordered_by_id(self, repo):
        a = _make_experience(id=UUID("00000000-0000-0000-0000-000000000002"))
        b = _make_experience(id=UUID("00000000-0000-0000-0000-000000000001"))
        await repo.insert(a)
        await repo.insert(b)

        result = await repo.list_by_tag("Acme")

        assert [e.id for e in result] == [b.id, a.id]

    @pytest.mark.asyncio
    async def test_no_match_returns_empty(self, repo):
        await _seed(repo, 2)

        assert await repo.list_by_owner("nobody@x.com") == []
        assert await repo.list_by_tag("Nowhere") == []


class TestFindPage:
    @pytest.mark.asyncio
    async def test_pages_through_25_records(self, repo):
        await _seed(repo, 25)

        first, total = await repo.find_page(PageRequest(page_number=0, page_size=10, sort_by="updated_at"))
        last, _ = await repo.find_page(PageRequest(page_number=2, page_size=10, sort_by="updated_at"))

        assert total == 25
        assert len(first) == 10
        assert first[0].title == "Experience 00"
        assert [e.title for e in last] == [f"Experience {i:02d}" for i in range(20, 25)]

    @pytest.mark.asyncio
    async def test_descending_camel_case_field(self, repo):
        await _seed(repo, 3)

        result, _ = await repo.find_page(
            PageRequest(page_number=0, page_size=10, sort_by="createdAt", sort_dir=SortDirection.DESC)
        )

        assert [e.title for e in result] == ["Experience 02", "Experience 01", "Experience 00"]

    @pytest.mark.asyncio
    async def test_unknown_sort_field_is_rejected(self, repo):
        with pytest.raises(ValidationError) as exc_info:
            await repo.find_page(PageRequest(page_number=0, page_size=10, sort_by="salary"))

        assert exc_info.value.field == "sort_by"

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, repo):
        await _seed(repo, 3)

        result, total = await repo.find_page(PageRequest(page_number=5, page_size=10, sort_by="title"))

        assert result == []
        assert total == 3

    @pytest.mark.asyncio
    async def test_offset_beyond_integer_range_is_empty(self, repo):
        await _seed(repo, 3)

        result, total = await repo.find_page(
            PageRequest(page_number=2**62, page_size=10, sort_by="updated_at")
        )

        assert result == []
        assert total == 3


class TestSave:
    @pytest.mark.asyncio
    async def test_updates_mutable_fields(self, repo):
        exp = await repo.insert(_make_experience())
        later = T0 + timedelta(hours=2)
        exp.title = "Onsite"
        exp.replace_image("http://localhost:8000/media/p/new.png", at=later)

        await repo.save(exp)
        loaded = await repo.get(exp.id)

        assert loaded.title == "Onsite"
        assert loaded.image_url == "http://localhost:8000/media/p/new.png"
        assert loaded.created_at == T0
        assert loaded.updated_at == later

    @pytest.mark.asyncio
    async def test_save_absent_raises_not_found(self, repo):
        with pytest.raises(NotFoundError):
            await repo.save(_make_experience())


class TestDelete:
    @pytest.mark.asyncio
    async def test_removes_row(self, repo):
        exp = await repo.insert(_make_experience())

        await repo.delete(exp)

        assert await repo.get(exp.id) is None


class TestStoreFailures:
    @pytest.mark.asyncio
    async def test_duplicate_id_becomes_conflict(self, repo):
        exp = await repo.insert(_make_experience())

        with pytest.raises(ConflictError):
            await repo.insert(_make_experience(id=exp.id))

    @pytest.mark.asyncio
    async def test_driver_error_becomes_storage_unavailable(self, repo, monkeypatch):
        async def broken_execute(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("database is locked"))

        monkeypatch.setattr(repo.session, "execute", broken_execute)

        with pytest.raises(StorageUnavailableError):
            await repo.get(uuid4())
