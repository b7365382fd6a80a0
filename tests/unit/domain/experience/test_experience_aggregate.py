"""Unit tests for the InterviewExperience aggregate."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from interview.domain.experience.model.aggregate import InterviewExperience
from interview.domain.experience.model.value import ExperienceDetails, ImageUpload

T0 = datetime(2024, 1, 1, tzinfo=UTC)


def _make_details(**overrides) -> ExperienceDetails:
    defaults = dict(
        user_name="Ada",
        user_email="a@x.com",
        company_tag="Acme",
        title="Phone screen",
        content="Two algorithm questions.",
    )
    defaults.update(overrides)
    return ExperienceDetails(**defaults)


class TestNew:
    def test_stamps_both_timestamps(self):
        experience = InterviewExperience.new(uuid4(), _make_details(), image_url=None, at=T0)

        assert experience.created_at == T0
        assert experience.updated_at == T0
        assert experience.has_image is False

    def test_carries_image_url(self):
        experience = InterviewExperience.new(uuid4(), _make_details(), image_url="u", at=T0)

        assert experience.image_url == "u"
        assert experience.has_image is True


class TestRevise:
    def test_overwrites_user_fields_and_keeps_created_at(self):
        experience = InterviewExperience.new(uuid4(), _make_details(), image_url="u", at=T0)
        later = T0 + timedelta(hours=1)

        experience.revise(_make_details(title="Onsite", company_tag="Globex"), at=later)

        assert experience.title == "Onsite"
        assert experience.company_tag == "Globex"
        assert experience.image_url == "u"
        assert experience.created_at == T0
        assert experience.updated_at == later

    def test_clock_skew_never_moves_updated_at_before_created_at(self):
        experience = InterviewExperience.new(uuid4(), _make_details(), image_url=None, at=T0)

        experience.touch(T0 - timedelta(minutes=5))

        assert experience.updated_at == T0


class TestReplaceImage:
    def test_sets_url_and_refreshes_updated_at(self):
        experience = InterviewExperience.new(uuid4(), _make_details(), image_url="old", at=T0)
        later = T0 + timedelta(days=1)

        experience.replace_image("new", at=later)

        assert experience.image_url == "new"
        assert experience.updated_at == later


class TestImageUpload:
    def test_empty_content(self):
        assert ImageUpload(content=b"").is_empty is True
        assert ImageUpload(content=b"x").is_empty is False
