"""Unit tests for the experience mapper."""

from datetime import UTC, datetime
from uuid import uuid4

from interview.domain.experience import mapper
from interview.domain.experience.model.aggregate import InterviewExperience
from interview.domain.experience.model.dto import ExperienceRequest


def _make_experience(**overrides) -> InterviewExperience:
    created = datetime(2024, 5, 1, 9, 30, tzinfo=UTC)
    defaults = dict(
        id=uuid4(),
        user_name="Grace",
        user_email="grace@navy.mil",
        company_tag="Initech",
        title="Onsite loop",
        content="Whiteboard, pairing, then a chat with the manager.",
        image_url="http://localhost:8000/media/interview-experience/a.png",
        created_at=created,
        updated_at=datetime(2024, 5, 2, tzinfo=UTC),
    )
    defaults.update(overrides)
    return InterviewExperience(**defaults)


class TestToResponse:
    def test_copies_every_field(self):
        experience = _make_experience()

        response = mapper.to_response(experience)

        assert response.model_dump() == experience.model_dump()

    def test_absent_image_stays_absent(self):
        response = mapper.to_response(_make_experience(image_url=None))

        assert response.image_url is None


class TestFromResponse:
    def test_inverts_to_response(self):
        experience = _make_experience()

        assert mapper.from_response(mapper.to_response(experience)) == experience


class TestDetails:
    def test_to_details_carries_only_user_fields(self):
        request = ExperienceRequest(
            user_name="Grace",
            user_email="grace@navy.mil",
            company_tag="Initech",
            title="Phone screen",
            content="Forty minutes on graph traversal.",
        )

        details = mapper.to_details(request)

        assert set(details.model_dump()) == {
            "user_name",
            "user_email",
            "company_tag",
            "title",
            "content",
        }
        assert details.title == "Phone screen"

    def test_to_request_inverts_to_details_on_user_fields(self):
        experience = _make_experience()

        details = mapper.to_details(mapper.to_request(experience))

        assert details.user_name == experience.user_name
        assert details.user_email == experience.user_email
        assert details.company_tag == experience.company_tag
        assert details.title == experience.title
        assert details.content == experience.content

    def test_to_request_does_not_revalidate_stored_values(self):
        experience = _make_experience(content="Short.", title="  padded  ")

        request = mapper.to_request(experience)

        assert request.content == "Short."
        assert request.title == "  padded  "
