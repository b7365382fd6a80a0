"""Translation between wire models and the persisted aggregate.

All functions are pure. Identity, timestamps and the image URL of a new
record are decided by ExperienceService, never here.
"""

from interview.domain.experience.model.aggregate import InterviewExperience
from interview.domain.experience.model.dto import ExperienceRequest, ExperienceResponse
from interview.domain.experience.model.value import ExperienceDetails


def to_details(request: ExperienceRequest) -> ExperienceDetails:
    return ExperienceDetails(
        user_name=request.user_name,
        user_email=request.user_email,
        company_tag=request.company_tag,
        title=request.title,
        content=request.content,
    )


def to_request(experience: InterviewExperience) -> ExperienceRequest:
    """Rebuild the request a record was made from.

    Stored values are taken as they are; input rules are not re-applied.
    """
    return ExperienceRequest.model_construct(
        user_name=experience.user_name,
        user_email=experience.user_email,
        company_tag=experience.company_tag,
        title=experience.title,
        content=experience.content,
    )


def to_response(experience: InterviewExperience) -> ExperienceResponse:
    return ExperienceResponse(
        id=experience.id,
        user_name=experience.user_name,
        user_email=experience.user_email,
        company_tag=experience.company_tag,
        title=experience.title,
        content=experience.content,
        image_url=experience.image_url,
        created_at=experience.created_at,
        updated_at=experience.updated_at,
    )


def from_response(response: ExperienceResponse) -> InterviewExperience:
    return InterviewExperience(
        id=response.id,
        user_name=response.user_name,
        user_email=response.user_email,
        company_tag=response.company_tag,
        title=response.title,
        content=response.content,
        image_url=response.image_url,
        created_at=response.created_at,
        updated_at=response.updated_at,
    )
