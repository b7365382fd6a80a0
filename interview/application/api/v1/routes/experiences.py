"""Interview experience REST routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, Header, UploadFile

from interview.application.api.v1.validation import (
    build_request,
    read_image,
    resolve_page_params,
)
from interview.config import Config
from interview.domain.experience.model.dto import (
    DeletedResponse,
    ExperiencePage,
    ExperienceResponse,
)
from interview.domain.experience.service import ExperienceService
from interview.domain.shared.error import ValidationError

router = APIRouter(
    prefix="/interview-experience",
    tags=["Interview Experiences"],
    route_class=DishkaRoute,
)


@router.post("", response_model=ExperienceResponse, status_code=201)
async def create_experience(
    service: FromDishka[ExperienceService],
    user_name: str = Form(""),
    user_email: str = Form(""),
    title: str = Form(""),
    content: str = Form(""),
    company_tag: str = Form(""),
    image: UploadFile | None = File(None),
    x_user_email: str | None = Header(None),
) -> ExperienceResponse:
    """Share a new interview experience, optionally with an image.

    An ``X-User-Email`` header takes precedence over the ``user_email`` form field.
    """
    request = build_request(
        user_name=user_name,
        user_email=x_user_email or user_email,
        company_tag=company_tag,
        title=title,
        content=content,
    )
    upload = await read_image(image)
    return await service.create(request, upload)


@router.get("", response_model=ExperiencePage)
async def list_experiences(
    service: FromDishka[ExperienceService],
    config: FromDishka[Config],
    page_number: int | None = None,
    page_size: int | None = None,
    sort_by: str | None = None,
    sort_dir: str | None = None,
) -> ExperiencePage:
    number, size, field, direction = resolve_page_params(
        config.pagination, page_number, page_size, sort_by, sort_dir
    )
    return await service.get_page(number, size, field, direction)


@router.get("/mine", response_model=list[ExperienceResponse])
async def list_my_experiences(
    service: FromDishka[ExperienceService],
    x_user_email: str | None = Header(None),
) -> list[ExperienceResponse]:
    if not x_user_email:
        raise ValidationError("X-User-Email header is required", field="X-User-Email")
    return await service.search_by_owner(x_user_email)


@router.get("/search/email/{user_email}", response_model=list[ExperienceResponse])
async def search_by_email(
    user_email: str,
    service: FromDishka[ExperienceService],
) -> list[ExperienceResponse]:
    return await service.search_by_owner(user_email)


@router.get("/search/company/{company_tag}", response_model=list[ExperienceResponse])
async def search_by_company(
    company_tag: str,
    service: FromDishka[ExperienceService],
) -> list[ExperienceResponse]:
    return await service.search_by_tag(company_tag)


@router.get("/{id}", response_model=ExperienceResponse)
async def get_experience(
    id: UUID,
    service: FromDishka[ExperienceService],
) -> ExperienceResponse:
    return await service.get_by_id(id)


@router.put("/{id}", response_model=ExperienceResponse)
async def update_experience(
    id: UUID,
    service: FromDishka[ExperienceService],
    user_name: str = Form(""),
    user_email: str = Form(""),
    title: str = Form(""),
    content: str = Form(""),
    company_tag: str = Form(""),
    image: UploadFile | None = File(None),
    x_user_email: str | None = Header(None),
) -> ExperienceResponse:
    """Replace the user-supplied fields; a new image supersedes the old one."""
    request = build_request(
        user_name=user_name,
        user_email=x_user_email or user_email,
        company_tag=company_tag,
        title=title,
        content=content,
    )
    upload = await read_image(image)
    return await service.update(id, request, upload)


@router.delete("/{id}", response_model=DeletedResponse)
async def delete_experience(
    id: UUID,
    service: FromDishka[ExperienceService],
) -> DeletedResponse:
    await service.delete(id)
    return DeletedResponse(message=f"Interview experience {id} deleted")
