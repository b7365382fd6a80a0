"""Precondition checks applied to incoming requests before the service runs."""

from fastapi import UploadFile
from pydantic import ValidationError as PydanticValidationError

from interview.config import PaginationConfig
from interview.domain.experience.model.dto import ExperienceRequest
from interview.domain.experience.model.value import ImageUpload
from interview.domain.shared.error import ValidationError
from interview.domain.shared.model.page import SortDirection

ACCEPTED_IMAGE_TYPES = frozenset(
    {
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/gif",
        "image/webp",
    }
)


def build_request(
    user_name: str,
    user_email: str,
    company_tag: str,
    title: str,
    content: str,
) -> ExperienceRequest:
    """Validate form fields into an ExperienceRequest.

    Raises:
        ValidationError: naming the first offending field.
    """
    try:
        return ExperienceRequest(
            user_name=user_name,
            user_email=user_email,
            company_tag=company_tag,
            title=title,
            content=content,
        )
    except PydanticValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(x) for x in err.get("loc", [])) or None
        raise ValidationError(
            f"Invalid {field or 'request'}: {err.get('msg', 'invalid value')}",
            field=field,
        ) from None


async def read_image(upload: UploadFile | None) -> ImageUpload | None:
    """Read an optional multipart image.

    A missing part or a zero-byte upload means "no image". Anything else
    must carry one of ACCEPTED_IMAGE_TYPES.
    """
    if upload is None:
        return None

    content = await upload.read()
    if not content:
        return None

    content_type = (upload.content_type or "").strip().lower()
    if content_type not in ACCEPTED_IMAGE_TYPES:
        raise ValidationError(
            f"Unsupported image type '{upload.content_type}'. "
            f"Allowed: {', '.join(sorted(ACCEPTED_IMAGE_TYPES))}",
            field="image",
        )
    return ImageUpload(
        content=content,
        content_type=content_type,
        filename=upload.filename or "image",
    )


def resolve_page_params(
    defaults: PaginationConfig,
    page_number: int | None,
    page_size: int | None,
    sort_by: str | None,
    sort_dir: str | None,
) -> tuple[int, int, str, SortDirection]:
    """Fill omitted paging parameters from config and check the rest."""
    page_number = defaults.page_number if page_number is None else page_number
    page_size = defaults.page_size if page_size is None else page_size

    if page_number < 0:
        raise ValidationError("page_number must be >= 0", field="page_number")
    if page_size < 1:
        raise ValidationError("page_size must be >= 1", field="page_size")

    return (
        page_number,
        min(page_size, defaults.max_page_size),
        sort_by or defaults.sort_by,
        SortDirection.parse(sort_dir or defaults.sort_dir),
    )
