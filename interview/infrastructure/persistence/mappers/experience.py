from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from interview.domain.experience.model.aggregate import InterviewExperience


def row_to_experience(row: dict[str, Any]) -> InterviewExperience:
    """Convert database row to InterviewExperience aggregate.

    SQLite drops tzinfo on DateTime(timezone=True) columns, so naive values
    are read back as UTC.
    """
    return InterviewExperience(
        id=UUID(row["id"]),
        user_name=row["user_name"],
        user_email=row["user_email"],
        company_tag=row["company_tag"],
        title=row["title"],
        content=row["content"],
        image_url=row.get("image_url") or None,
        created_at=_as_utc(row["created_at"]),
        updated_at=_as_utc(row["updated_at"]),
    )


def experience_to_dict(experience: InterviewExperience) -> dict[str, Any]:
    """Convert InterviewExperience aggregate to database dict."""
    return {
        "id": str(experience.id),
        "user_name": experience.user_name,
        "user_email": experience.user_email,
        "company_tag": experience.company_tag,
        "title": experience.title,
        "content": experience.content,
        "image_url": experience.image_url,
        "created_at": experience.created_at,
        "updated_at": experience.updated_at,
    }


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value
