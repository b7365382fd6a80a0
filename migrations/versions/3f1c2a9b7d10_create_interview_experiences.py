"""create_interview_experiences

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-19 09:12:44.201377

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9b7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "interview_experiences",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("user_name", sa.String(100), nullable=False),
        sa.Column("user_email", sa.String(254), nullable=False),
        sa.Column("company_tag", sa.String(100), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_interview_experiences_user_email_created",
        "interview_experiences",
        ["user_email", sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_interview_experiences_company_tag_created",
        "interview_experiences",
        ["company_tag", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_interview_experiences_company_tag_created", "interview_experiences")
    op.drop_index("idx_interview_experiences_user_email_created", "interview_experiences")
    op.drop_table("interview_experiences")
