"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import Column, DateTime, Index, MetaData, String, Table, Text

metadata = MetaData()

# ============================================================================
# INTERVIEW EXPERIENCES TABLE
# ============================================================================
interview_experiences_table = Table(
    "interview_experiences",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("user_name", String(100), nullable=False),
    Column("user_email", String(254), nullable=False),
    Column("company_tag", String(100), nullable=False),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("image_url", String, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

# Secondary indexes backing owner and tag search (newest first)
Index(
    "idx_interview_experiences_user_email_created",
    interview_experiences_table.c.user_email,
    interview_experiences_table.c.created_at.desc(),
)
Index(
    "idx_interview_experiences_company_tag_created",
    interview_experiences_table.c.company_tag,
    interview_experiences_table.c.created_at.desc(),
)
