"""Create incubator tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates users plus one table per resource: announcements, blogs, events,
       programs, mentors, contacts, pre_incubation_applications and
       incubation_applications.
How:   Portable column types (Uuid, DateTime with time zone, JSON) so the same
       revision runs on PostgreSQL and SQLite. Defaults are applied by the ORM.

Rollback: downgrade() drops every table (destructive, all data lost).
"""

from typing import List, Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TZ = sa.DateTime(timezone=True)


def document_columns() -> List[sa.Column]:
    """id, timestamps and audit references shared by every table."""
    return [
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        sa.Column("created_at", TZ, nullable=False),
        sa.Column("updated_at", TZ, nullable=False),
        sa.Column(
            "created_by", sa.Uuid(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column(
            "updated_by", sa.Uuid(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True
        ),
    ]


def active_column() -> sa.Column:
    return sa.Column("is_active", sa.Boolean(), nullable=False)


def tracking_columns() -> List[sa.Column]:
    """Admin-side tracking shared by both application tables."""
    return [
        sa.Column("application_status", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("submitted_at", TZ, nullable=False),
        sa.Column("reviewed_at", TZ, nullable=True),
        sa.Column("approved_at", TZ, nullable=True),
        sa.Column("start_date", TZ, nullable=True),
        sa.Column("end_date", TZ, nullable=True),
        sa.Column("funding_received", sa.Float(), nullable=False),
        sa.Column("employees", sa.Integer(), nullable=False),
        sa.Column("achievements", sa.JSON(), nullable=False),
        sa.Column("milestones", sa.JSON(), nullable=False),
        sa.Column("application_type", sa.String(20), nullable=False),
        sa.Column("current_stage", sa.String(20), nullable=False),
    ]


def index_created_at(table: str) -> None:
    op.create_index(f"ix_{table}_created_at", table, ["created_at"])


def upgrade() -> None:
    # ── users ─────────────────────────────────────────────────────────────
    # Created first: every other table's audit columns reference it.
    op.create_table(
        "users",
        *document_columns(),
        active_column(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("last_login", TZ, nullable=True),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    index_created_at("users")

    # ── announcements ─────────────────────────────────────────────────────
    op.create_table(
        "announcements",
        *document_columns(),
        active_column(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.String(1000), nullable=False),
        sa.Column("link", sa.String(500), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("priority", sa.String(20), nullable=False),
        sa.Column("published_at", TZ, nullable=True),
        sa.Column("expires_at", TZ, nullable=True),
    )
    op.create_index(
        "idx_announcements_status_active", "announcements", ["status", "is_active"]
    )
    index_created_at("announcements")

    # ── blogs ─────────────────────────────────────────────────────────────
    op.create_table(
        "blogs",
        *document_columns(),
        active_column(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("cover_image", sa.String(500), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("published_at", TZ, nullable=True),
    )
    index_created_at("blogs")

    # ── events ────────────────────────────────────────────────────────────
    op.create_table(
        "events",
        *document_columns(),
        active_column(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.String(2000), nullable=False),
        sa.Column("date", TZ, nullable=False),
        sa.Column("type", sa.String(30), nullable=False),
        sa.Column("mode", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("venue", sa.String(200)),
        sa.Column("speaker", sa.String(200)),
        sa.Column("audience", sa.String(200)),
        sa.Column("participants", sa.String(100)),
        sa.Column("focus", sa.String(500)),
        sa.Column("partners", sa.String(500)),
        sa.Column("objective", sa.String(1000)),
        sa.Column("theme", sa.String(200)),
        sa.Column("prizes", sa.String(200)),
        sa.Column("teams", sa.String(100)),
        sa.Column("duration", sa.String(100)),
        sa.Column("sessions", sa.String(100)),
        sa.Column("certification", sa.String(200)),
        sa.Column("eligibility", sa.String(500)),
        sa.Column("modules", sa.String(1000)),
        sa.Column("highlight", sa.String(500)),
    )
    op.create_index("ix_events_date", "events", ["date"])
    op.create_index("ix_events_type", "events", ["type"])
    index_created_at("events")

    # ── programs ──────────────────────────────────────────────────────────
    op.create_table(
        "programs",
        *document_columns(),
        active_column(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("duration", sa.String(100)),
        sa.Column("bullets", sa.JSON(), nullable=False),
    )
    index_created_at("programs")

    # ── mentors ───────────────────────────────────────────────────────────
    op.create_table(
        "mentors",
        *document_columns(),
        active_column(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(20), nullable=False),
        sa.Column("designation", sa.String(100), nullable=False),
        sa.Column("company", sa.String(100), nullable=False),
        sa.Column("expertise", sa.JSON(), nullable=False),
        sa.Column("bio", sa.String(1000), nullable=False),
        sa.Column("profile_image", sa.String(500), nullable=False),
        sa.Column("linkedin_profile", sa.String(500), nullable=False),
    )
    op.create_index("ix_mentors_email", "mentors", ["email"], unique=True)
    index_created_at("mentors")

    # ── contacts ──────────────────────────────────────────────────────────
    op.create_table(
        "contacts",
        *document_columns(),
        sa.Column("first_name", sa.String(50), nullable=False),
        sa.Column("last_name", sa.String(50), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("phone", sa.String(20)),
        sa.Column("organization", sa.String(100)),
        sa.Column("subject", sa.String(200), nullable=False),
        sa.Column("message", sa.String(2000), nullable=False),
        sa.Column("subscribe_newsletter", sa.Boolean(), nullable=False),
        sa.Column("source", sa.String(20), nullable=False),
        sa.Column("referrer", sa.String(200)),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("priority", sa.String(20), nullable=False),
        sa.Column("response", sa.String(2000)),
        sa.Column(
            "responded_by", sa.Uuid(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("responded_at", TZ, nullable=True),
        sa.Column("submitted_at", TZ, nullable=False),
        sa.Column("last_activity_at", TZ, nullable=False),
    )
    op.create_index("ix_contacts_email", "contacts", ["email"])
    op.create_index("idx_contacts_status_submitted", "contacts", ["status", "submitted_at"])
    index_created_at("contacts")

    # ── pre_incubation_applications ───────────────────────────────────────
    op.create_table(
        "pre_incubation_applications",
        *document_columns(),
        *tracking_columns(),
        sa.Column("applicant_name", sa.String(100), nullable=False),
        sa.Column("applicant_background", sa.String(1000)),
        sa.Column("company_name", sa.String(200), nullable=False),
        sa.Column("founding_team", sa.JSON(), nullable=False),
        sa.Column("shareholding_structure", sa.JSON(), nullable=False),
        sa.Column("partnership_details", sa.String(1000)),
        sa.Column("has_filed_it_return", sa.Boolean(), nullable=False),
        sa.Column("registration_no", sa.String(100)),
        sa.Column("registration_date", TZ),
        sa.Column("registering_authority", sa.String(200)),
        sa.Column("pan", sa.String(20)),
        sa.Column("tan", sa.String(20)),
        sa.Column("problem_addressed", sa.Text(), nullable=False),
        sa.Column("proposed_solution", sa.Text(), nullable=False),
        sa.Column("product_service_details", sa.Text(), nullable=False),
        sa.Column("target_customer", sa.Text(), nullable=False),
        sa.Column("business_plan", sa.Text(), nullable=False),
        sa.Column("market_size", sa.Text(), nullable=False),
        sa.Column("go_to_market_strategy", sa.Text(), nullable=False),
        sa.Column("revenue_model", sa.Text(), nullable=False),
        sa.Column("competitors", sa.Text(), nullable=False),
        sa.Column("funding_investment", sa.Text(), nullable=False),
        sa.Column("swot_analysis", sa.Text(), nullable=False),
        sa.Column("other_details", sa.Text()),
        sa.Column("technology_category", sa.String(30), nullable=False),
        sa.Column("technology_details", sa.Text(), nullable=False),
        sa.Column("can_be_patented", sa.Boolean(), nullable=False),
        sa.Column("conducted_patent_search", sa.Boolean(), nullable=False),
        sa.Column("applied_for_patent", sa.Boolean(), nullable=False),
        sa.Column("patent_details", sa.Text()),
        sa.Column("other_ipr_protection", sa.Text()),
        sa.Column("infrastructure_facilities", sa.Text(), nullable=False),
        sa.Column("mentors", sa.String(500), nullable=False),
        sa.Column("manpower", sa.String(500), nullable=False),
    )
    op.create_index(
        "ix_pre_incubation_applications_application_status",
        "pre_incubation_applications",
        ["application_status"],
    )
    index_created_at("pre_incubation_applications")

    # ── incubation_applications ───────────────────────────────────────────
    op.create_table(
        "incubation_applications",
        *document_columns(),
        *tracking_columns(),
        sa.Column("applicant_name", sa.String(100), nullable=False),
        sa.Column("applicant_email", sa.String(255), nullable=False),
        sa.Column("date_of_birth", TZ, nullable=False),
        sa.Column("qualification", sa.String(200), nullable=False),
        sa.Column("contact_details", sa.Text(), nullable=False),
        sa.Column("entity_type", sa.String(20), nullable=False),
        sa.Column("company_registration_details", sa.Text()),
        sa.Column("innovation_title", sa.String(200), nullable=False),
        sa.Column("prototype_time", sa.String(100), nullable=False),
        sa.Column("category", sa.String(30), nullable=False),
        sa.Column("innovation_description", sa.Text(), nullable=False),
        sa.Column("applications", sa.Text(), nullable=False),
        sa.Column("novelty", sa.Text(), nullable=False),
        sa.Column("business_model", sa.Text(), nullable=False),
        sa.Column("rnd_status", sa.Text(), nullable=False),
        sa.Column("trl_status", sa.Text(), nullable=False),
        sa.Column("team_members", sa.Text(), nullable=False),
        sa.Column("patents", sa.Text()),
        sa.Column("awards", sa.Text()),
        sa.Column("requested_period", sa.String(100), nullable=False),
        sa.Column("space_requested", sa.String(200), nullable=False),
        sa.Column("equipment_required", sa.Text(), nullable=False),
        sa.Column("other_incubator", sa.Text()),
        sa.Column("clinical_samples", sa.Text()),
        sa.Column("biosafety_clearance", sa.Text()),
        sa.Column("employees_onsite", sa.Integer(), nullable=False),
        sa.Column("fund_raised", sa.String(500), nullable=False),
        sa.Column("annual_turnover", sa.String(500), nullable=False),
        sa.Column("incubation_help", sa.Text(), nullable=False),
        sa.Column("documents", sa.Text(), nullable=False),
        sa.Column("is_student", sa.Boolean(), nullable=False),
        sa.Column("ideation_mentorship", sa.Boolean(), nullable=False),
        sa.Column("lab_access", sa.Boolean(), nullable=False),
        sa.Column("prototype_support", sa.Boolean(), nullable=False),
        sa.Column("business_planning", sa.Boolean(), nullable=False),
        sa.Column("ecosystem_exposure", sa.Boolean(), nullable=False),
        sa.Column("prior_funding", sa.Boolean(), nullable=False),
        sa.Column("funding_details", sa.Text()),
        sa.Column("collaboration_required", sa.Boolean(), nullable=False),
        sa.Column("collaboration_dept", sa.String(500)),
        sa.Column("future_vision", sa.Text(), nullable=False),
    )
    op.create_index(
        "ix_incubation_applications_application_status",
        "incubation_applications",
        ["application_status"],
    )
    op.create_index(
        "ix_incubation_applications_applicant_email",
        "incubation_applications",
        ["applicant_email"],
    )
    index_created_at("incubation_applications")


def downgrade() -> None:
    """Drop every table, dependents before users."""
    for table in (
        "incubation_applications",
        "pre_incubation_applications",
        "contacts",
        "mentors",
        "programs",
        "events",
        "blogs",
        "announcements",
        "users",
    ):
        op.drop_table(table)
