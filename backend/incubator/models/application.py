"""
Incubator Backend — Intake Application Models
===============================================

What:  Pre-incubation and incubation application forms.
Why:   Both are long multi-page forms submitted by founders and then tracked
       by admins through review, incubation and exit.
How:   Form answers are plain columns (long prose as TEXT, repeated groups
       such as the founding team as JSON); tracking columns come from
       ApplicationTrackingMixin and are shared by both tables.

State machine (not enforced; any member value is accepted on update):
    applicationStatus: submitted → under-review → approved | rejected
                       → incubated → graduated | exited
    currentStage:      pre-incubation → incubation → graduated | exited
    status:            active | inactive | graduated | exited (independent)
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Boolean, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from incubator.database import Base, UTCDateTime, utcnow
from incubator.models.mixins import DocumentMixin

APPLICATION_STATUSES = (
    "submitted",
    "under-review",
    "approved",
    "rejected",
    "incubated",
    "graduated",
    "exited",
)


class ApplicationTrackingMixin:
    application_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="submitted", index=True
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")

    submitted_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    reviewed_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    approved_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    start_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    end_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)

    funding_received: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    employees: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    achievements: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    milestones: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)


class PreIncubationApplication(DocumentMixin, ApplicationTrackingMixin, Base):
    __tablename__ = "pre_incubation_applications"

    application_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pre-incubation"
    )
    current_stage: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pre-incubation"
    )

    # ── Applicant & company ───────────────────────────────────────────────
    applicant_name: Mapped[str] = mapped_column(String(100), nullable=False)
    applicant_background: Mapped[Optional[str]] = mapped_column(String(1000))
    company_name: Mapped[str] = mapped_column(String(200), nullable=False)
    founding_team: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    shareholding_structure: Mapped[List[Dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=list
    )
    partnership_details: Mapped[Optional[str]] = mapped_column(String(1000))
    has_filed_it_return: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    registration_no: Mapped[Optional[str]] = mapped_column(String(100))
    registration_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    registering_authority: Mapped[Optional[str]] = mapped_column(String(200))
    pan: Mapped[Optional[str]] = mapped_column(String(20))
    tan: Mapped[Optional[str]] = mapped_column(String(20))

    # ── Business case ─────────────────────────────────────────────────────
    problem_addressed: Mapped[str] = mapped_column(Text, nullable=False)
    proposed_solution: Mapped[str] = mapped_column(Text, nullable=False)
    product_service_details: Mapped[str] = mapped_column(Text, nullable=False)
    target_customer: Mapped[str] = mapped_column(Text, nullable=False)
    business_plan: Mapped[str] = mapped_column(Text, nullable=False)
    market_size: Mapped[str] = mapped_column(Text, nullable=False)
    go_to_market_strategy: Mapped[str] = mapped_column(Text, nullable=False)
    revenue_model: Mapped[str] = mapped_column(Text, nullable=False)
    competitors: Mapped[str] = mapped_column(Text, nullable=False)
    funding_investment: Mapped[str] = mapped_column(Text, nullable=False)
    swot_analysis: Mapped[str] = mapped_column(Text, nullable=False)
    other_details: Mapped[Optional[str]] = mapped_column(Text)

    # ── Technology & IP ───────────────────────────────────────────────────
    technology_category: Mapped[str] = mapped_column(String(30), nullable=False)
    technology_details: Mapped[str] = mapped_column(Text, nullable=False)
    can_be_patented: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    conducted_patent_search: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    applied_for_patent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    patent_details: Mapped[Optional[str]] = mapped_column(Text)
    other_ipr_protection: Mapped[Optional[str]] = mapped_column(Text)

    # ── Resources ─────────────────────────────────────────────────────────
    infrastructure_facilities: Mapped[str] = mapped_column(Text, nullable=False)
    mentors: Mapped[str] = mapped_column(String(500), nullable=False)
    manpower: Mapped[str] = mapped_column(String(500), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<PreIncubationApplication(id={self.id}, company='{self.company_name}', "
            f"status='{self.application_status}')>"
        )


class IncubationApplication(DocumentMixin, ApplicationTrackingMixin, Base):
    __tablename__ = "incubation_applications"

    application_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default="incubation"
    )
    current_stage: Mapped[str] = mapped_column(String(20), nullable=False, default="incubation")

    # ── Applicant ─────────────────────────────────────────────────────────
    applicant_name: Mapped[str] = mapped_column(String(100), nullable=False)
    applicant_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    date_of_birth: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    qualification: Mapped[str] = mapped_column(String(200), nullable=False)
    contact_details: Mapped[str] = mapped_column(Text, nullable=False)
    entity_type: Mapped[str] = mapped_column(String(20), nullable=False)
    company_registration_details: Mapped[Optional[str]] = mapped_column(Text)

    # ── Innovation ────────────────────────────────────────────────────────
    innovation_title: Mapped[str] = mapped_column(String(200), nullable=False)
    prototype_time: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(String(30), nullable=False)
    innovation_description: Mapped[str] = mapped_column(Text, nullable=False)
    applications: Mapped[str] = mapped_column(Text, nullable=False)
    novelty: Mapped[str] = mapped_column(Text, nullable=False)
    business_model: Mapped[str] = mapped_column(Text, nullable=False)
    rnd_status: Mapped[str] = mapped_column(Text, nullable=False)
    trl_status: Mapped[str] = mapped_column(Text, nullable=False)
    team_members: Mapped[str] = mapped_column(Text, nullable=False)
    patents: Mapped[Optional[str]] = mapped_column(Text)
    awards: Mapped[Optional[str]] = mapped_column(Text)

    # ── Incubation request ────────────────────────────────────────────────
    requested_period: Mapped[str] = mapped_column(String(100), nullable=False)
    space_requested: Mapped[str] = mapped_column(String(200), nullable=False)
    equipment_required: Mapped[str] = mapped_column(Text, nullable=False)
    other_incubator: Mapped[Optional[str]] = mapped_column(Text)
    clinical_samples: Mapped[Optional[str]] = mapped_column(Text)
    biosafety_clearance: Mapped[Optional[str]] = mapped_column(Text)
    employees_onsite: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    fund_raised: Mapped[str] = mapped_column(String(500), nullable=False)
    annual_turnover: Mapped[str] = mapped_column(String(500), nullable=False)
    incubation_help: Mapped[str] = mapped_column(Text, nullable=False)
    documents: Mapped[str] = mapped_column(Text, nullable=False)

    # ── Support wanted ────────────────────────────────────────────────────
    is_student: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    ideation_mentorship: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    lab_access: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    prototype_support: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    business_planning: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    ecosystem_exposure: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    prior_funding: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    funding_details: Mapped[Optional[str]] = mapped_column(Text)
    collaboration_required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    collaboration_dept: Mapped[Optional[str]] = mapped_column(String(500))
    future_vision: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<IncubationApplication(id={self.id}, title='{self.innovation_title}', "
            f"status='{self.application_status}')>"
        )
