"""
Incubator Backend — Intake Application Schemas
================================================

What:  Public intake forms for pre-incubation and incubation, the admin-side
       tracking fields, and the read/query contracts for both.
How:   The *Form models are what applicants submit. ApplicationTracking holds
       the fields only admins change. Update schemas are the partial form of
       (form + tracking), so an admin can correct an answer or move the
       application along in one request.

Long answers carry minimum lengths (50/100 characters) so that a submission
cannot consist of placeholders.
"""

from datetime import datetime
from typing import Annotated, List, Literal, Optional

from pydantic import Field

from incubator.schemas.common import ApiModel, DocumentRead, Email, ListQuery, UtcDateTime
from incubator.validation import make_partial

ApplicationStatus = Literal[
    "submitted", "under-review", "approved", "rejected", "incubated", "graduated", "exited"
]
ApplicationStage = Literal["pre-incubation", "incubation", "graduated", "exited"]
PortfolioStatus = Literal["active", "inactive", "graduated", "exited"]
TechnologyCategory = Literal[
    "to-be-developed", "self-developed", "acquired", "licensed", "off-the-shelf"
]
InnovationCategory = Literal["Process", "Product", "New Application", "Other"]
EntityType = Literal["startup", "individual"]

ShortAnswer = Annotated[str, Field(min_length=50, max_length=1000)]
LongAnswer = Annotated[str, Field(min_length=100, max_length=2000)]
Summary = Annotated[str, Field(min_length=20, max_length=500)]
ListEntry = Annotated[str, Field(min_length=1, max_length=500)]


class TeamMember(ApiModel):
    name: str = Field(min_length=1, max_length=100)
    address: Optional[str] = Field(default=None, max_length=500)
    contact: Optional[str] = Field(default=None, max_length=200)


class Shareholder(ApiModel):
    name: str = Field(min_length=1, max_length=100)
    shares: int = Field(default=0, ge=0)
    percentage: float = Field(default=0, ge=0, le=100)
    designation: Optional[str] = Field(default=None, max_length=100)


class ApplicationTracking(ApiModel):
    application_status: ApplicationStatus = "submitted"
    current_stage: ApplicationStage = "pre-incubation"
    status: PortfolioStatus = "active"
    start_date: Optional[UtcDateTime] = None
    end_date: Optional[UtcDateTime] = None
    funding_received: float = Field(default=0, ge=0)
    employees: int = Field(default=0, ge=0)
    achievements: List[ListEntry] = Field(default_factory=list)
    milestones: List[ListEntry] = Field(default_factory=list)


class ApplicationDates(ApiModel):
    """System-stamped review timeline."""
    application_type: str
    submitted_at: datetime
    reviewed_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None


# ══════════════════════════════════════════════════════════════════════════
# Pre-incubation
# ══════════════════════════════════════════════════════════════════════════


class PreIncubationForm(ApiModel):
    # ── Applicant & company ───────────────────────────────────────────────
    applicant_name: str = Field(min_length=1, max_length=100)
    applicant_background: Optional[str] = Field(default=None, max_length=1000)
    company_name: str = Field(min_length=1, max_length=200)
    founding_team: List[TeamMember] = Field(default_factory=list)
    shareholding_structure: List[Shareholder] = Field(default_factory=list)
    partnership_details: Optional[str] = Field(default=None, max_length=1000)
    has_filed_it_return: bool = Field(default=False, alias="hasFiledITReturn")
    registration_no: Optional[str] = Field(default=None, max_length=100)
    registration_date: Optional[UtcDateTime] = None
    registering_authority: Optional[str] = Field(default=None, max_length=200)
    pan: Optional[str] = Field(default=None, max_length=20)
    tan: Optional[str] = Field(default=None, max_length=20)

    # ── Business case ─────────────────────────────────────────────────────
    problem_addressed: ShortAnswer
    proposed_solution: ShortAnswer
    product_service_details: LongAnswer
    target_customer: LongAnswer
    business_plan: LongAnswer
    market_size: LongAnswer
    go_to_market_strategy: LongAnswer
    revenue_model: LongAnswer
    competitors: LongAnswer
    funding_investment: LongAnswer
    swot_analysis: LongAnswer
    other_details: Optional[str] = Field(default=None, max_length=2000)

    # ── Technology & IP ───────────────────────────────────────────────────
    technology_category: TechnologyCategory
    technology_details: ShortAnswer
    can_be_patented: bool = False
    conducted_patent_search: bool = False
    applied_for_patent: bool = False
    patent_details: Optional[str] = Field(default=None, max_length=1000)
    other_ipr_protection: Optional[str] = Field(
        default=None, max_length=1000, alias="otherIPRProtection"
    )

    # ── Resources ─────────────────────────────────────────────────────────
    infrastructure_facilities: ShortAnswer
    mentors: Summary
    manpower: Summary


class PreIncubationAdminFields(PreIncubationForm, ApplicationTracking):
    pass


PreIncubationUpdate = make_partial(PreIncubationAdminFields, "PreIncubationUpdate")


class PreIncubationRead(DocumentRead, ApplicationDates, PreIncubationAdminFields):
    pass


class PreIncubationQuery(ListQuery):
    application_status: Optional[ApplicationStatus] = None
    current_stage: Optional[ApplicationStage] = None
    status: Optional[PortfolioStatus] = None
    sort_by: Literal[
        "submittedAt", "applicantName", "companyName", "applicationStatus"
    ] = "submittedAt"


# ══════════════════════════════════════════════════════════════════════════
# Incubation
# ══════════════════════════════════════════════════════════════════════════


class IncubationForm(ApiModel):
    # ── Applicant ─────────────────────────────────────────────────────────
    applicant_name: str = Field(min_length=1, max_length=100)
    applicant_email: Email
    date_of_birth: UtcDateTime
    qualification: str = Field(min_length=1, max_length=200)
    contact_details: ShortAnswer
    entity_type: EntityType
    company_registration_details: Optional[str] = Field(default=None, max_length=1000)

    # ── Innovation ────────────────────────────────────────────────────────
    innovation_title: str = Field(min_length=1, max_length=200)
    prototype_time: str = Field(min_length=1, max_length=100)
    category: InnovationCategory
    innovation_description: LongAnswer
    applications: ShortAnswer
    novelty: ShortAnswer
    business_model: ShortAnswer
    rnd_status: ShortAnswer
    trl_status: ShortAnswer
    team_members: ShortAnswer
    patents: Optional[str] = Field(default=None, max_length=1000)
    awards: Optional[str] = Field(default=None, max_length=1000)

    # ── Incubation request ────────────────────────────────────────────────
    requested_period: str = Field(min_length=1, max_length=100)
    space_requested: str = Field(min_length=1, max_length=200)
    equipment_required: ShortAnswer
    other_incubator: Optional[str] = Field(default=None, max_length=1000)
    clinical_samples: Optional[str] = Field(default=None, max_length=1000)
    biosafety_clearance: Optional[str] = Field(default=None, max_length=1000)
    employees_onsite: int = Field(default=0, ge=0)
    fund_raised: Summary
    annual_turnover: Summary
    incubation_help: ShortAnswer
    documents: Annotated[str, Field(min_length=20, max_length=1000)]

    # ── Support wanted ────────────────────────────────────────────────────
    is_student: bool = False
    ideation_mentorship: bool = False
    lab_access: bool = False
    prototype_support: bool = False
    business_planning: bool = False
    ecosystem_exposure: bool = False
    prior_funding: bool = False
    funding_details: Optional[str] = Field(default=None, max_length=1000)
    collaboration_required: bool = False
    collaboration_dept: Optional[str] = Field(default=None, max_length=500)
    future_vision: ShortAnswer


class IncubationTracking(ApplicationTracking):
    current_stage: ApplicationStage = "incubation"


class IncubationAdminFields(IncubationForm, IncubationTracking):
    pass


IncubationUpdate = make_partial(IncubationAdminFields, "IncubationUpdate")


class IncubationRead(DocumentRead, ApplicationDates, IncubationAdminFields):
    pass


class IncubationQuery(ListQuery):
    application_status: Optional[ApplicationStatus] = None
    current_stage: Optional[ApplicationStage] = None
    status: Optional[PortfolioStatus] = None
    category: Optional[InnovationCategory] = None
    sort_by: Literal[
        "submittedAt", "applicantName", "innovationTitle", "applicationStatus"
    ] = "submittedAt"
