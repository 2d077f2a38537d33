"""
Incubator Backend — Resource Catalog
======================================

One `ResourceConfig` per resource, and `build_services()` to instantiate the
matching services against a `Database` handle. Adding a resource means adding
a config here; routes and listing behaviour follow from it.
"""

from dataclasses import dataclass
from typing import Dict

from incubator.database import Database
from incubator.models import (
    Announcement,
    Blog,
    Contact,
    Event,
    IncubationApplication,
    Mentor,
    PreIncubationApplication,
    Program,
    User,
)
from incubator.models.application import APPLICATION_STATUSES
from incubator.models.contact import CONTACT_STATUSES
from incubator.models.event import EVENT_STATUSES
from incubator.models.user import ADMIN_ROLES
from incubator.schemas import announcement, application, blog, contact, event, mentor, program
from incubator.schemas.user import AdminCreate, AdminQuery, UserRead
from incubator.services.admin_service import AdminService
from incubator.services.application_service import ApplicationService
from incubator.services.auth_service import AuthService
from incubator.services.contact_service import ContactService
from incubator.services.event_service import EventService
from incubator.services.resource_service import ResourceConfig, ResourceService, StatsSpec

ACTIVE = {"active": ("is_active", True)}
PUBLISHED_AND_ACTIVE = {"status": "published", "is_active": True}

ANNOUNCEMENTS = ResourceConfig(
    name="announcement",
    label="Announcement",
    model=Announcement,
    create_schema=announcement.AnnouncementCreate,
    update_schema=announcement.AnnouncementUpdate,
    read_schema=announcement.AnnouncementRead,
    query_schema=announcement.AnnouncementQuery,
    public_schema=announcement.AnnouncementPublic,
    public_query_schema=announcement.AnnouncementPublicQuery,
    public_filter=PUBLISHED_AND_ACTIVE,
    search_fields=("title", "description"),
    filter_fields=("status", "priority", "is_active"),
    publishable=True,
    stats=StatsSpec(
        status_field="status",
        status_values=("draft", "published", "archived"),
        counters=ACTIVE,
        distributions={
            "statusDistribution": "status",
            "priorityDistribution": "priority",
        },
    ),
)

BLOGS = ResourceConfig(
    name="blog",
    label="Blog",
    model=Blog,
    create_schema=blog.BlogCreate,
    update_schema=blog.BlogUpdate,
    read_schema=blog.BlogRead,
    query_schema=blog.BlogQuery,
    public_schema=blog.BlogPublic,
    public_query_schema=blog.BlogPublicQuery,
    public_filter=PUBLISHED_AND_ACTIVE,
    search_fields=("title", "content", "tags"),
    filter_fields=("status", "is_active"),
    publishable=True,
    stats=StatsSpec(
        status_field="status",
        status_values=("draft", "published"),
        counters=ACTIVE,
        distributions={"statusDistribution": "status"},
    ),
)

EVENTS = ResourceConfig(
    name="event",
    label="Event",
    model=Event,
    create_schema=event.EventCreate,
    update_schema=event.EventUpdate,
    read_schema=event.EventRead,
    query_schema=event.EventQuery,
    public_schema=event.EventPublic,
    public_query_schema=event.EventPublicQuery,
    public_filter={"is_active": True},
    search_fields=("title", "description", "venue", "speaker"),
    filter_fields=("type", "status", "is_active"),
    date_field="date",
    stats=StatsSpec(
        status_field="status",
        status_values=EVENT_STATUSES,
        counters=ACTIVE,
        distributions={"typeDistribution": "type"},
    ),
)

PROGRAMS = ResourceConfig(
    name="program",
    label="Program",
    model=Program,
    create_schema=program.ProgramCreate,
    update_schema=program.ProgramUpdate,
    read_schema=program.ProgramRead,
    query_schema=program.ProgramQuery,
    public_schema=program.ProgramPublic,
    public_query_schema=program.ProgramPublicQuery,
    public_filter={"is_active": True},
    search_fields=("title",),
    filter_fields=("is_active",),
    stats=StatsSpec(counters=ACTIVE),
)

MENTORS = ResourceConfig(
    name="mentor",
    label="Mentor",
    model=Mentor,
    create_schema=mentor.MentorCreate,
    update_schema=mentor.MentorUpdate,
    read_schema=mentor.MentorRead,
    query_schema=mentor.MentorQuery,
    public_schema=mentor.MentorPublic,
    public_query_schema=mentor.MentorPublicQuery,
    public_filter={"is_active": True},
    public_search_fields=("name", "designation", "company", "expertise"),
    search_fields=("name", "email", "designation", "company", "expertise"),
    filter_fields=("is_active",),
    unique_fields={"email": "Mentor with this email already exists"},
    stats=StatsSpec(counters=ACTIVE),
)

CONTACTS = ResourceConfig(
    name="contact",
    label="Contact",
    model=Contact,
    create_schema=contact.ContactCreate,
    update_schema=contact.ContactUpdate,
    read_schema=contact.ContactRead,
    query_schema=contact.ContactQuery,
    public_create=True,
    receipt_schema=contact.ContactReceipt,
    created_message="Contact form submitted successfully",
    search_fields=("first_name", "last_name", "email", "subject", "message"),
    filter_fields=("status", "priority", "source"),
    date_field="submitted_at",
    stats=StatsSpec(
        status_field="status",
        status_values=CONTACT_STATUSES,
        counters={"newsletterSubscribers": ("subscribe_newsletter", True)},
        distributions={
            "statusDistribution": "status",
            "priorityDistribution": "priority",
        },
        recent_order="submitted_at",
    ),
)

PRE_INCUBATION = ResourceConfig(
    name="pre-incubation",
    label="Pre-incubation application",
    model=PreIncubationApplication,
    create_schema=application.PreIncubationForm,
    update_schema=application.PreIncubationUpdate,
    read_schema=application.PreIncubationRead,
    query_schema=application.PreIncubationQuery,
    public_create=True,
    created_message="Pre-incubation application submitted successfully",
    search_fields=("applicant_name", "company_name", "product_service_details"),
    filter_fields=("application_status", "current_stage", "status"),
    date_field="submitted_at",
    stats=StatsSpec(
        status_field="application_status",
        status_values=APPLICATION_STATUSES,
        distributions={"stageDistribution": "current_stage"},
        recent_order="submitted_at",
    ),
)

INCUBATION = ResourceConfig(
    name="incubation",
    label="Incubation application",
    model=IncubationApplication,
    create_schema=application.IncubationForm,
    update_schema=application.IncubationUpdate,
    read_schema=application.IncubationRead,
    query_schema=application.IncubationQuery,
    public_create=True,
    created_message="Incubation application submitted successfully",
    search_fields=("applicant_name", "applicant_email", "innovation_title"),
    filter_fields=("application_status", "current_stage", "status", "category"),
    date_field="submitted_at",
    stats=StatsSpec(
        status_field="application_status",
        status_values=APPLICATION_STATUSES,
        distributions={
            "stageDistribution": "current_stage",
            "categoryDistribution": "category",
        },
        recent_order="submitted_at",
    ),
)

ADMINS = ResourceConfig(
    name="admin",
    label="Admin user",
    model=User,
    create_schema=AdminCreate,
    read_schema=UserRead,
    query_schema=AdminQuery,
    search_fields=("name", "email"),
    filter_fields=("role", "is_active"),
    unique_fields={"email": "User with this email already exists"},
    scope={"role": ADMIN_ROLES},
    stats=StatsSpec(
        counters=ACTIVE,
        distributions={"roleDistribution": "role"},
        recent_limit=0,
    ),
)


@dataclass
class Services:
    """Every service of one application, sharing one Database handle."""

    auth: AuthService
    admins: AdminService
    announcements: ResourceService
    blogs: ResourceService
    events: EventService
    programs: ResourceService
    mentors: ResourceService
    contacts: ContactService
    pre_incubation: ApplicationService
    incubation: ApplicationService

    def resources(self) -> Dict[str, ResourceService]:
        """Services served by the generic router, keyed by resource name."""
        return {
            service.config.name: service
            for service in (
                self.announcements,
                self.blogs,
                self.events,
                self.programs,
                self.mentors,
                self.contacts,
                self.pre_incubation,
                self.incubation,
            )
        }


def build_services(database: Database) -> Services:
    return Services(
        auth=AuthService(database),
        admins=AdminService(ADMINS, database),
        announcements=ResourceService(ANNOUNCEMENTS, database),
        blogs=ResourceService(BLOGS, database),
        events=EventService(EVENTS, database),
        programs=ResourceService(PROGRAMS, database),
        mentors=ResourceService(MENTORS, database),
        contacts=ContactService(CONTACTS, database),
        pre_incubation=ApplicationService(PRE_INCUBATION, database),
        incubation=ApplicationService(INCUBATION, database),
    )
