"""
Incubator Backend — ORM Models
================================

Importing this package registers every table on Base.metadata, which both
Alembic (--autogenerate) and Database.create_all rely on.
"""

from incubator.models.announcement import Announcement
from incubator.models.application import IncubationApplication, PreIncubationApplication
from incubator.models.blog import Blog
from incubator.models.contact import Contact
from incubator.models.event import Event
from incubator.models.mentor import Mentor
from incubator.models.program import Program
from incubator.models.user import User

__all__ = [
    "Announcement",
    "Blog",
    "Contact",
    "Event",
    "IncubationApplication",
    "Mentor",
    "PreIncubationApplication",
    "Program",
    "User",
]
