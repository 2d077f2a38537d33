"""
Incubator Backend — Pure Helper Tests
=======================================

What we test:
    ✅ Pagination arithmetic (ceil, empty result, first/last page flags)
    ✅ LIKE wildcard escaping
    ✅ Stats key naming for hyphenated enum values
    ✅ Contact "time since submission" wording
"""

from datetime import datetime, timedelta, timezone

from incubator.schemas.common import Pagination
from incubator.schemas.contact import time_since
from incubator.services.resource_service import escape_like, stat_key


class TestPagination:

    def test_middle_page(self):
        """page=2, limit=5 over 12 items → 3 pages, both neighbours exist."""
        p = Pagination.build(page=2, limit=5, total=12)
        assert p.total_pages == 3
        assert p.has_next_page is True
        assert p.has_prev_page is True

    def test_last_page(self):
        p = Pagination.build(page=3, limit=5, total=12)
        assert p.has_next_page is False
        assert p.has_prev_page is True

    def test_empty_result(self):
        p = Pagination.build(page=1, limit=10, total=0)
        assert p.total_pages == 0
        assert p.has_next_page is False
        assert p.has_prev_page is False

    def test_exact_multiple(self):
        assert Pagination.build(page=1, limit=10, total=20).total_pages == 2

    def test_wire_names_are_camel_case(self):
        dumped = Pagination.build(page=1, limit=10, total=1).model_dump(by_alias=True)
        assert set(dumped) == {
            "currentPage",
            "totalPages",
            "totalItems",
            "itemsPerPage",
            "hasNextPage",
            "hasPrevPage",
        }


class TestSearchAndStatsHelpers:

    def test_escape_like(self):
        assert escape_like("50%_off") == "50\\%\\_off"
        assert escape_like("plain") == "plain"

    def test_stat_key(self):
        assert stat_key("in-progress") == "inProgress"
        assert stat_key("under-review") == "underReview"
        assert stat_key("draft") == "draft"


class TestTimeSince:

    now = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

    def test_just_now(self):
        assert time_since(self.now - timedelta(minutes=30), self.now) == "Just now"

    def test_hours(self):
        assert time_since(self.now - timedelta(hours=5), self.now) == "5 hours ago"

    def test_days(self):
        assert time_since(self.now - timedelta(days=3), self.now) == "3 days ago"

    def test_weeks(self):
        assert time_since(self.now - timedelta(days=15), self.now) == "2 weeks ago"
