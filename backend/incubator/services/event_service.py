"""
Incubator Backend — Event Service
===================================

Generic behaviour plus the upcoming-events view: events still marked
upcoming, active, dated now or later, soonest first.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import select

from incubator.database import utcnow
from incubator.services.resource_service import ResourceService, load_people

logger = logging.getLogger(__name__)


class EventService(ResourceService):

    async def upcoming(self, limit: int = 10, schema=None) -> List[Any]:
        model = self.model
        stmt = (
            select(model)
            .where(
                model.status == "upcoming",
                model.is_active.is_(True),
                model.date >= utcnow(),
            )
            .order_by(model.date.asc(), model.id.asc())
            .limit(limit)
        )
        async with self.database.session() as session:
            rows = (await session.execute(stmt)).scalars().all()
            people = await load_people(session, rows)
        return [self._read(row, people, schema or self.config.public_schema) for row in rows]

    async def extra_stats(self) -> Dict[str, Any]:
        events = await self.upcoming(limit=5, schema=self.config.read_schema)
        return {"upcomingEvents": [event.model_dump(mode="json", by_alias=True) for event in events]}
