from __future__ import annotations

import logging
from typing import List, Optional

from leetsync.common.cache import read_cache
from leetsync.common.errors import RepositoryError
from leetsync.db.supabase import execute, get_supabase
from .schemas import Topic, TopicCreate, TopicUpdate

logger = logging.getLogger("topics.repo")

_DEFAULTS_KEY = "topics:defaults"


class TopicRepository:
    table = "topics"

    async def list_topics(self, user_id: Optional[str] = None) -> List[Topic]:
        """Seeded default topics, plus ``user_id``'s custom topics when given."""
        defaults = read_cache.get(_DEFAULTS_KEY)
        client = await get_supabase()
        if defaults is None:
            resp = await execute(
                client.table(self.table).select("*").eq("is_custom", False).order("created_at"),
                "topics.list_defaults",
            )
            defaults = [Topic.model_validate(row) for row in resp.data or []]
            read_cache.put(_DEFAULTS_KEY, defaults)
        topics = list(defaults)
        if user_id:
            resp = await execute(
                client.table(self.table)
                .select("*")
                .eq("is_custom", True)
                .eq("user_id", user_id)
                .order("created_at"),
                "topics.list_custom",
            )
            topics.extend(Topic.model_validate(row) for row in resp.data or [])
        return topics

    async def get(self, topic_id: str) -> Optional[Topic]:
        client = await get_supabase()
        resp = await execute(
            client.table(self.table).select("*").eq("id", topic_id).limit(1), "topics.get"
        )
        return Topic.model_validate(resp.data[0]) if resp.data else None

    async def get_default_by_name(self, name: str) -> Optional[Topic]:
        client = await get_supabase()
        resp = await execute(
            client.table(self.table).select("*").eq("name", name).eq("is_custom", False).limit(1),
            "topics.get_default_by_name",
        )
        return Topic.model_validate(resp.data[0]) if resp.data else None

    async def create(self, data: TopicCreate) -> Topic:
        client = await get_supabase()
        resp = await execute(client.table(self.table).insert(data.model_dump(mode="json")), "topics.insert")
        if not resp.data:
            raise RepositoryError("Failed to create topic")
        if not data.is_custom:
            read_cache.invalidate(_DEFAULTS_KEY)
        return Topic.model_validate(resp.data[0])

    async def update(self, topic_id: str, fields: TopicUpdate) -> Optional[Topic]:
        payload = fields.model_dump(mode="json", exclude_unset=True)
        if not payload:
            return await self.get(topic_id)
        client = await get_supabase()
        resp = await execute(
            client.table(self.table).update(payload).eq("id", topic_id), "topics.update"
        )
        read_cache.invalidate(_DEFAULTS_KEY)
        return Topic.model_validate(resp.data[0]) if resp.data else None

    async def delete_custom(self, topic_id: str, user_id: str) -> bool:
        """Delete one of ``user_id``'s custom topics. Seeded defaults are never deleted."""
        client = await get_supabase()
        resp = await execute(
            client.table(self.table).delete().eq("id", topic_id).eq("is_custom", True).eq("user_id", user_id),
            "topics.delete_custom",
        )
        return bool(resp.data)


topic_repository = TopicRepository()
