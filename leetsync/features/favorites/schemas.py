from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from leetsync.common.schemas import Row


class Favorite(Row):
    id: str
    user_id: str
    problem_id: str
    created_at: Optional[datetime] = None


class FavoriteCreate(BaseModel):
    user_id: str
    problem_id: str
