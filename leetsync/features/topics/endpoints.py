from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, status

from leetsync.features.problems.schemas import Problem
from .schemas import CustomTopicCreate, Topic, TopicWithCounts
from .service import topic_service

router = APIRouter(prefix="/topics", tags=["topics"])


@router.get("", response_model=List[TopicWithCounts])
async def list_topics(user_id: Optional[str] = None) -> List[TopicWithCounts]:
    return await topic_service.topics_with_counts(user_id)


@router.post("", response_model=Topic, status_code=status.HTTP_201_CREATED)
async def create_topic(body: CustomTopicCreate) -> Topic:
    return await topic_service.create_custom(body)


@router.delete("/{topic_id}")
async def delete_topic(topic_id: str, user_id: str) -> dict:
    """Only the owner's custom topics can be deleted; seeded topics report 404."""
    if not await topic_service.delete_custom(topic_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found")
    return {"message": "Topic deleted successfully"}


@router.get("/{topic_id}/problems", response_model=List[Problem])
async def list_topic_problems(topic_id: str, user_id: str) -> List[Problem]:
    problems = await topic_service.problems_in_topic(topic_id, user_id)
    if problems is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found")
    return problems
