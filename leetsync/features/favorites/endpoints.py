from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Response, status

from leetsync.common.errors import AlreadyExistsError
from leetsync.features.problems.schemas import Problem
from .schemas import Favorite, FavoriteCreate
from .service import favorite_service

router = APIRouter(tags=["favorites"])


@router.post("/favorites", response_model=Favorite, status_code=status.HTTP_201_CREATED)
async def add_favorite(body: FavoriteCreate) -> Favorite:
    try:
        favorite = await favorite_service.add(body.user_id, body.problem_id)
    except AlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    if favorite is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Problem not found")
    return favorite


@router.delete("/favorites/{user_id}/{problem_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_favorite(user_id: str, problem_id: str) -> Response:
    if not await favorite_service.favorites.remove(user_id, problem_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Favorite not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/favorites/{user_id}/{problem_id}/status")
async def favorite_status(user_id: str, problem_id: str) -> dict:
    return {"isFavorited": await favorite_service.favorites.is_favorited(user_id, problem_id)}


@router.get("/users/{user_id}/favorites", response_model=List[Problem])
async def list_favorites(user_id: str) -> List[Problem]:
    return await favorite_service.list_problems(user_id)
