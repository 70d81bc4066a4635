import logging
from typing import List

from fastapi import APIRouter, Depends, Request, status

from wealth_quest.models.dc_models import ScoreInputModel
from wealth_quest.models.schema_models import ScoreRecordSchema
from wealth_quest.services.leaderboard import LeaderboardStore

scores_router = APIRouter()


def get_store(request: Request) -> LeaderboardStore:
    return request.app.state.leaderboard_store


def get_leaderboard_limit(request: Request) -> int:
    return request.app.state.leaderboard_limit


class ScoreAPI:
    @staticmethod
    @scores_router.get("/scores", response_model=List[ScoreRecordSchema])
    async def list_scores(
        store: LeaderboardStore = Depends(get_store),
        limit: int = Depends(get_leaderboard_limit),
    ):
        return await store.list_top(limit)

    @staticmethod
    @scores_router.post(
        "/scores",
        response_model=ScoreRecordSchema,
        status_code=status.HTTP_201_CREATED,
    )
    async def create_score(score: ScoreInputModel, store: LeaderboardStore = Depends(get_store)):
        record = await store.create(score)
        logging.info(f"Created score {record.id} for {record.player_name}")
        return record
