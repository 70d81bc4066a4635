import logging
from typing import List

from sqlalchemy import asc, desc, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from wealth_quest.errors import PersistenceError
from wealth_quest.models.dc_models import ScoreInputModel
from wealth_quest.models.schema_models import ScoreRecordSchema
from wealth_quest.models.schemas import Base, Score


class CreateTable:
    @staticmethod
    async def create_table(engine: AsyncEngine) -> None:
        """Create the scores table if not exists"""
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logging.error(f"Failed to create score table: {e}")
            raise PersistenceError("Failed to create score table") from e


class ReadData:
    @staticmethod
    async def read_top_scores(limit: int, session: AsyncSession) -> List[ScoreRecordSchema]:
        """Read the best scores from database

        Args:
            limit (int): Maximum number of records to return
            session (AsyncSession): AsyncSession object to interact with database

        Returns:
            List[ScoreRecordSchema]: Records by descending score, older first on ties
        """
        async with session:
            try:
                stmt = select(Score).order_by(desc(Score.score), asc(Score.id)).limit(limit)
                result = await session.execute(stmt)
                return [ScoreRecordSchema.model_validate(row) for row in result.scalars().all()]
            except SQLAlchemyError as e:
                logging.error(f"Failed to read score data: {e}")
                raise PersistenceError("Failed to read score data") from e

    @staticmethod
    async def count_scores(session: AsyncSession) -> int:
        async with session:
            try:
                result = await session.execute(select(func.count()).select_from(Score))
                return int(result.scalar_one())
            except SQLAlchemyError as e:
                logging.error(f"Failed to count score data: {e}")
                raise PersistenceError("Failed to count score data") from e


class CreateData:
    @staticmethod
    async def create_score_data(score: ScoreInputModel, session: AsyncSession) -> ScoreRecordSchema:
        """Create score data

        Args:
            score (ScoreInputModel): Submitted score of a finished game
            session (AsyncSession): AsyncSession object to interact with database

        Returns:
            ScoreRecordSchema: The stored record with its id and creation time
        """
        async with session:
            try:
                new_score = Score(
                    player_name=score.player_name,
                    score=score.score,
                    tier=score.tier,
                    passive_income=score.passive_income,
                    streak=score.streak,
                    best_streak=score.best_streak,
                    coins=score.coins,
                    xp=score.xp,
                )
                session.add(new_score)
                await session.commit()
                await session.refresh(new_score)
                return ScoreRecordSchema.model_validate(new_score)
            except SQLAlchemyError as e:
                await session.rollback()
                logging.error(f"Failed to create score data: {e}")
                raise PersistenceError("Failed to create score data") from e
