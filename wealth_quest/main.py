import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from wealth_quest import load_settings
from wealth_quest.errors import PersistenceError
from wealth_quest.routers import scores
from wealth_quest.services.leaderboard import (
    LeaderboardStore,
    create_leaderboard_store,
    seed_demo_scores,
)

logging.basicConfig(level=load_settings.log_level)
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def create_app(
    store: LeaderboardStore | None = None,
    *,
    seed: bool | None = None,
    leaderboard_limit: int | None = None,
) -> FastAPI:
    """Build the leaderboard API.

    Args:
        store (LeaderboardStore, optional): Store to serve. Built from the settings when omitted.
        seed (bool, optional): Insert demo scores into an empty store. Defaults to the settings.
        leaderboard_limit (int, optional): Records returned by ``GET /scores``. Defaults to the settings.
    """
    if seed is None:
        seed = load_settings.seed_demo_scores
    if leaderboard_limit is None:
        leaderboard_limit = load_settings.leaderboard_limit
    leaderboard_limit = load_settings.clamp_leaderboard_limit(leaderboard_limit)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the leaderboard store and seed it.
        This function is called to start the server.
        """
        leaderboard_store = store
        if leaderboard_store is None:
            leaderboard_store = create_leaderboard_store(
                load_settings.storage_backend,
                scores_file=load_settings.scores_file,
                database_url=load_settings.database_url,
                sqlite_file=load_settings.sqlite_file,
            )
        await leaderboard_store.init()
        if seed:
            await seed_demo_scores(leaderboard_store)

        app.state.leaderboard_store = leaderboard_store
        app.state.leaderboard_limit = leaderboard_limit
        try:
            yield
        finally:
            await leaderboard_store.close()
            logging.info("Stop Server")

    app = FastAPI(title="Wealth Quest Leaderboard", lifespan=lifespan)
    app.include_router(scores.scores_router)

    @app.exception_handler(RequestValidationError)
    async def invalid_input_handler(request: Request, exc: RequestValidationError):
        logging.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": "Invalid input"})

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        logging.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logging.error(f"Unexpected failure on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("wealth_quest.main:app", host="0.0.0.0", port=8080)
