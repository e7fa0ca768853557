from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pingpong.database import engine, Base
from pingpong.exceptions import InvalidArgument, NotFound, StorageUnavailable
from pingpong.logging_config import setup_logging
from pingpong.models import group, match, player, score  # noqa: F401  register tables
from pingpong.routers import (
    home_router,
    player_router,
    group_router,
    match_router,
    playoff_router,
    schedule_router
)

setup_logging()

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Table Tennis Tournament")


def _error_handler(status_code: int):
    async def handler(request: Request, exc: Exception):
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})
    return handler


app.add_exception_handler(InvalidArgument, _error_handler(400))
app.add_exception_handler(NotFound, _error_handler(404))
app.add_exception_handler(StorageUnavailable, _error_handler(503))

app.include_router(home_router.router)
app.include_router(player_router.router)
app.include_router(group_router.router)
app.include_router(match_router.router)
app.include_router(playoff_router.router)
app.include_router(schedule_router.router)
