import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from observer import database
from observer.config import settings
from observer.database import close_db, init_db
from observer.routers import api, views

STATIC_DIR = Path(__file__).resolve().parent / "static"


def configure_logging(level: str = settings.log_level) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


app = FastAPI(title="Observer", description="Remote logging under opaque tokens")

app.mount("/assets", StaticFiles(directory=STATIC_DIR), name="assets")
app.include_router(views.router)
app.include_router(api.router)


@app.on_event("startup")
def startup() -> None:
    # `python -m observer` initializes before serving; plain uvicorn does not.
    if database.engine is None:
        init_db()


@app.on_event("shutdown")
def shutdown() -> None:
    close_db()
