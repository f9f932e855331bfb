# server/main.py

import sys
import logging
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from api import auth, content, upload, brain
from config import Config
from core.errors import register_exception_handlers
from database import Database


logger = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _ensure_sqlite_dir(url: str):
    prefix = "sqlite:///"
    if url.startswith(prefix) and url != "sqlite:///:memory:":
        Path(url[len(prefix):]).parent.mkdir(parents=True, exist_ok=True)


def create_app(config=Config) -> FastAPI:
    """
    Builds the API with its own database handle and upload directory.
    Tests pass a Config subclass pointing at temporary storage.
    """
    configure_logging(config.LOG_LEVEL)

    _ensure_sqlite_dir(config.DATABASE_URL)
    database = Database(config.DATABASE_URL)
    database.init_db()
    logger.info("Using database: %s", database.engine.url.render_as_string(hide_password=True))

    upload_dir = Path(config.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Serving uploads from %s", upload_dir.resolve())

    app = FastAPI(title="Brainvault")
    app.state.config = config
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(content.router)
    app.include_router(upload.router)
    app.include_router(brain.router)

    app.mount("/uploads", StaticFiles(directory=upload_dir), name="uploads")

    return app


app = create_app()
