import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI

from .catalog import catalog_router
from .commands import AddRecordCommand
from .display import get_formatter
from .interpreter import TextCommandInterpreter
from .models import RecordBuilder
from .settings import Settings
from .storage import CatalogStore


# Optional .env next to the project root, loaded before settings are read
load_dotenv(Path(__file__).resolve().parents[1] / ".env")

logger = logging.getLogger(__name__)


def seed_sample(store: CatalogStore, interpreter: TextCommandInterpreter) -> None:
    """Load the two demo records, one via the builder and one via a text command."""
    record = (
        RecordBuilder()
        .title("Măștile fricii")
        .author("Camelia Cavadia")
        .identifier("1234567890")
        .build()
    )
    AddRecordCommand(store, record).execute()
    interpreter.interpret("add Oamenii_din_Dublin James_Joyce 0987654321")


def create_app(
    store: Optional[CatalogStore] = None, settings: Optional[Settings] = None
) -> FastAPI:
    settings = settings or Settings()
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)
    logging.basicConfig(level=level)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)

    app = FastAPI(
        title="Book Catalog",
        description="In-memory book catalogue with add, remove, search and text commands.",
        version="1.0.0",
    )

    # One store per application; routes reach it through app.state
    app.state.store = store if store is not None else CatalogStore()
    app.state.formatter = get_formatter(settings.DISPLAY_STYLE)
    app.state.interpreter = TextCommandInterpreter(app.state.store)

    if settings.SEED_SAMPLE:
        seed_sample(app.state.store, app.state.interpreter)
        logger.info("Seeded %d sample record(s)", len(app.state.store))

    @app.get("/")
    def health_check():
        return {"status": "ok", "records": len(app.state.store)}

    app.include_router(catalog_router)
    return app


app = create_app()
