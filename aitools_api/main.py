# aitools_api/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .catalog import catalog_router
from .catalog.errors import CatalogError
from .catalog.store import ToolStore, load_store
from .config import API_DESCRIPTION, API_NAME, Settings
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(store: Optional[ToolStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around a tools store.

    When ``store`` is omitted the dataset named by ``settings.data_file``
    is loaded; a broken dataset stops startup with ``DatasetError``.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)
    if store is None:
        store = load_store(settings.data_file)

    app = FastAPI(
        title=API_NAME,
        description=API_DESCRIPTION,
        version=settings.api_version,
    )
    app.state.store = store
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    # Base route for quick checks
    @app.get("/")
    def health_check():
        return {"status": "ok", "tools_loaded": len(app.state.store)}

    app.include_router(catalog_router)
    return app
