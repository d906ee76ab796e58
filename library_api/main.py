"""
Main entrypoint for the Library Catalog API.

``create_app`` builds and configures the FastAPI application: logging,
the catalog store, error handlers, request logging and routes. The
module-level ``app`` is created at import time so that uvicorn can
serve it directly::

    uvicorn library_api.main:app --port 8080
"""

import json
import logging
import time
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .catalog import CatalogStore, catalog_router
from .config import Settings, settings as default_settings
from .errors import register_exception_handlers
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


class IndentedJSONResponse(JSONResponse):
    """JSON response pretty-printed with a four space indent."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=4,
        ).encode("utf-8")


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[CatalogStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use. Defaults to the values read from the
        environment at import time.
    catalog : Optional[CatalogStore]
        Store to serve. When omitted a new one is created, seeded
        with the sample books unless ``settings.seed_catalog`` is off.
        Each application owns its own store, so two apps never share
        state.

    Returns
    -------
    FastAPI
        A configured application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    response_class = IndentedJSONResponse if settings.indent_json else JSONResponse
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description="In-memory book catalog with checkout and return of copies.",
        default_response_class=response_class,
    )

    if catalog is None:
        catalog = CatalogStore.seeded() if settings.seed_catalog else CatalogStore()
    app.state.catalog = catalog
    logger.info("Catalog ready with %d books", len(catalog))

    register_exception_handlers(app, response_class)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.get("/")
    def health_check():
        return {"status": "ok", "books": len(app.state.catalog)}

    app.include_router(catalog_router)
    return app


app = create_app()
