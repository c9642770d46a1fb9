import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fashion_shop.api.errors import setup_error_handling
from fashion_shop.api.health import router as health_router
from fashion_shop.api.routes_products import router as products_router
from fashion_shop.api.routes_reports import router as reports_router
from fashion_shop.config import Settings, settings as default_settings
from fashion_shop.db import create_db_engine, create_session_factory, init_db

log = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # startup: the engine is owned by this app and released on shutdown
        engine = create_db_engine(settings)
        try:
            init_db(engine)
        except Exception:
            log.exception("Could not initialize database at startup")
            engine.dispose()
            raise
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)

        try:
            yield
        finally:
            engine.dispose()
            log.info("Database connections closed")

    app = FastAPI(title="Fashion Shop API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.FRONTEND_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_error_handling(app)

    app.include_router(health_router)

    app.include_router(products_router)

    app.include_router(reports_router)

    return app


app = create_app()


def run():
    log.info("Starting Fashion Shop API on port %s", default_settings.PORT)
    uvicorn.run(app, host=default_settings.APP_HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
