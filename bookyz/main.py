# bookyz/main.py

import logging
from datetime import datetime

from fastapi import FastAPI

from .config import LOG_LEVEL
from .db import make_engine, init_db
from .state import build_state
from .storage import KeyValueStore
from .routers import (
    appointments_routes,
    booking_routes,
    catalog_routes,
    profile_routes,
    stories_routes,
)

log = logging.getLogger(__name__)


def create_app(engine=None, clock=datetime.now) -> FastAPI:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))

    if engine is None:
        engine = make_engine()
    init_db(engine)

    app = FastAPI(title="BOOKYZ Booking App")
    # catalog loaded once; flow, appointments and profile live for the app's lifetime
    app.state.bookyz = build_state(KeyValueStore(engine), clock)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(catalog_routes.router)
    app.include_router(stories_routes.router)
    app.include_router(booking_routes.router)
    app.include_router(appointments_routes.router)
    app.include_router(profile_routes.router)

    log.info("BOOKYZ booking app initialized")
    return app


app = create_app()
