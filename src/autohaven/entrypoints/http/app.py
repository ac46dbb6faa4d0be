import logging

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from autohaven.entrypoints.http.exception_handlers import register_exception_handlers
from autohaven.entrypoints.http.routes.cars import router as cars_router
from autohaven.entrypoints.http.routes.favorites import router as favorites_router
from autohaven.entrypoints.http.routes.health import router as health_router
from autohaven.entrypoints.http.routes.messages import router as messages_router
from autohaven.entrypoints.http.routes.reviews import router as reviews_router
from autohaven.entrypoints.http.routes.users import router as users_router
from autohaven.infra.config import session_secret

logger = logging.getLogger(__name__)


def build_app() -> FastAPI:
    app = FastAPI(
        title="AutoHaven API",
        description="""
        Car marketplace API: listings, search, favorites, messaging and seller reviews.

        ## Features
        - Search listings by make, model, condition, fuel, transmission,
          price/year/mileage ranges and required features
        - Create, edit and delete your own listings
        - Save favorites, message sellers, review sellers

        ## Authentication
        Session cookie. Endpoints that act on behalf of a user answer 401
        without one.

        ## Error Handling
        All errors return `{"detail", "code", "errors"?}` JSON.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        contact={
            "name": "AutoHaven Team",
            "email": "dev@autohaven.example",
        },
        license_info={
            "name": "Proprietary",
        },
    )

    app.add_middleware(SessionMiddleware, secret_key=session_secret())

    register_exception_handlers(app)

    app.include_router(health_router)
    for router in (cars_router, favorites_router, users_router, messages_router, reviews_router):
        app.include_router(router, prefix="/api")

    logger.debug("Application built")
    return app


app = build_app()
