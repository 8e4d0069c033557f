import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from cinema_backend.api.v1 import (routes_category, routes_cinema, routes_health, routes_movie,
                                   routes_reservation, routes_room, routes_sceance)
from cinema_backend.core.config import settings
from cinema_backend.core.exceptions import CinemaError
from cinema_backend.core.serialization import api_response
from cinema_backend.db import session
from cinema_backend.scripts import seed_data


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.ENV == 'development':
        await session.init_db()
        if settings.SEED_DATA:
            await seed_data.seed()
    yield
    await session.engine.dispose()


def _field_name(loc) -> str:
    # loc looks like ("body", "name") or ("query", "pageSize")
    parts = [str(part) for part in loc[1:]]
    return ".".join(parts) if parts else str(loc[0])


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        description=settings.PROJECT_DESCRIPTION,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (routes_health.router,
                   routes_movie.router,
                   routes_category.router,
                   routes_cinema.router,
                   routes_room.router,
                   routes_sceance.router,
                   routes_reservation.router):
        app.include_router(router, prefix=settings.API_PREFIX)

    @app.exception_handler(CinemaError)
    async def cinema_error_handler(request: Request, ex: CinemaError):
        logger.info(f"{request.method} {request.url.path} -> {ex.status_code}: {ex.message}")
        return api_response(request, ex.to_body(), ex.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, ex: RequestValidationError):
        errors = ex.errors()
        if any(error["loc"][0] == "path" for error in errors):
            # an identifier that cannot be parsed cannot match any row either
            return api_response(request, {"message": "Resource not found"}, 404)
        if errors[0].get("type") == "json_invalid":
            return api_response(request, {"message": "Request body is not valid JSON"}, 422)
        violations = [{"field": _field_name(error["loc"]), "message": error["msg"]} for error in errors]
        message = f"Invalid field '{violations[0]['field']}': {violations[0]['message']}"
        return api_response(request, {"message": message, "violations": violations}, 422)

    @app.get("/")
    async def root(request: Request):
        return api_response(request, {"message": "Cinema booking backend is running"})

    return app


app = create_app()
