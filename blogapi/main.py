# blogapi/main.py

"""Blog REST API - users own blogs, exposed as hypermedia-linked resources."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded

from blogapi.configs import settings
from blogapi.db import check_db
from blogapi.errors import (
    BlogError,
    DatabaseError,
    UserError,
    blog_exception_handler,
    database_exception_handler,
    user_exception_handler,
    validation_exception_handler,
)
from blogapi.managers import limiter, rate_limit_exceeded_handler
from blogapi.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from blogapi.routes import blog_router, user_router
from blogapi.schemas import HealthCheckResponse
from blogapi.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="CRUD REST API for users and the blogs they own",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

routes = [
    user_router,
    blog_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (BlogError, blog_exception_handler),
    (UserError, user_exception_handler),
    (DatabaseError, database_exception_handler),
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 10:00:00",
                        "database": "connected",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> ORJSONResponse:
    """
    Health check endpoint.

    Returns
    -------
    ORJSONResponse
        `status` is "ok" when the database answers, "degraded" otherwise.
    """
    database_ok = await check_db()

    response_data = HealthCheckResponse(
        version=app.version,
        status="ok" if database_ok else "degraded",
        timestamp=today_str(),
        database="connected" if database_ok else "unavailable",
    )

    return ORJSONResponse(response_data.model_dump())


if __name__ == "__main__":
    from uvicorn import run

    run(app, host="127.0.0.1", port=8000, log_level=settings.LOG_LEVEL)
