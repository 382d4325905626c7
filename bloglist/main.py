# bloglist/main.py

"""Bloglist Backend - blogs, their owners, and bearer-token authentication."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse

from bloglist.configs import Settings, settings
from bloglist.db import Database
from bloglist.errors import (
    BaseAppError,
    DatabaseError,
    PasswordHashingError,
    api_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from bloglist.managers import PasswordHasher
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.monitoring import configure_logging
from bloglist.routes import blog_router, login_router, user_router
from bloglist.schemas import HealthCheckResponse
from bloglist.utils.helpers import today_str


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Parameters
    ----------
    app_settings : Settings | None
        Settings to run with, the environment-derived ``settings`` when None.

    Returns
    -------
    FastAPI
        Application with its database, password hasher and settings on
        ``app.state``.
    """
    app_settings = app_settings or settings
    configure_logging(app_settings)

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Bloglist Backend API",
        version=app_settings.APP_VERSION,
        debug=app_settings.DEBUG,
        lifespan=lifespan,
        swagger_ui_parameters={
            "docExpansion": "none",
            "operationsSorter": "method",
        },
    )

    app.state.settings = app_settings
    app.state.db = Database(app_settings)
    app.state.password_hasher = PasswordHasher(app_settings)

    configure_cors(app, app_settings)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    routes = [blog_router, user_router, login_router]
    _ = [app.include_router(router) for router in routes]

    errors = [
        (PasswordHashingError, password_hashing_exception_handler),
        (DatabaseError, database_exception_handler),
        (BaseAppError, api_exception_handler),
        (RequestValidationError, validation_exception_handler),
    ]
    _ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

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
                            "status": "ok",
                            "version": "1.0.0",
                            "timestamp": "2025-01-01 12:00:00",
                        },
                    },
                },
            },
        },
        operation_id="health_check",
    )
    async def health_check(request: Request) -> HealthCheckResponse:
        """
        Health check endpoint.

        Examples
        --------
        Request
            GET /health
        Response
            200 OK
            {"status": "ok", "version": "1.0.0", "timestamp": "2025-01-01 12:00:00"}
        """
        return HealthCheckResponse(
            status="ok",
            version=request.app.version,
            timestamp=today_str(),
        )

    return app


app = create_app()
