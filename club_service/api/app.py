from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import IntegrityError
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    content = {"success": False, **error_dict}
    if exc.base_error.details:
        content["errors"] = exc.base_error.details
    return JSONResponse(status_code=exc.status_code, content=content)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} - {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "code": exc.base_error.code,
            "message": "Internal server error",
        },
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in err["loc"] if part != "body"),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    logger.warning(f"Validation error on {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "code": "VALIDATION_ERROR",
            "message": "Validation error",
            "errors": errors,
        },
    )


async def handle_integrity_error(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "success": False,
            "code": "CONFLICT",
            "message": "A record with these values already exists",
        },
    )


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Club Service API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from club_service.api.routes import (
        admin,
        announcements,
        auth,
        clubs,
        events,
        health_check,
        memberships,
        notifications,
        users,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(users.router, tags=["Users"])
    app.include_router(clubs.router, tags=["Clubs"])
    app.include_router(memberships.router, tags=["Memberships"])
    app.include_router(events.router, tags=["Events"])
    app.include_router(announcements.router, tags=["Announcements"])
    app.include_router(notifications.router, tags=["Notifications"])
    app.include_router(admin.router, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)

    return app
