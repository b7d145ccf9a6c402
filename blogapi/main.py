"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from pymongo.errors import DuplicateKeyError, PyMongoError

from blogapi.application.exceptions import ApplicationError
from blogapi.domain.exceptions import DomainException
from blogapi.infrastructure.config.logging import setup_logging
from blogapi.infrastructure.config.settings import get_settings
from blogapi.infrastructure.persistence.database import ensure_indexes, get_database
from blogapi.presentation.api.v1 import blogs, users
from blogapi.presentation.dependencies import close_mongo_client, get_mongo_client
from blogapi.presentation.error_schemas import ValidationErrorResponse
from blogapi.presentation.exception_handlers import (
    application_error_handler,
    database_error_handler,
    domain_exception_handler,
    duplicate_key_error_handler,
    generic_exception_handler,
    validation_error_handler,
)


_settings = get_settings()

setup_logging(_settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create indexes on startup (when enabled) and release the client on shutdown."""
    if _settings.mongo_ensure_indexes:
        client = get_mongo_client(_settings)
        await ensure_indexes(get_database(client, _settings))

    logger.info(f"{_settings.app_name} started ({_settings.environment})")
    yield

    close_mongo_client()
    logger.info(f"{_settings.app_name} stopped")


app = FastAPI(
    title=_settings.app_name,
    description="Blog platform backend: accounts, posts, likes and comments on MongoDB",
    version=_settings.app_version,
    debug=_settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Starlette picks the most specific class, so DuplicateKeyError wins over PyMongoError
app.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(DuplicateKeyError, duplicate_key_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(PyMongoError, database_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(users.router, prefix="/api/v1")
app.include_router(blogs.router, prefix="/api/v1")


@app.get("/")
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "message": _settings.app_name,
        "status": "running",
        "version": _settings.app_version,
        "environment": _settings.environment,
    }


VALIDATION_ERROR_RESPONSE = {
    "description": "Validation Error",
    "content": {
        "application/json": {
            "schema": {"$ref": "#/components/schemas/ValidationErrorResponse"}
        }
    },
}


def custom_openapi():
    """
    Document validation failures the way validation_error_handler answers them.

    FastAPI advertises 422 with HTTPValidationError on every route that takes
    input; this API answers 400 with a single-error ValidationErrorResponse.
    """
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    components = schema.setdefault("components", {}).setdefault("schemas", {})
    for default_model in ("HTTPValidationError", "ValidationError"):
        components.pop(default_model, None)
    components["ValidationErrorResponse"] = ValidationErrorResponse.model_json_schema()

    for path_item in schema.get("paths", {}).values():
        for operation in path_item.values():
            responses = operation.get("responses", {}) if isinstance(operation, dict) else {}
            if responses.pop("422", None) is not None:
                responses["400"] = VALIDATION_ERROR_RESPONSE

    app.openapi_schema = schema
    return app.openapi_schema


app.openapi = custom_openapi  # type: ignore[method-assign]
