"""
FastAPI application factory.

Run with ``uvicorn --factory edupath.app:create_app``.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from edupath.core.config import Settings, get_settings
from edupath.core.logging_config import setup_logging
from edupath.core.security import CredentialHasher
from edupath.domain.records import Account, Application, Institution
from edupath.repositories.json_storage import CollectionStore
from edupath.routers import applications as applications_router
from edupath.routers import auth as auth_router
from edupath.routers import universities as universities_router
from edupath.services.account_service import AccountRegistry
from edupath.services.application_service import ApplicationLedger
from edupath.services.errors import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    ServiceError,
    UnauthorizedError,
)
from edupath.services.institution_service import InstitutionCatalog

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[ServiceError], int] = {
    InvalidInputError: 400,
    UnauthorizedError: 401,
    ForbiddenError: 403,
    NotFoundError: 404,
    ConflictError: 409,
}


def status_for(exc: ServiceError) -> int:
    for kind, code in _STATUS_BY_ERROR.items():
        if isinstance(exc, kind):
            return code
    return 500


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    code = status_for(exc)
    logger.info("%s %s -> %d (%s)", request.method, request.url.path, code, exc.message)
    return JSONResponse(status_code=code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed ids answer 404 and malformed bodies/queries 400, both as ``{"error": ...}``."""
    errors = exc.errors()
    if any(err.get("loc", ("",))[0] == "path" for err in errors):
        code, message = 404, "Not found"
    elif any(err.get("type") == "json_invalid" for err in errors):
        code, message = 400, "Invalid JSON body"
    else:
        code, message = 400, "Invalid request"
    logger.info("%s %s -> %d (%s)", request.method, request.url.path, code, message)
    return JSONResponse(status_code=code, content={"error": message})


def build_catalog(settings: Settings) -> InstitutionCatalog:
    return InstitutionCatalog(
        CollectionStore(settings.universities_file, Institution.from_dict, Institution.to_dict, envelope="items")
    )


def build_services(settings: Settings, hasher: CredentialHasher | None = None) -> tuple[AccountRegistry, InstitutionCatalog, ApplicationLedger]:
    """Wire one store per collection file and the services on top of them."""
    accounts = CollectionStore(settings.accounts_file, Account.from_dict, Account.to_dict, envelope="users")
    applications = CollectionStore(settings.applications_file, Application.from_dict, Application.to_dict)
    registry = AccountRegistry(accounts, hasher)
    return registry, build_catalog(settings), ApplicationLedger(applications, registry)


def create_app(settings: Optional[Settings] = None, hasher: CredentialHasher | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="EduPath API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    registry, catalog, ledger = build_services(settings, hasher)
    ledger.store.ensure_exists()
    app.state.settings = settings
    app.state.account_registry = registry
    app.state.institution_catalog = catalog
    app.state.application_ledger = ledger

    app.include_router(auth_router.router)
    app.include_router(universities_router.router)
    app.include_router(applications_router.router)
    logger.info("EduPath API ready (data dir: %s)", settings.data_dir)
    return app
