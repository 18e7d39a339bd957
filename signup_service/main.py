"""FastAPI application wiring for the signup service."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from psycopg_pool import ConnectionPool

from .api.routes import router as v1_router
from .config import Settings, get_settings
from .domain.service import AccountService
from .logging_config import configure_logging
from .presentation.controllers.signup import SignUpController
from .repository import AccountRepository, AccountStore, InMemoryAccountRepository
from .utils.email_validator_adapter import EmailValidatorAdapter

logger = logging.getLogger(__name__)

settings = get_settings()


def build_signup_controller(settings: Settings, repository: AccountStore) -> SignUpController:
    """Assemble the signup controller from its concrete collaborators."""
    return SignUpController(
        EmailValidatorAdapter(check_deliverability=settings.email_check_deliverability),
        AccountService(repository, hash_iterations=settings.password_hash_iterations),
        require_password_match=settings.require_password_match,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise shared resources (account store, controller) for the app lifecycle."""
    configure_logging(settings.log_level)
    pool: ConnectionPool | None = None
    if settings.account_store_backend == "postgres":
        pool = ConnectionPool(settings.database_url, open=False)
        pool.open()
        repository: AccountStore = AccountRepository(pool)
    else:
        repository = InMemoryAccountRepository()
    logger.info("account store using %s backend", settings.account_store_backend)
    app.state.signup_controller = build_signup_controller(settings, repository)
    try:
        yield
    finally:
        if pool is not None:
            pool.close()


app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)


@app.get("/healthz", tags=["health"])
def healthz() -> dict[str, str]:
    """Return a minimal readiness indicator used by orchestration systems."""
    return {"status": "ok"}


@app.get("/metrics")
def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


app.include_router(v1_router)
